from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from fitcoach.core.config import settings

Base = declarative_base()


def utc_now() -> datetime:
    # timestamp columns hold naive UTC values
    return datetime.now(timezone.utc).replace(tzinfo=None)


engine = None
SessionLocal = None

if settings.DATABASE_URL:
    connect_args = {}
    if settings.DATABASE_URL.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    engine = create_engine(settings.DATABASE_URL, future=True, connect_args=connect_args)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
