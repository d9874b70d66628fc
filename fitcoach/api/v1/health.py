import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fitcoach.api.deps import get_db
from fitcoach.core.config import settings
from fitcoach.core.db import engine
from fitcoach.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {
        "status": "ok",
        "environment": settings.ENVIRONMENT,
        "db": engine is not None,
        "ai": bool(settings.AI_API_KEY),
    }


@router.get("/db-health")
def db_health(db: Session = Depends(get_db)):
    try:
        user_count = db.query(User).count()
    except SQLAlchemyError:
        logger.exception("DB health check failed")
        raise HTTPException(500, "DB connection failed")
    return {"status": "ok", "userCount": user_count}
