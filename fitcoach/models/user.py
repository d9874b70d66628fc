from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from fitcoach.core.db import Base, utc_now


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)

    profile = relationship("FitnessProfile", back_populates="user", uselist=False)

    created_at = Column(DateTime, default=utc_now)
