from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String

from fitcoach.core.db import Base, utc_now


class MealEntry(Base):
    __tablename__ = "meal_entry"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Naive UTC instant; only its calendar day matters for aggregation
    date = Column(DateTime, nullable=False, index=True)
    name = Column(String(255), nullable=False)

    calories = Column(Float, nullable=False)
    protein = Column(Float, nullable=False)
    carbs = Column(Float, nullable=False)
    fat = Column(Float, nullable=False)

    created_at = Column(DateTime, default=utc_now)
