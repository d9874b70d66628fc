from enum import Enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from fitcoach.core.db import Base, utc_now


class FeedbackType(str, Enum):
    WEEKLY_REVIEW = "WEEKLY_REVIEW"
    WORKOUT_PLAN = "WORKOUT_PLAN"
    MEAL_PLAN = "MEAL_PLAN"


class AiFeedback(Base):
    __tablename__ = "ai_feedback"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    date_from = Column(DateTime, nullable=False)
    date_to = Column(DateTime, nullable=False)
    feedback_type = Column(String(32), nullable=False)

    # Exact prompt body sent to the model, and its answer
    input_summary = Column(Text, nullable=False)
    result_text = Column(Text, nullable=False)

    created_at = Column(DateTime, default=utc_now, index=True)
