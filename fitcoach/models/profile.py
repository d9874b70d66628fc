from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from fitcoach.core.db import Base, utc_now


class FitnessProfile(Base):
    """
    Body and goal attributes for one user. At most one row per user; a user
    without a row simply has no macro targets yet.
    """

    __tablename__ = "fitness_profile"
    __table_args__ = (UniqueConstraint("user_id", name="uq_fitness_profile_user"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    gender = Column(String(16), nullable=False)          # male / female
    age = Column(Integer, nullable=False)
    height_cm = Column(Float, nullable=False)
    weight_kg = Column(Float, nullable=False)
    activity_level = Column(String(16), nullable=False)  # light / moderate / high
    goal_type = Column(String(16), nullable=False)       # LOSE_FAT / GAIN_MUSCLE / MAINTAIN

    # Free text, e.g. "Mon,Wed,Fri"
    training_days = Column(String(128), nullable=False)

    user = relationship("User", back_populates="profile")

    created_at = Column(DateTime, default=utc_now)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now)
