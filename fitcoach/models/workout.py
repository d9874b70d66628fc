from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from fitcoach.core.db import Base, utc_now


class WorkoutTemplate(Base):
    __tablename__ = "workout_template"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)

    exercises = relationship(
        "WorkoutExerciseTemplate",
        back_populates="workout_template",
        order_by="WorkoutExerciseTemplate.order_index",
        cascade="all, delete-orphan",
    )

    created_at = Column(DateTime, default=utc_now)


class WorkoutExerciseTemplate(Base):
    __tablename__ = "workout_exercise_template"

    id = Column(Integer, primary_key=True, index=True)
    workout_template_id = Column(Integer, ForeignKey("workout_template.id"), nullable=False)

    name = Column(String(255), nullable=False)
    muscle_group = Column(String(64))    # e.g. "Chest", "Back"
    sets = Column(Integer, nullable=False)
    reps = Column(Integer, nullable=False)
    rir = Column(Integer, nullable=False)
    order_index = Column(Integer, nullable=False, default=0)

    workout_template = relationship("WorkoutTemplate", back_populates="exercises")


class WorkoutLog(Base):
    __tablename__ = "workout_log"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    workout_template_id = Column(Integer, ForeignKey("workout_template.id"), nullable=True)

    # Naive UTC instant of the session
    date = Column(DateTime, nullable=False, index=True)
    notes = Column(Text)

    workout_template = relationship("WorkoutTemplate")
    sets = relationship(
        "WorkoutSet",
        back_populates="workout_log",
        order_by="WorkoutSet.set_index",
        cascade="all, delete-orphan",
    )

    created_at = Column(DateTime, default=utc_now)


class WorkoutSet(Base):
    __tablename__ = "workout_set"

    id = Column(Integer, primary_key=True, index=True)
    workout_log_id = Column(Integer, ForeignKey("workout_log.id"), nullable=False, index=True)
    exercise_template_id = Column(
        Integer, ForeignKey("workout_exercise_template.id"), nullable=False
    )

    set_index = Column(Integer, nullable=False)
    weight_kg = Column(Float, nullable=False)
    reps = Column(Integer, nullable=False)
    rir = Column(Integer)    # reps in reserve, optional

    workout_log = relationship("WorkoutLog", back_populates="sets")
    exercise_template = relationship("WorkoutExerciseTemplate")
