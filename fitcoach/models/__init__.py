from fitcoach.models.user import User
from fitcoach.models.profile import FitnessProfile
from fitcoach.models.nutrition import MealEntry
from fitcoach.models.workout import (
    WorkoutTemplate,
    WorkoutExerciseTemplate,
    WorkoutLog,
    WorkoutSet,
)
from fitcoach.models.ai_feedback import AiFeedback, FeedbackType

__all__ = [
    "User",
    "FitnessProfile",
    "MealEntry",
    "WorkoutTemplate",
    "WorkoutExerciseTemplate",
    "WorkoutLog",
    "WorkoutSet",
    "AiFeedback",
    "FeedbackType",
]
