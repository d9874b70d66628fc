import logging

from fastapi import FastAPI

import fitcoach.models  # noqa: F401  (registers tables on Base.metadata)
from fitcoach.core.config import settings
from fitcoach.core.db import Base, engine
from fitcoach.api.v1.health import router as health_router
from fitcoach.api.v1.users import router as users_router
from fitcoach.api.v1.profile import router as profile_router
from fitcoach.api.v1.nutrition import router as nutrition_router
from fitcoach.api.v1.workouts import router as workouts_router
from fitcoach.api.v1.stats import router as stats_router
from fitcoach.api.v1.ai import router as ai_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(title="FitCoach", version="1.0.0")

if engine:
    Base.metadata.create_all(bind=engine)
else:
    logger.warning("DATABASE_URL is not set; data endpoints will answer 503")

if not settings.AI_API_KEY:
    logger.warning("AI_API_KEY is not set; AI endpoints will fail until you configure it")

app.include_router(health_router, prefix="/v1")
app.include_router(users_router, prefix="/v1")
app.include_router(profile_router, prefix="/v1")
app.include_router(nutrition_router, prefix="/v1")
app.include_router(workouts_router, prefix="/v1")
app.include_router(stats_router, prefix="/v1")
app.include_router(ai_router, prefix="/v1")
