import os

# keep the module-level engine unset; tests bind their own in-memory database
os.environ["DATABASE_URL"] = ""
os.environ["AI_API_KEY"] = ""
os.environ["TIMEZONE"] = "UTC"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from fitcoach.api.deps import get_db  # noqa: E402
from fitcoach.core.db import Base  # noqa: E402
from fitcoach.main import app  # noqa: E402
from fitcoach.services.ai_coach import AiCoachError, get_ai_coach  # noqa: E402


class FakeCoach:
    """Stands in for the LLM client; records every prompt it receives."""

    def __init__(self):
        self.calls: list[tuple[str, str]] = []
        self.error: Exception | None = None

    def _answer(self, kind: str, summary: str) -> str:
        self.calls.append((kind, summary))
        if self.error is not None:
            raise self.error
        return f"{kind} answer"

    def weekly_review(self, summary: str) -> str:
        return self._answer("weekly_review", summary)

    def workout_plan(self, summary: str) -> str:
        return self._answer("workout_plan", summary)

    def meal_plan(self, summary: str) -> str:
        return self._answer("meal_plan", summary)


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def coach():
    return FakeCoach()


@pytest.fixture
def client(session_factory, coach):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_ai_coach] = lambda: coach
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    counter = {"n": 0}

    def _make(email: str | None = None) -> dict:
        counter["n"] += 1
        email = email or f"user{counter['n']}@example.com"
        res = client.post("/v1/users", json={"email": email})
        assert res.status_code == 201, res.text
        return {"X-User-Id": str(res.json()["user"]["id"])}

    return _make


@pytest.fixture
def auth(make_user):
    return make_user()


@pytest.fixture
def failing_coach(coach):
    coach.error = AiCoachError("upstream down")
    return coach


@pytest.fixture
def profile_payload():
    return {
        "gender": "male",
        "age": 22,
        "heightCm": 180,
        "weightKg": 75,
        "activityLevel": "moderate",
        "goalType": "LOSE_FAT",
        "trainingDays": "Mon,Wed,Fri",
    }
