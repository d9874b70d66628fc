from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from fitcoach.core.db import SessionLocal, engine
from fitcoach.core.periods import InvalidDateError, Period, resolve_range
from fitcoach.models.user import User


def get_db():
    if not engine or not SessionLocal:
        raise HTTPException(503, "DB not configured (DATABASE_URL missing)")

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_user(
    x_user_id: int | None = Header(default=None),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the calling user from the X-User-Id header.

    Token issuance/verification lives in front of this service; by the time a
    request reaches us the header carries an already-authenticated id.
    """
    if x_user_id is None:
        raise HTTPException(401, "Missing X-User-Id header")

    user = db.get(User, x_user_id)
    if user is None:
        raise HTTPException(401, "Unknown user")
    return user


def resolve_period(raw_from: str | None, raw_to: str | None, default_span_days: int) -> Period:
    try:
        period = resolve_range(raw_from, raw_to, default_span_days)
    except InvalidDateError as e:
        raise HTTPException(400, str(e))

    if period.is_inverted:
        raise HTTPException(400, "'from' must not be after 'to'")
    return period
