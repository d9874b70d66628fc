from fastapi import APIRouter, Depends, HTTPException
from pydantic import field_validator
from sqlalchemy.orm import Session

from fitcoach.api.deps import get_current_user, get_db
from fitcoach.api.v1.schemas import CamelModel, UserOut
from fitcoach.models.user import User

router = APIRouter(prefix="/users", tags=["users"])


class UserIn(CamelModel):
    email: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = v.strip().lower()
        if "@" not in v or v.startswith("@") or v.endswith("@"):
            raise ValueError("email must be a valid address")
        return v


@router.post("", status_code=201)
def create_user(payload: UserIn, db: Session = Depends(get_db)):
    """
    Register a user. The returned id is what clients send as X-User-Id.
    """
    existing = db.query(User).filter(User.email == payload.email).one_or_none()
    if existing:
        raise HTTPException(409, "Email already registered")

    user = User(email=payload.email)
    db.add(user)
    db.commit()
    db.refresh(user)

    return {"user": UserOut.model_validate(user).model_dump(by_alias=True)}


@router.get("/me")
def get_me(user: User = Depends(get_current_user)):
    return {"user": UserOut.model_validate(user).model_dump(by_alias=True)}
