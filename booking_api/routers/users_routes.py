# booking_api/routers/users_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from booking_api.db import get_session
from booking_api.models import User
from booking_api.schemas import UserCreate, UserPublic
from booking_api.auth import get_current_user, hash_password

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["users"],
)


@router.get("/me", response_model=UserPublic)
def me(current_user: dict = Depends(get_current_user)):
    return current_user


@router.post("/users", status_code=201, response_model=UserPublic)
def create_user(
    user: UserCreate,
    session: Session = Depends(get_session),
):
    # 1) Check if email already exists
    existing = session.exec(
        select(User).where(User.email == user.email)
    ).first()
    if existing is not None:
        raise HTTPException(status_code=409, detail="Email already registered")

    # 2) Create user in DB
    db_user = User(
        name=user.name,
        email=user.email,
        password_hash=hash_password(user.password),
        provider=user.provider,
    )

    session.add(db_user)
    session.commit()
    session.refresh(db_user)  # fills db_user.id
    logger.info(f"User {db_user.id} registered (provider={db_user.provider})")

    # 3) Return public user
    return {
        "id": db_user.id,
        "name": db_user.name,
        "email": db_user.email,
        "provider": db_user.provider,
    }
