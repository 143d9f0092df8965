import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from app.db.db import get_session
from app.models.user import User
from app.schemas.auth_schemas import (
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    TokenResponse,
    UserProfile,
)
from app.utils.auth_helper import (
    create_access_token,
    get_current_user_required,
    get_db_user,
    hash_password,
    verify_password,
)
from app.utils.errors import UnauthorizedError

logger = logging.getLogger(__name__)

router = APIRouter()


def _normalize_email(email: str) -> str:
    return email.strip().lower()


@router.post("/register", response_model=TokenResponse, status_code=201)
def register(payload: RegisterRequest, session: Session = Depends(get_session)):
    email = _normalize_email(payload.email)

    exists = session.exec(select(User).where(User.email == email)).first()
    if exists:
        raise HTTPException(status_code=400, detail="User already exists")

    db_user = User(
        name=payload.name.strip(),
        email=email,
        password_hash=hash_password(payload.password),
    )

    session.add(db_user)
    session.commit()
    session.refresh(db_user)

    logger.info("Registered user %s", db_user.id)

    return TokenResponse(
        id=db_user.id,
        name=db_user.name,
        email=db_user.email,
        token=create_access_token(db_user.id),
    )


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, session: Session = Depends(get_session)):
    db_user = session.exec(
        select(User).where(User.email == _normalize_email(payload.email))
    ).first()

    if not db_user or not verify_password(payload.password, db_user.password_hash):
        raise UnauthorizedError("Invalid email or password")

    return TokenResponse(
        id=db_user.id,
        name=db_user.name,
        email=db_user.email,
        token=create_access_token(db_user.id),
    )


@router.get("/profile", response_model=UserProfile)
def get_profile(
    session: Session = Depends(get_session),
    current_user=Depends(get_current_user_required),
):
    return get_db_user(session, current_user)


@router.put("/profile", response_model=UserProfile)
def update_profile(
    payload: ProfileUpdateRequest,
    session: Session = Depends(get_session),
    current_user=Depends(get_current_user_required),
):
    user = get_db_user(session, current_user)

    if payload.email:
        email = _normalize_email(payload.email)

        taken = session.exec(
            select(User)
            .where(User.email == email)
            .where(User.id != user.id)
        ).first()

        if taken:
            raise HTTPException(status_code=400, detail="Email already taken")

        user.email = email

    if payload.name:
        user.name = payload.name.strip()

    user.updated_at = datetime.now(timezone.utc)

    session.add(user)
    session.commit()
    session.refresh(user)

    return user
