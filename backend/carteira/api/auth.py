"""
Account and session endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from carteira.database import get_db
from carteira.dependencies import get_current_user, get_session_token
from carteira.models.user import User
from carteira.schemas.auth import (
    SignInRequest,
    SignUpRequest,
    SignUpResponse,
    SessionResponse,
    UserResponse,
)
from carteira.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/sign-up", response_model=SignUpResponse, status_code=201)
def sign_up(request: SignUpRequest, db: Session = Depends(get_db)):
    """Create an account; default categories are seeded right away."""
    user, seeded = auth_service.sign_up(
        db, request.email, request.password, request.confirm_password
    )
    return SignUpResponse(user=UserResponse.model_validate(user), categories_seeded=seeded)


@router.post("/sign-in", response_model=SessionResponse)
def sign_in(request: SignInRequest, db: Session = Depends(get_db)):
    session = auth_service.sign_in(db, request.email, request.password)
    return SessionResponse.model_validate(session)


@router.post("/sign-out", status_code=204)
def sign_out(token: str = Depends(get_session_token), db: Session = Depends(get_db)):
    auth_service.sign_out(db, token)
    return None


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return user
