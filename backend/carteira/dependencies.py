"""
FastAPI dependencies.
"""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from carteira.database import get_db
from carteira.exceptions import AuthenticationError
from carteira.models.user import User
from carteira.services.auth_service import get_user_for_token
from carteira.services.store import SqlAlchemyStore, TransactionStore


def get_session_token(authorization: Optional[str] = Header(None)) -> str:
    """Extract the bearer token from the Authorization header."""
    if not authorization:
        raise AuthenticationError("Missing Authorization header")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Expected a bearer token")
    return token.strip()


def get_current_user(
    token: str = Depends(get_session_token),
    db: Session = Depends(get_db)
) -> User:
    return get_user_for_token(db, token)


def get_store(db: Session = Depends(get_db)) -> TransactionStore:
    return SqlAlchemyStore(db)
