"""
Account registration and sign-in sessions.
"""

import logging
import secrets
from datetime import datetime
from typing import Optional, Tuple

import bcrypt
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from carteira.config import settings
from carteira.exceptions import AuthenticationError, StoreError, ValidationError
from carteira.models.user import AuthSession, User
from carteira.services.category_service import ensure_default_categories, is_new_account

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def _commit(db: Session, operation: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"{operation} failed: {e}")
        raise StoreError(operation, str(e), cause=e) from e


def sign_up(
    db: Session,
    email: Optional[str],
    password: Optional[str],
    confirm_password: Optional[str],
) -> Tuple[User, bool]:
    """
    Register a new account and seed its default categories.
    Returns (user, seeded); a failed seeding does not undo the account.
    """
    email = normalize_email(email)
    if not email or not password or not confirm_password:
        raise ValidationError("email", "Email, password and confirmation are required")
    if password != confirm_password:
        raise ValidationError("confirm_password", "Passwords do not match")
    if len(password) < settings.min_password_length:
        raise ValidationError(
            "password",
            f"Password must have at least {settings.min_password_length} characters"
        )
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError("password", "Password is too long")

    existing = db.query(User).filter(User.email == email).first()
    if existing:
        raise ValidationError("email", "Email is already registered")

    user = User(email=email, password_hash=hash_password(password))
    db.add(user)
    _commit(db, "sign_up")
    db.refresh(user)
    logger.info(f"Registered user {user.id}")

    seeded = ensure_default_categories(db, user)
    return user, seeded


def sign_in(
    db: Session,
    email: Optional[str],
    password: Optional[str],
    now: Optional[datetime] = None
) -> AuthSession:
    """Check credentials and open a new session."""
    email = normalize_email(email)
    if not email or not password:
        raise ValidationError("email", "Email and password are required")

    user = db.query(User).filter(User.email == email).first()
    if (
        not user
        or len(password.encode("utf-8")) > MAX_PASSWORD_BYTES
        or not verify_password(password, user.password_hash)
    ):
        raise AuthenticationError("Invalid email or password")

    session = AuthSession(token=secrets.token_urlsafe(32), user_id=user.id)
    db.add(session)
    _commit(db, "sign_in")
    db.refresh(session)
    logger.info(f"User {user.id} signed in")

    now = now or datetime.utcnow()
    if is_new_account(user.created_at, now, settings.new_account_window_minutes):
        ensure_default_categories(db, user)

    return session


def get_user_for_token(db: Session, token: Optional[str]) -> User:
    """Resolve a session token to its user."""
    if not token:
        raise AuthenticationError("Missing session token")
    session = db.query(AuthSession).filter(AuthSession.token == token).first()
    if not session:
        raise AuthenticationError("Unknown or expired session")
    return session.user


def sign_out(db: Session, token: str) -> bool:
    """Close a session. Returns False when it was already closed."""
    session = db.query(AuthSession).filter(AuthSession.token == token).first()
    if not session:
        return False
    user_id = session.user_id
    db.delete(session)
    _commit(db, "sign_out")
    logger.info(f"User {user_id} signed out")
    return True
