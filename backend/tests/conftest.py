"""Shared test fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date, datetime
from decimal import Decimal
import uuid

from carteira.database import Base, get_db
from carteira.main import app
from carteira.models.category import Category
from carteira.models.transaction import Transaction, TransactionKind
from carteira.models.user import AuthSession, User
from carteira.services.auth_service import hash_password


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_user(db_session):
    """Create a user whose categories were already seeded."""
    user = User(
        id=str(uuid.uuid4()),
        email="ana@example.com",
        password_hash=hash_password("segredo123"),
        categories_seeded=True,
        created_at=datetime(2024, 1, 1, 12, 0, 0),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session):
    user = User(
        id=str(uuid.uuid4()),
        email="bruno@example.com",
        password_hash=hash_password("outrasenha"),
        categories_seeded=True,
        created_at=datetime(2024, 1, 1, 12, 0, 0),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(db_session, sample_user):
    """Authorization header for an open session of sample_user."""
    session = AuthSession(token=uuid.uuid4().hex, user_id=sample_user.id)
    db_session.add(session)
    db_session.commit()
    return {"Authorization": f"Bearer {session.token}"}


def make_transaction(kind, amount, category, txn_date, description=None, owner_id="user1"):
    """Build an unsaved transaction for engine tests."""
    return Transaction(
        id=str(uuid.uuid4()),
        owner_id=owner_id,
        kind=kind,
        amount=Decimal(str(amount)),
        description=description or f"{category} {amount}",
        category=category,
        date=txn_date,
    )


@pytest.fixture
def scenario_transactions():
    """Two January expenses and one January income."""
    return [
        make_transaction(TransactionKind.expense, "50", "Food", date(2024, 1, 10), "Groceries"),
        make_transaction(TransactionKind.expense, "120", "Rent", date(2024, 1, 15), "January rent"),
        make_transaction(TransactionKind.income, "1000", "Salary", date(2024, 1, 5), "Paycheck"),
    ]


@pytest.fixture
def stored_transactions(db_session, sample_user, scenario_transactions):
    """scenario_transactions saved for sample_user."""
    for txn in scenario_transactions:
        txn.owner_id = sample_user.id
        db_session.add(txn)
    db_session.commit()
    for txn in scenario_transactions:
        db_session.refresh(txn)
    return scenario_transactions


@pytest.fixture
def sample_category(db_session, sample_user):
    category = Category(
        id=str(uuid.uuid4()),
        owner_id=sample_user.id,
        name="Mercado",
        kind=TransactionKind.expense,
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def make_txn():
    """Factory for unsaved transactions."""
    return make_transaction
