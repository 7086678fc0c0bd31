"""
Transaction store: the CRUD collaborator behind every service.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from carteira.exceptions import StoreError
from carteira.models.category import Category
from carteira.models.transaction import Transaction, TransactionKind

logger = logging.getLogger(__name__)


class TransactionStore(ABC):
    """Create/read/delete over one owner's transactions and categories"""

    @abstractmethod
    def fetch_transactions(self, owner_id: str) -> List[Transaction]:
        """Return every transaction of the owner, newest date first"""
        pass

    @abstractmethod
    def get_transaction(self, owner_id: str, transaction_id: str) -> Optional[Transaction]:
        pass

    @abstractmethod
    def insert_transaction(self, transaction: Transaction) -> Transaction:
        pass

    @abstractmethod
    def delete_transaction(self, owner_id: str, transaction_id: str) -> bool:
        """Delete permanently. Returns False when the owner has no such record."""
        pass

    @abstractmethod
    def fetch_categories(
        self,
        owner_id: str,
        kind: Optional[TransactionKind] = None
    ) -> List[Category]:
        pass

    @abstractmethod
    def insert_categories(self, categories: Sequence[Category]) -> List[Category]:
        """Insert all categories in a single batch."""
        pass

    @abstractmethod
    def delete_category(self, owner_id: str, category_id: str) -> bool:
        pass


class SqlAlchemyStore(TransactionStore):
    """Store backed by a SQLAlchemy session.

    Every database failure is rolled back and re-raised as StoreError.
    """

    def __init__(self, db: Session):
        self.db = db

    def _fail(self, operation: str, exc: SQLAlchemyError) -> StoreError:
        self.db.rollback()
        logger.error(f"Store operation {operation} failed: {exc}")
        return StoreError(operation, str(exc), cause=exc)

    def fetch_transactions(self, owner_id: str) -> List[Transaction]:
        try:
            return self.db.query(Transaction).filter(
                Transaction.owner_id == owner_id
            ).order_by(
                Transaction.date.desc(),
                Transaction.created_at.desc()
            ).all()
        except SQLAlchemyError as e:
            raise self._fail("fetch_transactions", e) from e

    def get_transaction(self, owner_id: str, transaction_id: str) -> Optional[Transaction]:
        try:
            return self.db.query(Transaction).filter(
                Transaction.owner_id == owner_id,
                Transaction.id == transaction_id
            ).first()
        except SQLAlchemyError as e:
            raise self._fail("get_transaction", e) from e

    def insert_transaction(self, transaction: Transaction) -> Transaction:
        try:
            self.db.add(transaction)
            self.db.commit()
            self.db.refresh(transaction)
            return transaction
        except SQLAlchemyError as e:
            raise self._fail("insert_transaction", e) from e

    def delete_transaction(self, owner_id: str, transaction_id: str) -> bool:
        try:
            deleted = self.db.query(Transaction).filter(
                Transaction.owner_id == owner_id,
                Transaction.id == transaction_id
            ).delete(synchronize_session=False)
            self.db.commit()
            return deleted > 0
        except SQLAlchemyError as e:
            raise self._fail("delete_transaction", e) from e

    def fetch_categories(
        self,
        owner_id: str,
        kind: Optional[TransactionKind] = None
    ) -> List[Category]:
        try:
            query = self.db.query(Category).filter(Category.owner_id == owner_id)
            if kind is not None:
                query = query.filter(Category.kind == kind)
            return query.order_by(Category.created_at.desc()).all()
        except SQLAlchemyError as e:
            raise self._fail("fetch_categories", e) from e

    def insert_categories(self, categories: Sequence[Category]) -> List[Category]:
        categories = list(categories)
        try:
            self.db.add_all(categories)
            self.db.commit()
            for category in categories:
                self.db.refresh(category)
            return categories
        except SQLAlchemyError as e:
            raise self._fail("insert_categories", e) from e

    def delete_category(self, owner_id: str, category_id: str) -> bool:
        try:
            deleted = self.db.query(Category).filter(
                Category.owner_id == owner_id,
                Category.id == category_id
            ).delete(synchronize_session=False)
            self.db.commit()
            return deleted > 0
        except SQLAlchemyError as e:
            raise self._fail("delete_category", e) from e
