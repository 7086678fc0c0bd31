"""
Transaction database model.
"""

import enum
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date, Enum, Numeric, Text, ForeignKey, Index
from carteira.database import Base


class TransactionKind(str, enum.Enum):
    """Direction of a transaction."""
    income = "income"
    expense = "expense"


class Transaction(Base):
    """Transaction model.

    ``category`` holds a category name, not a foreign key: deleting a
    category leaves existing transactions untouched.
    """

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    kind = Column(Enum(TransactionKind), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)  # Always positive, kind gives the sign
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False)
    date = Column(Date, nullable=False)
    receipt_ref = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("idx_transaction_owner_date", "owner_id", "date"),
    )

    def __repr__(self) -> str:
        return f"<Transaction {self.kind.value if self.kind else None} {self.amount} {self.category!r} {self.date}>"
