"""
Database models package.
"""

from carteira.models.user import User, AuthSession
from carteira.models.category import Category
from carteira.models.transaction import Transaction, TransactionKind

__all__ = [
    "User",
    "AuthSession",
    "Category",
    "Transaction",
    "TransactionKind",
]
