"""Tests for transaction validation, creation and deletion."""

import pytest
from datetime import date, datetime
from decimal import Decimal

from carteira.exceptions import ValidationError
from carteira.models.transaction import Transaction, TransactionKind
from carteira.services.store import SqlAlchemyStore
from carteira.services.transaction_service import (
    create_expense,
    create_income,
    delete_transaction,
    parse_amount,
    parse_date,
    validate_transaction,
)

TODAY = date(2024, 6, 15)


class TestParseAmount:
    """Test amount parsing and the positive-amount rule."""

    @pytest.mark.parametrize("raw,expected", [
        ("12.50", Decimal("12.50")),
        ("12,50", Decimal("12.50")),
        (" 7 ", Decimal("7.00")),
        (3, Decimal("3.00")),
        (19.9, Decimal("19.90")),
        (Decimal("1.005"), Decimal("1.00")),
        ("9999999999.99", Decimal("9999999999.99")),
    ])
    def test_valid(self, raw, expected):
        assert parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", [
        None, "", "   ", "abc", "0", "-5", "0,001", "NaN", True,
        "10000000000", "12345678901234567.89", Decimal("1e30"),
    ])
    def test_invalid(self, raw):
        with pytest.raises(ValidationError) as exc:
            parse_amount(raw)
        assert exc.value.field == "amount"


class TestParseDate:
    def test_missing_is_today(self):
        assert parse_date(None, TODAY) == TODAY
        assert parse_date("", TODAY) == TODAY

    def test_iso_string(self):
        assert parse_date("2024-02-29", TODAY) == date(2024, 2, 29)

    def test_datetime_string_keeps_calendar_day(self):
        assert parse_date("2024-02-29T23:10:00", TODAY) == date(2024, 2, 29)

    def test_datetime_object(self):
        assert parse_date(datetime(2024, 1, 2, 3, 4), TODAY) == date(2024, 1, 2)

    @pytest.mark.parametrize("raw", ["29/02/2024", "2024-13-01", "yesterday", 20240101])
    def test_malformed(self, raw):
        with pytest.raises(ValidationError) as exc:
            parse_date(raw, TODAY)
        assert exc.value.field == "date"


class TestValidateTransaction:
    def test_trims_text(self):
        new = validate_transaction(
            TransactionKind.expense, "10", "  Almoço  ", " Alimentação ", today=TODAY
        )
        assert new.description == "Almoço"
        assert new.category == "Alimentação"
        assert new.date == TODAY
        assert new.receipt_ref is None

    @pytest.mark.parametrize("description,category,field", [
        ("", "Lazer", "description"),
        ("   ", "Lazer", "description"),
        (None, "Lazer", "description"),
        ("Cinema", "", "category"),
        ("Cinema", None, "category"),
        ("Cinema", "x" * 101, "category"),
    ])
    def test_required_text(self, description, category, field):
        with pytest.raises(ValidationError) as exc:
            validate_transaction(TransactionKind.expense, "10", description, category, today=TODAY)
        assert exc.value.field == field


class TestCreateTransactions:
    """Test the two creation paths against the database."""

    def test_create_expense(self, db_session, sample_user):
        store = SqlAlchemyStore(db_session)
        txn = create_expense(
            store, sample_user.id, "35,90", "Farmácia", "Saúde",
            txn_date="2024-06-01", receipt_ref="receipts/abc.jpg",
        )
        assert txn.id
        assert txn.kind == TransactionKind.expense
        assert txn.amount == Decimal("35.90")
        assert txn.date == date(2024, 6, 1)
        assert txn.receipt_ref == "receipts/abc.jpg"
        assert txn.owner_id == sample_user.id

    def test_create_income_uses_source_as_category(self, db_session, sample_user):
        store = SqlAlchemyStore(db_session)
        txn = create_income(store, sample_user.id, "4200", "Junho", "Salário", today=TODAY)
        assert txn.kind == TransactionKind.income
        assert txn.category == "Salário"
        assert txn.date == TODAY
        assert txn.receipt_ref is None

    def test_income_missing_source(self, db_session, sample_user):
        with pytest.raises(ValidationError) as exc:
            create_income(SqlAlchemyStore(db_session), sample_user.id, "10", "Bico", "")
        assert exc.value.field == "source"

    def test_income_source_too_long(self, db_session, sample_user):
        with pytest.raises(ValidationError) as exc:
            create_income(SqlAlchemyStore(db_session), sample_user.id, "10", "Bico", "s" * 101)
        assert exc.value.field == "source"
        assert "Source" in exc.value.message

    def test_validation_happens_before_store(self, db_session, sample_user):
        with pytest.raises(ValidationError):
            create_expense(SqlAlchemyStore(db_session), sample_user.id, "-1", "X", "Y")
        assert db_session.query(Transaction).count() == 0

    def test_delete(self, db_session, sample_user, stored_transactions):
        store = SqlAlchemyStore(db_session)
        target = stored_transactions[0].id
        assert delete_transaction(store, sample_user.id, target) is True
        assert store.get_transaction(sample_user.id, target) is None
        assert delete_transaction(store, sample_user.id, target) is False

    def test_delete_scoped_to_owner(self, db_session, other_user, stored_transactions):
        store = SqlAlchemyStore(db_session)
        assert delete_transaction(store, other_user.id, stored_transactions[0].id) is False
        assert db_session.query(Transaction).count() == 3


class TestStoreOrdering:
    def test_fetch_newest_first(self, db_session, sample_user, stored_transactions):
        store = SqlAlchemyStore(db_session)
        dates = [t.date for t in store.fetch_transactions(sample_user.id)]
        assert dates == [date(2024, 1, 15), date(2024, 1, 10), date(2024, 1, 5)]

    def test_fetch_scoped_to_owner(self, db_session, other_user, stored_transactions):
        assert SqlAlchemyStore(db_session).fetch_transactions(other_user.id) == []
