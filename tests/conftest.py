"""Pytest configuration and fixtures."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable

import pytest

from ledger_export.models import Account, AccountType, Money, Transaction


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def statement_time() -> datetime:
    """Fixed UTC statement time."""
    return datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def account() -> Account:
    """Bank account in USD."""
    return Account("Checking", "USD", AccountType.BANK)


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Factory for transactions with a fixed posting time."""

    def _make(amount: str, name: str = "Payee", **kwargs) -> Transaction:
        kwargs.setdefault("time", datetime(2024, 1, 10, 9, 0, 0, tzinfo=timezone.utc))
        return Transaction(name=name, amount=Money(Decimal(amount), "USD"), **kwargs)

    return _make
