"""Ledger domain models."""

from ledger_export.models.account import Account
from ledger_export.models.enums import AccountType, OfxAccountType, TransactionType
from ledger_export.models.money import DEFAULT_CURRENCY_CODE, Money
from ledger_export.models.transaction import Transaction

__all__ = [
    "DEFAULT_CURRENCY_CODE",
    "Account",
    "AccountType",
    "Money",
    "OfxAccountType",
    "Transaction",
    "TransactionType",
]
