"""Enumeration types for ledger accounts and transactions."""

from enum import Enum


class TransactionType(str, Enum):
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"

    def invert(self) -> "TransactionType":
        """Return the opposite polarity."""
        return TransactionType.CREDIT if self is TransactionType.DEBIT else TransactionType.DEBIT


class AccountType(str, Enum):
    """Kinds of ledger account.

    Each kind has a normal balance: the polarity which increases the value of
    the account. CASH, ASSET and EXPENSE increase with debits, every other
    kind increases with credits.
    """

    CASH = "CASH"
    BANK = "BANK"
    CREDIT = "CREDIT"
    ASSET = "ASSET"
    LIABILITY = "LIABILITY"
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    PAYABLE = "PAYABLE"
    RECEIVABLE = "RECEIVABLE"
    EQUITY = "EQUITY"
    CURRENCY = "CURRENCY"
    STOCK = "STOCK"
    MUTUAL = "MUTUAL"
    ROOT = "ROOT"

    @property
    def normal_balance(self) -> TransactionType:
        return _NORMAL_BALANCE.get(self, TransactionType.CREDIT)

    def has_debit_normal_balance(self) -> bool:
        return self.normal_balance is TransactionType.DEBIT


_NORMAL_BALANCE: dict[AccountType, TransactionType] = {
    AccountType.CASH: TransactionType.DEBIT,
    AccountType.ASSET: TransactionType.DEBIT,
    AccountType.EXPENSE: TransactionType.DEBIT,
}


class OfxAccountType(str, Enum):
    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"
    MONEYMRKT = "MONEYMRKT"
    CREDITLINE = "CREDITLINE"
