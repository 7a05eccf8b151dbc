"""In-memory stores for maintaining account relationships."""

from ledger_export.store.accounts import ACCOUNT_NAME_SEPARATOR, AccountStore

__all__ = ["ACCOUNT_NAME_SEPARATOR", "AccountStore"]
