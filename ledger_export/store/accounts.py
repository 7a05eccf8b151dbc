"""In-memory account repository with parent/child tracking."""

import logging
from dataclasses import dataclass, field

from ledger_export.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    InvalidEntityStateError,
    ReferentialIntegrityError,
)
from ledger_export.models import Account, AccountType, Transaction

logger = logging.getLogger(__name__)

ACCOUNT_NAME_SEPARATOR = ":"


@dataclass
class AccountStore:
    """In-memory store for accounts and the tree formed by their parents."""

    accounts: dict[str, Account] = field(default_factory=dict)

    # Relationship indexes
    _account_children: dict[str, list[str]] = field(default_factory=dict)

    def add_account(self, account: Account) -> None:
        """Add an account to the store.

        The parent, if any, must already be in the store.
        """
        if account.parent_uid is not None and account.parent_uid not in self.accounts:
            raise ReferentialIntegrityError(f"Parent account {account.parent_uid} not found")

        self.accounts[account.uid] = account
        self._account_children.setdefault(account.uid, [])
        if account.parent_uid is not None:
            self._account_children[account.parent_uid].append(account.uid)
        logger.debug("Added account %s (%s)", account.uid, account.name)

    def add_transaction(self, transaction: Transaction) -> None:
        """Record a transaction in its account.

        A transfer is also loaded into the account of its other leg, where it
        keeps its original account UID.

        Raises
        ------
        InvalidArgumentError
            If the transaction has no account UID.
        ReferentialIntegrityError
            If either account is unknown, or both legs name the same account.
        """
        if transaction.account_uid is None:
            raise InvalidArgumentError(f"Transaction {transaction.uid} has no account UID")
        if transaction.account_uid not in self.accounts:
            raise ReferentialIntegrityError(f"Account {transaction.account_uid} not found")

        other_uid = transaction.double_entry_account_uid
        if other_uid is not None and other_uid not in self.accounts:
            raise ReferentialIntegrityError(f"Account {other_uid} not found")
        if other_uid == transaction.account_uid:
            raise ReferentialIntegrityError(
                f"Transaction {transaction.uid} transfers account {other_uid} to itself"
            )

        self.accounts[transaction.account_uid].add_transaction(transaction)
        if other_uid is not None:
            self.accounts[other_uid].add_transaction(transaction)

    # Query methods
    def get_account(self, uid: str) -> Account:
        """Get an account by UID."""
        try:
            return self.accounts[uid]
        except KeyError:
            raise EntityNotFoundError(f"Account {uid} not found") from None

    def children(self, uid: str) -> list[Account]:
        """Get the direct sub-accounts of an account."""
        child_uids = self._account_children.get(uid, [])
        return [self.accounts[cid] for cid in child_uids]

    def fully_qualified_name(self, uid: str) -> str:
        """Return the account name prefixed by the names of its ancestors.

        Names are joined root-first with ``ACCOUNT_NAME_SEPARATOR``. ROOT
        accounts are not part of the name.

        Raises
        ------
        EntityNotFoundError
            If the account or one of its ancestors is unknown.
        InvalidEntityStateError
            If the parent links form a cycle.
        """
        names: list[str] = []
        seen: set[str] = set()
        current: str | None = uid
        while current is not None:
            if current in seen:
                raise InvalidEntityStateError(f"Account {uid} has a cyclic parent chain")
            seen.add(current)
            account = self.get_account(current)
            if account.account_type == AccountType.ROOT:
                break
            names.append(account.name)
            current = account.parent_uid
        return ACCOUNT_NAME_SEPARATOR.join(reversed(names))

    def summary(self) -> dict[str, int]:
        """Return summary counts of accounts and stored transactions."""
        return {
            "accounts": len(self.accounts),
            "transactions": sum(a.transaction_count for a in self.accounts.values()),
        }
