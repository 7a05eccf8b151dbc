"""Account model for the ledger domain."""

from __future__ import annotations

import re
import uuid
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ledger_export.exceptions import InvalidArgumentError, InvalidFormatError
from ledger_export.models.enums import AccountType
from ledger_export.models.money import DEFAULT_CURRENCY_CODE, Money

if TYPE_CHECKING:
    from ledger_export.models.transaction import Transaction

# Accepts #rgb and #rrggbb
COLOR_HEX_REGEX = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")

UID_LENGTH = 22
UID_NAME_PREFIX_LENGTH = 10

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


class Account:
    """A named container of transactions.

    An account records transactions in a single currency and has an
    :class:`AccountType` which decides its normal balance and how it is
    labelled in OFX and QIF exports. Accounts form a tree through
    ``parent_uid``; the tree itself is maintained by a store, the account
    only keeps the reference.

    Parameters
    ----------
    name : str
        Account name, stored without surrounding whitespace.
    currency : str | None
        ISO 4217 code of the account currency (default ``USD``).
    account_type : AccountType
        Kind of account (default ``CASH``).
    """

    def __init__(
        self,
        name: str,
        currency: str | None = None,
        account_type: AccountType = AccountType.CASH,
    ) -> None:
        self._name = ""
        self._color_code: str | None = None
        self._transactions: list[Transaction] = []

        self.set_name(name)
        self.uid: str = self.generate_uid()
        self.currency: str = currency or DEFAULT_CURRENCY_CODE
        self.account_type = account_type
        self.parent_uid: str | None = None
        self.default_transfer_account_uid: str | None = None
        self.is_placeholder = False
        self.is_favorite = False

    def __repr__(self) -> str:
        return (
            f"Account(uid={self.uid!r}, name={self._name!r}, "
            f"type={self.account_type.value}, currency={self.currency!r})"
        )

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        """Set the account name, trimming surrounding whitespace."""
        if name is None:
            raise InvalidArgumentError("Account name is required")
        self._name = name.strip()

    name = property(get_name, set_name)

    def generate_uid(self) -> str:
        """Generate and assign a new unique ID for the account.

        The ID is the ACCTID of OFX exports and is always 22 alphanumeric
        characters: up to 10 lowercase characters of the account name
        followed by random UUID hex digits. Without a usable name the ID is
        purely random.

        Returns
        -------
        str
            The new unique ID.
        """
        token = uuid.uuid4().hex
        prefix = _NON_ALPHANUMERIC.sub("", self._name).lower()[:UID_NAME_PREFIX_LENGTH]
        self.uid = prefix + token[: UID_LENGTH - len(prefix)]
        return self.uid

    def get_color_code(self) -> str | None:
        return self._color_code

    def set_color_code(self, color_code: str | None) -> None:
        """Set the account color as ``#rgb`` or ``#rrggbb``.

        ``None`` leaves the current color untouched.

        Raises
        ------
        InvalidFormatError
            If the code is not a valid hex color. The current color is kept.
        """
        if color_code is None:
            return
        if not COLOR_HEX_REGEX.fullmatch(color_code):
            raise InvalidFormatError(f"Invalid color hex code: {color_code!r}")
        self._color_code = color_code

    color_code = property(get_color_code, set_color_code)

    @property
    def transactions(self) -> list[Transaction]:
        return list(self._transactions)

    @property
    def transaction_count(self) -> int:
        return len(self._transactions)

    def _bind(self, transaction: Transaction) -> None:
        # transfers loaded from the other leg already carry an account uid
        if transaction.account_uid is None:
            transaction.account_uid = self.uid
        transaction.currency = self.currency

    def add_transaction(self, transaction: Transaction) -> None:
        """Append a transaction to the account.

        The transaction takes the account currency; its value is not
        converted. Its account UID is set to this account only if it has
        none yet.
        """
        self._bind(transaction)
        self._transactions.append(transaction)

    def set_transactions(self, transactions: Iterable[Transaction]) -> None:
        """Replace all transactions of the account.

        Every incoming transaction is bound like in :meth:`add_transaction`.
        """
        transactions = list(transactions)
        for transaction in transactions:
            self._bind(transaction)
        self._transactions = transactions

    def remove_transaction(self, transaction: Transaction) -> None:
        """Remove the first transaction equal to ``transaction``, if any."""
        if transaction in self._transactions:
            self._transactions.remove(transaction)

    def balance(self) -> Money:
        """Return the sum of all transaction amounts in the account.

        This is a flat sum. Double-entry counter legs are not netted out and
        sub-accounts are not included.
        """
        total = Money.zero(self.currency)
        for transaction in self._transactions:
            total = total + transaction.amount
        return total

    def has_unexported_transactions(self) -> bool:
        return any(not transaction.is_exported for transaction in self._transactions)
