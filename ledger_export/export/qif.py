"""QIF export of ledger accounts."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ledger_export.export.qif_helper import (
    ACCOUNT_HEADER,
    ACCOUNT_NAME_PREFIX,
    DEFAULT_TYPE_HEADER,
    ENTRY_TERMINATOR,
    QIF_DATE_FORMAT,
    qif_field,
)
from ledger_export.logging import export_context
from ledger_export.models.enums import AccountType

if TYPE_CHECKING:
    from ledger_export.models.account import Account

logger = logging.getLogger(__name__)

NEW_LINE = "\n"

_TYPE_HEADERS: dict[AccountType, str] = {
    AccountType.CASH: "!Type:Cash",
    AccountType.BANK: "!Type:Bank",
    AccountType.CREDIT: "!Type:CCard",
    AccountType.ASSET: "!Type:Oth A",
    AccountType.LIABILITY: "!Type:Oth L",
}


def qif_header(account_type: AccountType) -> str:
    """Return the ``!Type`` header line for transactions of ``account_type``."""
    return _TYPE_HEADERS.get(account_type, DEFAULT_TYPE_HEADER)


class QifExporter:
    """Build QIF account blocks.

    Parameters
    ----------
    resolve_qualified_name : Callable[[str], str]
        Returns the fully qualified name of an account from its UID, e.g.
        ``AccountStore.fully_qualified_name``.
    date_format : str
        strftime format of the transaction dates.
    """

    def __init__(
        self,
        resolve_qualified_name: Callable[[str], str],
        date_format: str = QIF_DATE_FORMAT,
    ) -> None:
        self.resolve_qualified_name = resolve_qualified_name
        self.date_format = date_format

    def export(self, account: Account, include_all: bool = False) -> str:
        """Export ``account`` and its transactions as a QIF block.

        Only transactions recorded in this account are written. Transactions
        loaded as the other leg of a transfer belong to another account's
        block.

        Parameters
        ----------
        account : Account
            Account to export.
        include_all : bool
            Include transactions which were already exported.

        Returns
        -------
        str
            The QIF block, every line newline terminated.
        """
        qualified_name = self.resolve_qualified_name(account.uid)

        lines = [
            ACCOUNT_HEADER,
            ACCOUNT_NAME_PREFIX + qif_field(qualified_name),
            ENTRY_TERMINATOR,
            qif_header(account.account_type),
        ]

        transactions = account.transactions
        exported = 0
        for transaction in transactions:
            if transaction.account_uid != account.uid:
                continue
            if not include_all and transaction.is_exported:
                continue
            lines.append(transaction.to_qif(self.date_format))
            exported += 1

        logger.debug(
            "QIF block for account %s: %d of %d transactions",
            account.uid,
            exported,
            len(transactions),
            extra=export_context(account.uid, exported, len(transactions), format="qif"),
        )
        return "".join(line + NEW_LINE for line in lines)


def export_qif(
    account: Account,
    include_all: bool,
    resolve_qualified_name: Callable[[str], str],
) -> str:
    """Export ``account`` as a QIF block named by ``resolve_qualified_name``."""
    return QifExporter(resolve_qualified_name).export(account, include_all)
