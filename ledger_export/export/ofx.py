"""OFX export of ledger accounts."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from ledger_export.export.ofx_helper import (
    APP_ID,
    TAG_ACCOUNT_ID,
    TAG_ACCOUNT_TYPE,
    TAG_BALANCE_AMOUNT,
    TAG_BANK_ACCOUNT_FROM,
    TAG_BANK_ID,
    TAG_BANK_TRANSACTION_LIST,
    TAG_CURRENCY_DEF,
    TAG_DATE_AS_OF,
    TAG_DATE_END,
    TAG_DATE_START,
    TAG_LEDGER_BALANCE,
    TAG_STATEMENT_TRANSACTIONS,
    format_ofx_time,
)
from ledger_export.export.xml_writer import XmlNode, render
from ledger_export.logging import export_context
from ledger_export.models.enums import AccountType, OfxAccountType

if TYPE_CHECKING:
    from ledger_export.models.account import Account

logger = logging.getLogger(__name__)

_OFX_ACCOUNT_TYPES: dict[AccountType, OfxAccountType] = {
    AccountType.CREDIT: OfxAccountType.CREDITLINE,
    AccountType.LIABILITY: OfxAccountType.CREDITLINE,
    AccountType.CASH: OfxAccountType.CHECKING,
    AccountType.INCOME: OfxAccountType.CHECKING,
    AccountType.EXPENSE: OfxAccountType.CHECKING,
    AccountType.PAYABLE: OfxAccountType.CHECKING,
    AccountType.RECEIVABLE: OfxAccountType.CHECKING,
    AccountType.BANK: OfxAccountType.SAVINGS,
    AccountType.ASSET: OfxAccountType.SAVINGS,
    AccountType.MUTUAL: OfxAccountType.MONEYMRKT,
    AccountType.STOCK: OfxAccountType.MONEYMRKT,
    AccountType.EQUITY: OfxAccountType.MONEYMRKT,
    AccountType.CURRENCY: OfxAccountType.MONEYMRKT,
}


def to_ofx_type(account_type: AccountType) -> OfxAccountType:
    """Map an account type to the closest OFX account type.

    Types without an OFX counterpart (ROOT) are exported as CHECKING.
    """
    return _OFX_ACCOUNT_TYPES.get(account_type, OfxAccountType.CHECKING)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class OfxExporter:
    """Build OFX statement fragments for accounts.

    The fragment is a ``STMTRS`` element holding the account currency, the
    account identification, the ledger balance and the list of
    transactions. It is meant to be attached under a statement response of
    a full OFX document.

    Parameters
    ----------
    bank_id : str
        Value of the BANKID element.
    clock : Callable[[], datetime] | None
        Source of the statement time when none is passed to :meth:`build`.
    transfer_account_type : OfxAccountType
        ACCTTYPE written for the counter account of transfers.
    """

    def __init__(
        self,
        bank_id: str = APP_ID,
        clock: Callable[[], datetime] | None = None,
        transfer_account_type: OfxAccountType = OfxAccountType.CHECKING,
    ) -> None:
        self.bank_id = bank_id
        self.clock = clock or _local_now
        self.transfer_account_type = transfer_account_type

    def build(
        self,
        account: Account,
        include_all: bool = False,
        now: datetime | str | None = None,
    ) -> XmlNode:
        """Build the statement tree for ``account``.

        Parameters
        ----------
        account : Account
            Account to export.
        include_all : bool
            Include transactions which were already exported.
        now : datetime | str | None
            Statement time, either a datetime or an already formatted OFX
            time string. Defaults to the exporter clock.

        Returns
        -------
        XmlNode
            The ``STMTRS`` node.
        """
        if now is None:
            now = self.clock()
        timestamp = now if isinstance(now, str) else format_ofx_time(now)

        statement = XmlNode(TAG_STATEMENT_TRANSACTIONS)
        statement.add(TAG_CURRENCY_DEF, account.currency)

        bank_from = statement.add(TAG_BANK_ACCOUNT_FROM)
        bank_from.add(TAG_BANK_ID, self.bank_id)
        bank_from.add(TAG_ACCOUNT_ID, account.uid)
        bank_from.add(TAG_ACCOUNT_TYPE, to_ofx_type(account.account_type).value)

        ledger_balance = statement.add(TAG_LEDGER_BALANCE)
        ledger_balance.add(TAG_BALANCE_AMOUNT, account.balance().to_plain_string())
        ledger_balance.add(TAG_DATE_AS_OF, timestamp)

        transaction_list = statement.add(TAG_BANK_TRANSACTION_LIST)
        transaction_list.add(TAG_DATE_START, timestamp)
        transaction_list.add(TAG_DATE_END, timestamp)

        transactions = account.transactions
        exported = 0
        for transaction in transactions:
            if not include_all and transaction.is_exported:
                continue
            transaction_list.append(
                transaction.to_ofx(
                    account.uid, self.bank_id, self.transfer_account_type
                )
            )
            exported += 1

        logger.debug(
            "OFX statement for account %s: %d of %d transactions",
            account.uid,
            exported,
            len(transactions),
            extra=export_context(account.uid, exported, len(transactions), format="ofx"),
        )
        return statement

    def export(
        self,
        account: Account,
        include_all: bool = False,
        now: datetime | str | None = None,
        parent: ET.Element | None = None,
    ) -> ET.Element:
        """Build and render the statement of ``account``.

        When ``parent`` is given the fragment is appended to it.
        """
        return render(self.build(account, include_all, now), parent)


def export_ofx(
    account: Account,
    include_all: bool = False,
    now: datetime | str | None = None,
    parent: ET.Element | None = None,
) -> ET.Element:
    """Export ``account`` as an OFX ``STMTRS`` element."""
    return OfxExporter().export(account, include_all, now, parent)
