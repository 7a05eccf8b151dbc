"""Transaction model for the ledger domain."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from ledger_export.export.ofx_helper import (
    APP_ID,
    TAG_ACCOUNT_ID,
    TAG_ACCOUNT_TYPE,
    TAG_BANK_ACCOUNT_TO,
    TAG_BANK_ID,
    TAG_DATE_POSTED,
    TAG_DATE_USER,
    TAG_MEMO,
    TAG_NAME,
    TAG_STATEMENT_TRANSACTION,
    TAG_TRANSACTION_AMOUNT,
    TAG_TRANSACTION_FITID,
    TAG_TRANSACTION_TYPE,
    format_ofx_time,
)
from ledger_export.export.qif_helper import (
    AMOUNT_PREFIX,
    DATE_PREFIX,
    ENTRY_TERMINATOR,
    MEMO_PREFIX,
    PAYEE_PREFIX,
    QIF_DATE_FORMAT,
    format_qif_date,
    qif_field,
)
from ledger_export.export.xml_writer import XmlNode
from ledger_export.models.enums import OfxAccountType, TransactionType
from ledger_export.models.money import Money


@dataclass
class Transaction:
    """Ledger transaction.

    A transfer between two accounts is a single transaction whose
    ``account_uid`` is the account it was recorded in and whose
    ``double_entry_account_uid`` is the other leg. The same object may be
    loaded into both accounts.
    """

    name: str
    amount: Money
    time: datetime = field(default_factory=datetime.now)
    description: str = ""
    account_uid: str | None = None
    double_entry_account_uid: str | None = None
    is_exported: bool = False
    uid: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Money):
            self.amount = Money(Decimal(str(self.amount)))

    @property
    def currency(self) -> str:
        return self.amount.currency

    @currency.setter
    def currency(self, currency: str) -> None:
        # rebinds the amount, the value is not converted
        self.amount = self.amount.with_currency(currency)

    @property
    def transaction_type(self) -> TransactionType:
        return TransactionType.DEBIT if self.amount.is_negative() else TransactionType.CREDIT

    def to_ofx(
        self,
        account_uid: str,
        bank_id: str = APP_ID,
        transfer_account_type: OfxAccountType = OfxAccountType.CHECKING,
    ) -> XmlNode:
        """Build the ``STMTTRN`` node of this transaction.

        Parameters
        ----------
        account_uid : str
            UID of the account being exported. For the account holding the
            other leg of a transfer, the amount is negated and the
            transaction type inverted.
        bank_id : str
            BANKID of the transfer target block.
        transfer_account_type : OfxAccountType
            ACCTTYPE of the transfer target block.

        Returns
        -------
        XmlNode
            The transaction node.
        """
        counter_leg = self.account_uid is not None and account_uid != self.account_uid
        amount = self.amount.negate() if counter_leg else self.amount
        transaction_type = self.transaction_type.invert() if counter_leg else self.transaction_type
        posted = format_ofx_time(self.time)

        node = XmlNode(TAG_STATEMENT_TRANSACTION)
        node.add(TAG_TRANSACTION_TYPE, transaction_type.value)
        node.add(TAG_DATE_POSTED, posted)
        node.add(TAG_DATE_USER, posted)
        node.add(TAG_TRANSACTION_AMOUNT, amount.to_plain_string())
        node.add(TAG_TRANSACTION_FITID, self.uid)
        node.add(TAG_NAME, self.name)
        if self.description:
            node.add(TAG_MEMO, self.description)

        if self.double_entry_account_uid is not None:
            other_uid = self.account_uid if counter_leg else self.double_entry_account_uid
            bank_to = node.add(TAG_BANK_ACCOUNT_TO)
            bank_to.add(TAG_BANK_ID, bank_id)
            bank_to.add(TAG_ACCOUNT_ID, other_uid)
            bank_to.add(TAG_ACCOUNT_TYPE, transfer_account_type.value)

        return node

    def to_qif(self, date_format: str = QIF_DATE_FORMAT) -> str:
        """Render the transaction as a QIF record, without trailing newline."""
        lines = [
            DATE_PREFIX + format_qif_date(self.time, date_format),
            AMOUNT_PREFIX + self.amount.to_plain_string(),
            PAYEE_PREFIX + qif_field(self.name),
        ]
        if self.description:
            lines.append(MEMO_PREFIX + qif_field(self.description))
        lines.append(ENTRY_TERMINATOR)
        return "\n".join(lines)
