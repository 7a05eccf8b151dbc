"""OFX tag names and value formatting."""

from datetime import datetime, timedelta

APP_ID = "ledger_export"

TAG_STATEMENT_TRANSACTIONS = "STMTRS"
TAG_CURRENCY_DEF = "CURDEF"
TAG_BANK_ACCOUNT_FROM = "BANKACCTFROM"
TAG_BANK_ACCOUNT_TO = "BANKACCTTO"
TAG_BANK_ID = "BANKID"
TAG_ACCOUNT_ID = "ACCTID"
TAG_ACCOUNT_TYPE = "ACCTTYPE"
TAG_LEDGER_BALANCE = "LEDGERBAL"
TAG_BALANCE_AMOUNT = "BALAMT"
TAG_DATE_AS_OF = "DTASOF"
TAG_BANK_TRANSACTION_LIST = "BANKTRANLIST"
TAG_DATE_START = "DTSTART"
TAG_DATE_END = "DTEND"
TAG_STATEMENT_TRANSACTION = "STMTTRN"
TAG_TRANSACTION_TYPE = "TRNTYPE"
TAG_DATE_POSTED = "DTPOSTED"
TAG_DATE_USER = "DTUSER"
TAG_TRANSACTION_AMOUNT = "TRNAMT"
TAG_TRANSACTION_FITID = "FITID"
TAG_NAME = "NAME"
TAG_MEMO = "MEMO"


def format_ofx_time(moment: datetime) -> str:
    """Format a timestamp as ``YYYYMMDDHHMMSS.XXX[gmt offset:tz name]``.

    Naive datetimes are interpreted as local time.

    Examples
    --------
    >>> from datetime import timezone
    >>> format_ofx_time(datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc))
    '20240115103000.000[0:UTC]'
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()
    offset = moment.utcoffset() or timedelta(0)
    hours = int(offset.total_seconds() / 3600)
    sign = "+" if offset > timedelta(0) else ""
    millis = moment.microsecond // 1000
    tz_name = moment.tzname() or "UTC"
    return f"{moment:%Y%m%d%H%M%S}.{millis:03d}[{sign}{hours}:{tz_name}]"
