"""QIF record markers and headers."""

from datetime import datetime

ACCOUNT_HEADER = "!Account"
ACCOUNT_NAME_PREFIX = "N"
ENTRY_TERMINATOR = "^"

DATE_PREFIX = "D"
AMOUNT_PREFIX = "T"
PAYEE_PREFIX = "P"
MEMO_PREFIX = "M"

QIF_DATE_FORMAT = "%m/%d/%Y"

DEFAULT_TYPE_HEADER = "!Type:Cash"


def format_qif_date(moment: datetime, date_format: str = QIF_DATE_FORMAT) -> str:
    return moment.strftime(date_format)


def qif_field(value: str) -> str:
    """Flatten ``value`` onto one line, since every QIF line is a field."""
    return " ".join(value.splitlines())
