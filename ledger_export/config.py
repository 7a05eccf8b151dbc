"""Configuration management for ledger-export."""

import re
from dataclasses import dataclass, field
from pathlib import Path

from ledger_export.exceptions import ConfigurationError
from ledger_export.export.ofx_helper import APP_ID
from ledger_export.export.qif_helper import QIF_DATE_FORMAT
from ledger_export.logging import LOG_FORMATS
from ledger_export.models.enums import OfxAccountType
from ledger_export.models.money import DEFAULT_CURRENCY_CODE

_CURRENCY_CODE_PATTERN = re.compile(r"^[A-Za-z]{3}$")


@dataclass
class OfxConfig:
    """OFX exporter configuration."""

    bank_id: str = APP_ID
    transfer_account_type: OfxAccountType = OfxAccountType.CHECKING


@dataclass
class QifConfig:
    """QIF exporter configuration."""

    date_format: str = QIF_DATE_FORMAT


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    export_all: bool = False


@dataclass
class LedgerConfig:
    """Main configuration for ledger-export."""

    default_currency: str = DEFAULT_CURRENCY_CODE
    ofx: OfxConfig = field(default_factory=OfxConfig)
    qif: QifConfig = field(default_factory=QifConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if not _CURRENCY_CODE_PATTERN.match(self.default_currency):
            raise ConfigurationError(
                f"Invalid default currency code: {self.default_currency!r}"
            )
        self.default_currency = self.default_currency.upper()
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Invalid log format: {self.log_format!r}")

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        ofx = OfxConfig(bank_id=os.getenv("LEDGER_OFX_BANK_ID", APP_ID))

        qif = QifConfig(date_format=os.getenv("LEDGER_QIF_DATE_FORMAT", QIF_DATE_FORMAT))

        output = OutputConfig(
            output_dir=Path(os.getenv("LEDGER_OUTPUT_DIR", "output")),
            export_all=os.getenv("LEDGER_EXPORT_ALL", "false").lower() == "true",
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from e

        return cls(
            default_currency=os.getenv("LEDGER_DEFAULT_CURRENCY", DEFAULT_CURRENCY_CODE),
            ofx=ofx,
            qif=qif,
            output=output,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
