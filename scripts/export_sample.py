#!/usr/bin/env python3
"""Generate a sample ledger and export it as OFX or QIF.

The ledger holds a ROOT account with two branches, Assets:Checking and
Expenses:Groceries. Part of the Checking transactions are transfers to
Groceries, so the exports show both legs of a transfer.
"""

import argparse
import logging
import random
import sys
import xml.etree.ElementTree as ET
from datetime import datetime
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ledger_export.config import LedgerConfig
from ledger_export.export import OfxExporter, QifExporter
from ledger_export.generators import AccountGenerator, TransactionGenerator
from ledger_export.logging import LOG_FORMATS, setup_logging
from ledger_export.models import Account, AccountType
from ledger_export.store import AccountStore

logger = logging.getLogger(__name__)

OFX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'
    '<?OFX OFXHEADER="200" VERSION="211" SECURITY="NONE" '
    'OLDFILEUID="NONE" NEWFILEUID="NONE"?>\n'
)

TRANSFER_RATE = 0.3


def build_ledger(
    store: AccountStore,
    config: LedgerConfig,
    num_transactions: int,
) -> list[Account]:
    """Populate ``store`` and return the accounts holding transactions."""
    account_gen = AccountGenerator(seed=config.seed)
    transaction_gen = TransactionGenerator(seed=config.seed)
    currency = config.default_currency

    root = Account("Root Account", currency, AccountType.ROOT)
    store.add_account(root)

    assets = account_gen.generate("Assets", AccountType.ASSET, currency, root.uid)
    assets.is_placeholder = True
    store.add_account(assets)
    checking = account_gen.generate("Checking", AccountType.BANK, currency, assets.uid)
    store.add_account(checking)

    expenses = account_gen.generate("Expenses", AccountType.EXPENSE, currency, root.uid)
    expenses.is_placeholder = True
    store.add_account(expenses)
    groceries = account_gen.generate("Groceries", AccountType.EXPENSE, currency, expenses.uid)
    store.add_account(groceries)
    checking.default_transfer_account_uid = groceries.uid

    for _ in range(num_transactions):
        transfer_uid = groceries.uid if random.random() < TRANSFER_RATE else None
        transaction = transaction_gen.generate(
            account_uid=checking.uid,
            double_entry_account_uid=transfer_uid,
            currency=currency,
        )
        store.add_transaction(transaction)

    logger.info("Generated ledger: %s", store.summary())
    return [checking, groceries]


def write_ofx(
    accounts: list[Account],
    output: Path,
    config: LedgerConfig,
    include_all: bool,
) -> None:
    """Write an OFX document with one statement per account."""
    exporter = OfxExporter(
        bank_id=config.ofx.bank_id,
        transfer_account_type=config.ofx.transfer_account_type,
    )
    now = datetime.now().astimezone()

    ofx = ET.Element("OFX")
    messages = ET.SubElement(ofx, "BANKMSGSRSV1")
    for account in accounts:
        response = ET.SubElement(messages, "STMTTRNRS")
        ET.SubElement(response, "TRNUID").text = account.uid
        exporter.export(account, include_all, now, parent=response)

    ET.indent(ofx)
    output.write_text(OFX_HEADER + ET.tostring(ofx, encoding="unicode"), encoding="utf-8")


def write_qif(
    accounts: list[Account],
    output: Path,
    store: AccountStore,
    config: LedgerConfig,
    include_all: bool,
) -> None:
    """Write a QIF file with one block per account."""
    exporter = QifExporter(store.fully_qualified_name, config.qif.date_format)
    blocks = [exporter.export(account, include_all) for account in accounts]
    output.write_text("".join(blocks), encoding="utf-8")


def mark_exported(accounts: list[Account]) -> int:
    """Flag every transaction of ``accounts`` as exported."""
    count = 0
    for account in accounts:
        for transaction in account.transactions:
            if not transaction.is_exported:
                transaction.is_exported = True
                count += 1
    return count


def main() -> None:
    """Generate a sample ledger and export it."""
    config = LedgerConfig.from_env()

    parser = argparse.ArgumentParser(description="Export a generated sample ledger")
    parser.add_argument("--format", choices=["ofx", "qif"], default="qif", help="Export format")
    parser.add_argument(
        "--transactions",
        type=int,
        default=20,
        help="Number of transactions recorded in Checking (default: 20)",
    )
    parser.add_argument("--seed", type=int, default=config.seed, help="Random seed")
    parser.add_argument(
        "--all",
        action="store_true",
        default=config.output.export_all,
        help="Export all transactions, not only the unexported ones",
    )
    parser.add_argument("--output", type=Path, default=None, help="Output file path")
    parser.add_argument("--log-level", default=config.log_level, help="Log level")
    parser.add_argument(
        "--log-format", choices=LOG_FORMATS, default=config.log_format, help="Log format"
    )
    args = parser.parse_args()

    setup_logging(args.log_level, args.log_format)
    config.seed = args.seed

    output = args.output or config.output.output_dir / f"sample.{args.format}"
    output.parent.mkdir(parents=True, exist_ok=True)

    store = AccountStore()
    accounts = build_ledger(store, config, args.transactions)

    if args.format == "ofx":
        write_ofx(accounts, output, config, args.all)
    else:
        write_qif(accounts, output, store, config, args.all)

    marked = mark_exported(accounts)
    logger.info("Wrote %s (%d transactions marked as exported)", output, marked)


if __name__ == "__main__":
    main()
