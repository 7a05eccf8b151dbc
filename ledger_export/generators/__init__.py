"""Sample data generators for ledgers."""

from ledger_export.generators.ledger import AccountGenerator, TransactionGenerator

__all__ = ["AccountGenerator", "TransactionGenerator"]
