"""Ledger accounts with OFX and QIF export."""
