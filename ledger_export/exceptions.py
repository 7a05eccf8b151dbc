"""Custom exception hierarchy for ledger-export."""


class LedgerExportError(Exception):
    """Base exception for all ledger-export errors."""


class InvalidArgumentError(LedgerExportError, ValueError):
    """Raised when a required argument is missing."""


class InvalidFormatError(LedgerExportError, ValueError):
    """Raised when a string value does not match its expected format."""


class EntityNotFoundError(LedgerExportError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a parent account reference is violated."""


class InvalidEntityStateError(LedgerExportError):
    """Raised when an entity is in an invalid state for the operation."""


class ConfigurationError(LedgerExportError):
    """Raised when configuration is invalid or missing."""
