"""Custom exception hierarchy for realty-crm."""


class RealtyCRMError(Exception):
    """Base exception for all realty-crm errors."""


class RecordNotFoundError(RealtyCRMError):
    """Raised when a referenced record does not exist."""


class InvalidRecordError(RealtyCRMError):
    """Raised when record data or a patch is malformed."""


class InvalidQueryError(RealtyCRMError):
    """Raised when a query descriptor is malformed."""


class StoreTimeoutError(RealtyCRMError):
    """Raised when a store call exceeds the configured timeout."""


class ConfigurationError(RealtyCRMError):
    """Raised when configuration is invalid or missing."""
