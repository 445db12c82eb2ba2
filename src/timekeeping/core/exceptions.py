class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when inbound data is invalid (unknown event type, device, date...)."""


class NotFoundError(DomainError):
    """Raised when a record or event id does not exist in the ledger."""
