class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when caller input is invalid (bad date, inverted range, ...)."""


class ConfigurationError(DomainError):
    """Raised when a stored day plan cannot be turned into a calculation config."""
