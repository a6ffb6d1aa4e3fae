class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or cannot be parsed."""


class AuthorizationError(DomainError):
    """Raised when the active person lacks permission for an action."""


class RemoteConfigError(DomainError):
    """Raised when a remote configuration or shareable link cannot be used."""
