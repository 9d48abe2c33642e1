"""Errors raised by mutation handlers.

All of them are :class:`ValueError` subclasses so callers that only care
about "the request was rejected" can keep catching ``ValueError``.
"""


class ValidationError(ValueError):
    """The input is well-formed but cannot be used (e.g. an unreadable file)."""


class NotFoundError(ValueError):
    """A referenced record does not exist."""


class DomainRuleError(ValueError):
    """A warehouse business rule rejects the change."""

    def __init__(self, message: str, **context: object) -> None:
        super().__init__(message)
        self.message = message
        self.context = context


class ConflictError(ValueError):
    """The store refused the write (uniqueness or a record still in use)."""


class AuthenticationError(ValueError):
    """A password did not match."""


__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainRuleError",
    "NotFoundError",
    "ValidationError",
]
