"""Errors raised by the storefront beyond Protean's own taxonomy.

``protean.exceptions.ValidationError`` and ``ObjectNotFoundError`` cover
invalid input and missing records; the classes here cover authentication,
authorization and referential-integrity failures.
"""


class StorefrontError(Exception):
    """Base class for storefront errors carrying a caller-facing message."""

    default_message = "Request could not be processed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthorizedError(StorefrontError):
    """No valid principal could be resolved for the request."""

    default_message = "Full authentication is required to access this resource"


class ForbiddenError(StorefrontError):
    """The principal is known but may not perform the operation."""

    default_message = "Access denied"


class ConflictError(StorefrontError):
    """The operation would break a reference held by another record."""

    default_message = "Operation conflicts with existing data"
