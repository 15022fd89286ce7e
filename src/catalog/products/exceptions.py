"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API exception handler translates them into HTTP responses
through their ``ErrorKind``.
"""

from __future__ import annotations

from catalog.core.exceptions import BadRequestError, ConflictError, NotFoundError


class ProductAlreadyExists(ConflictError):
    """One or more product names are duplicated in the request or
    already used by an active product."""


class ProductNotFound(NotFoundError):
    """The requested product does not exist or is discontinued."""


class InvalidProductRequest(BadRequestError):
    """The product request is malformed."""
