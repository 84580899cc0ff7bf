"""Domain-level exceptions.

All failures of a confirmation are expressed as subclasses of
DomainException so the application layer can turn them into a single
failure outcome and the CLI can display them uniformly.

Every concrete exception carries an ``ErrorKind`` tag.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_CODE_FORMAT = "InvalidCodeFormat"
    PRODUCT_NOT_FOUND = "ProductNotFound"
    OUT_OF_STOCK = "OutOfStock"
    EMPTY_ORDER = "EmptyOrder"
    TRANSACTION_CONFLICT = "TransactionConflict"
    STORE_UNAVAILABLE = "StoreUnavailable"
    VALIDATION = "Validation"
    NOT_FOUND = "NotFound"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = ErrorKind.VALIDATION


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class InvalidCodeFormat(ValidationError):
    """A product code is not of the form ``<productId>-<size>``."""

    kind = ErrorKind.INVALID_CODE_FORMAT


class ProductNotFound(EntityNotFoundError):
    kind = ErrorKind.PRODUCT_NOT_FOUND


class OutOfStock(ValidationError):
    """The requested size is missing or has no units left."""

    kind = ErrorKind.OUT_OF_STOCK


class EmptyOrder(ValidationError):
    kind = ErrorKind.EMPTY_ORDER


class StoreError(DomainException):
    """The backing store could not complete a transaction."""


class TransactionConflict(StoreError):
    """Concurrent writers kept invalidating the transaction's reads."""

    kind = ErrorKind.TRANSACTION_CONFLICT


class StoreUnavailable(StoreError):
    kind = ErrorKind.STORE_UNAVAILABLE
