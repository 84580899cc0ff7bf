"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from orderbot.domain.exceptions import InvalidCodeFormat, ValidationError

_LEADING_NUMBER = re.compile(r"\+?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
# largest power of ten a double can hold
_MAX_EXPONENT = 308


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations. Single currency only.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


def parse_amount(raw: str | None) -> Decimal:
    """Read the leading unsigned number of *raw*, or 0.

    Follows ``parseFloat``: ``"150 tk"`` gives 150, ``"+5"`` gives 5 and
    ``"1e3"`` gives 1000. ``"abc"``, ``""``, ``"-5"`` and values too large
    for a float give 0. Never raises.
    """
    if raw is None:
        return Decimal("0")
    match = _LEADING_NUMBER.match(raw.strip())
    if match is None:
        return Decimal("0")
    amount = Decimal(match.group(0))
    if amount.adjusted() > _MAX_EXPONENT:
        return Decimal("0")
    return amount


@dataclass(frozen=True)
class ProductCode:
    """A ``<productId>-<size>`` token from a confirmation command."""

    product_id: str
    size: str

    @staticmethod
    def parse(code: str) -> ProductCode:
        """Split *code* into a product id and a normalised size label.

        Raises InvalidCodeFormat unless the code has exactly two
        non-empty parts.
        """
        parts = code.split("-")
        if len(parts) != 2:
            raise InvalidCodeFormat(f"Invalid code: {code!r}")
        product_id, size = (part.strip() for part in parts)
        if not product_id or not size:
            raise InvalidCodeFormat(f"Invalid code: {code!r}")
        return ProductCode(product_id=product_id, size=size.upper())

    def __str__(self) -> str:
        return f"{self.product_id}-{self.size}"
