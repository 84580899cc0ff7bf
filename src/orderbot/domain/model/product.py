"""Product aggregate — a catalogue entry with per-size stock.

Products are created and managed outside the confirmation flow. The
confirmation flow only reads them and takes single units out of a
size bucket.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from orderbot.domain.exceptions import OutOfStock, ValidationError
from orderbot.domain.model.value_objects import Money


def normalize_size(size: str) -> str:
    return size.strip().upper()


@dataclass
class Product:
    """Aggregate root for inventory tracking.

    Invariants:
    - every quantity in ``sizes`` is >= 0
    - ``available_amount`` always equals the sum of ``sizes``
    """

    product_id: str
    name: str
    sizes: dict[str, int] = field(default_factory=dict)
    buying_price: Money = field(default_factory=Money.zero)
    selling_price: Money = field(default_factory=Money.zero)
    id: str | None = None  # document identity, assigned by the store

    def __post_init__(self) -> None:
        normalized: dict[str, int] = {}
        for size, quantity in self.sizes.items():
            if quantity < 0:
                raise ValidationError(
                    f"Stock for {self.name} (Size: {size}) cannot be negative"
                )
            key = normalize_size(size)
            normalized[key] = normalized.get(key, 0) + quantity
        self.sizes = normalized

    @property
    def available_amount(self) -> int:
        return sum(self.sizes.values())

    def in_stock(self, size: str) -> bool:
        return self.sizes.get(normalize_size(size), 0) > 0

    def take_one(self, size: str) -> None:
        """Remove a single unit from the *size* bucket.

        Raises OutOfStock if the bucket is missing or empty.
        """
        key = normalize_size(size)
        if not self.in_stock(key):
            raise OutOfStock(f"Product {self.name} (Size: {key}) is out of stock.")
        self.sizes[key] -= 1

    def set_stock(self, size: str, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Stock quantity cannot be negative")
        self.sizes[normalize_size(size)] = quantity
