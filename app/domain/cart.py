"""Cart and product domain objects."""
from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from app.core.exceptions import CartIndexError, ValidationException

Money = Decimal

# Shared by all carts, so a cart created after another expired never
# repeats one of its revisions
_revisions = itertools.count(1)


def to_money(value: object) -> Money:
    """Convert int/float/str/Decimal into a finite, non-negative Decimal."""
    if isinstance(value, bool):
        raise ValidationException(f"Invalid price: {value!r}")
    try:
        # str() keeps 9.99 as 9.99 instead of the binary float expansion
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationException(f"Invalid price: {value!r}") from exc
    if not amount.is_finite():
        raise ValidationException(f"Invalid price: {value!r}")
    if amount < 0:
        raise ValidationException(f"Price must not be negative: {value!r}")
    return amount


@dataclass(frozen=True)
class Product:
    """A purchasable item with a display name and a price."""

    name: str
    price: Money

    def __post_init__(self) -> None:
        name = str(self.name).strip()
        if not name:
            raise ValidationException("Product name must not be empty")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "price", to_money(self.price))


class Cart:
    """Ordered collection of products with a running total.

    Positions are zero-based and stable: removing an item shifts the
    following items down by one and keeps their relative order.
    `revision` changes on every mutation, so a position can be tied to the
    contents it was read from.
    """

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])
        self.revision = next(_revisions)

    @property
    def count(self) -> int:
        return len(self._products)

    @property
    def total_price(self) -> Money:
        return sum((product.price for product in self._products), Decimal("0"))

    def product(self, at: int) -> Product:
        self._check_index(at)
        return self._products[at]

    def add(self, product: Product) -> None:
        self._products.append(product)
        self.revision = next(_revisions)

    def remove(self, at: int) -> Product:
        self._check_index(at)
        removed = self._products.pop(at)
        self.revision = next(_revisions)
        return removed

    def clear(self) -> None:
        self._products.clear()
        self.revision = next(_revisions)

    def _check_index(self, at: int) -> None:
        # negative positions would silently wrap around on a list
        if not isinstance(at, int) or at < 0 or at >= len(self._products):
            raise CartIndexError(at, len(self._products))

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._products))

    def __repr__(self) -> str:
        return f"Cart(count={self.count}, total={self.total_price})"
