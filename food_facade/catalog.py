from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from food_facade.models import ProductKind


class UnknownProduct(KeyError):
    pass


PRICES: Mapping[ProductKind, int] = MappingProxyType(
    {
        ProductKind.Pizza: 350,
        ProductKind.Spaghetti: 300,
        ProductKind.Burger: 280,
    }
)


def check_exhaustive(table: Mapping[ProductKind, object], what: str) -> None:
    missing = [kind for kind in ProductKind if kind not in table]
    if missing:
        raise RuntimeError(f"No {what} for {', '.join(str(k) for k in missing)}")


check_exhaustive(PRICES, "price")


def price_of(kind: ProductKind) -> int:
    try:
        return PRICES[kind]
    except KeyError:
        raise UnknownProduct(kind) from None


@dataclass(slots=True, frozen=True)
class Pizza:
    size: str = ""

    kind = ProductKind.Pizza

    @property
    def price(self) -> int:
        return price_of(self.kind)


@dataclass(slots=True, frozen=True)
class Spaghetti:
    sauce_type: str = ""

    kind = ProductKind.Spaghetti

    @property
    def price(self) -> int:
        return price_of(self.kind)


@dataclass(slots=True, frozen=True)
class Burger:
    cheese_type: str = ""

    kind = ProductKind.Burger

    @property
    def price(self) -> int:
        return price_of(self.kind)


Product = Pizza | Spaghetti | Burger

_VARIANTS = {
    ProductKind.Pizza: Pizza,
    ProductKind.Spaghetti: Spaghetti,
    ProductKind.Burger: Burger,
}

check_exhaustive(_VARIANTS, "product variant")


def product_for(kind: ProductKind, **details: str) -> Product:
    """Build the product variant for ``kind``, e.g. ``product_for(Pizza, size="L")``."""
    try:
        variant = _VARIANTS[kind]
    except KeyError:
        raise UnknownProduct(kind) from None
    return variant(**details)
