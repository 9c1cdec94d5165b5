from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ProductKind(str, Enum):
    Pizza = "Pizza"
    Spaghetti = "Spaghetti"
    Burger = "Burger"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class Receipt:
    """Proof of a funded order: what was ordered and how much was paid."""

    kind: ProductKind
    price: int


class InsufficientFunds(Exception):
    def __init__(self, kind: ProductKind):
        super().__init__(f"Not enough money to order {kind}")
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InsufficientFunds):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash((InsufficientFunds, self.kind))

    def __repr__(self) -> str:
        return f"InsufficientFunds(kind={self.kind!s})"


OrderOutcome = Union[Receipt, InsufficientFunds]
