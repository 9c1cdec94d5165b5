from __future__ import annotations

from typing import List, Optional

from food_facade.catalog import Product
from food_facade.journal import Journal
from food_facade.models import Receipt


class OrderSystem:
    """Subsystem that turns an already-paid order into a receipt."""

    def __init__(self, journal: Optional[Journal] = None):
        self.journal = journal or Journal()
        self.placed: List[Receipt] = []

    def place(self, product: Product, paid: int) -> Receipt:
        if paid <= 0:
            raise ValueError(f"Order for {product.kind} must be paid, got {paid}")
        receipt = Receipt(kind=product.kind, price=paid)
        self.placed.append(receipt)
        self.journal.log(f"[kitchen] order placed: {product!r} paid={paid} (#{len(self.placed)})")
        return receipt
