from __future__ import annotations

from typing import Optional

from food_facade.catalog import product_for
from food_facade.journal import Journal
from food_facade.kitchen import OrderSystem
from food_facade.ledger import Ledger
from food_facade.models import InsufficientFunds, OrderOutcome, ProductKind, Receipt


class OrderFacade:
    """
    One call to order food.

    Hides the price lookup, the ledger check and the kitchen behind
    ``order_product``. The facade owns a single ledger and hands the
    kitchen only orders that ledger has already covered.

    Without an explicit ``journal`` the facade writes to the ledger's
    journal (then the order system's), so every line of an order ends up
    in one place.
    """

    def __init__(
        self,
        ledger: Optional[Ledger] = None,
        order_system: Optional[OrderSystem] = None,
        journal: Optional[Journal] = None,
    ):
        if journal is None:
            if ledger is not None:
                journal = ledger.journal
            elif order_system is not None:
                journal = order_system.journal
            else:
                journal = Journal()
        self.journal = journal
        self.ledger = ledger or Ledger(journal=self.journal)
        self.order_system = order_system or OrderSystem(journal=self.journal)

    def order_product(self, kind: ProductKind, **details: str) -> OrderOutcome:
        product = product_for(kind, **details)
        price = product.price
        self.journal.log(f"[facade] ordering {kind} price={price}")

        withdrawn = self.ledger.withdraw(price)
        if withdrawn > 0:
            receipt = self.order_system.place(product, withdrawn)
            self.journal.log(f"[facade] {kind} OK")
            return receipt

        self.journal.log(f"[facade] {kind} FAILED: insufficient funds")
        return InsufficientFunds(kind)


def unwrap(outcome: OrderOutcome) -> Receipt:
    if isinstance(outcome, InsufficientFunds):
        raise outcome
    return outcome
