from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from food_facade.facade import OrderFacade
from food_facade.journal import Journal
from food_facade.ledger import Ledger
from food_facade.models import InsufficientFunds, ProductKind

DEFAULT_ORDER = [ProductKind.Pizza, ProductKind.Spaghetti, ProductKind.Burger]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Order food through the facade and print each outcome.")
    p.add_argument("--balance", type=int, default=10000, help="Starting balance of the ledger")
    p.add_argument("--debit", action="store_true", help="Take each successful order off the balance")
    p.add_argument(
        "--product",
        dest="products",
        action="append",
        type=ProductKind,
        choices=list(ProductKind),
        default=None,
        help="Product to order; repeat for several (default: Pizza, Spaghetti, Burger)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Show facade and ledger logs")
    return p


def run(facade: OrderFacade, products: Sequence[ProductKind]) -> List[str]:
    lines = []
    for kind in products:
        outcome = facade.order_product(kind)
        if isinstance(outcome, InsufficientFunds):
            lines.append(f"Error: {outcome}")
        else:
            lines.append(f"{outcome.kind} ordered! Price: {outcome.price}")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    args = build_parser().parse_args(argv)
    logging.getLogger("food_facade").setLevel(logging.INFO if args.verbose else logging.WARNING)

    journal = Journal()
    ledger = Ledger(available_money=args.balance, debit=args.debit, journal=journal)
    facade = OrderFacade(ledger=ledger, journal=journal)

    for line in run(facade, args.products or DEFAULT_ORDER):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
