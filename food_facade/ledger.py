from __future__ import annotations

from typing import Optional

from food_facade.journal import Journal


class Ledger:
    """
    Spendable balance behind the facade.

    ``withdraw`` only answers whether the amount can be covered. The balance
    is left untouched unless ``debit`` is set, in which case every successful
    withdrawal is taken off ``available_money``.
    """

    def __init__(self, available_money: int = 10000, debit: bool = False, journal: Optional[Journal] = None):
        if available_money < 0:
            raise ValueError(f"available_money must be >= 0, got {available_money}")
        self.available_money = available_money
        self.debit = debit
        self.journal = journal or Journal()

    def withdraw(self, amount: int) -> int:
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise ValueError(f"amount must be a positive integer, got {amount!r}")

        # a withdrawal equal to the balance is refused
        if self.available_money > amount:
            if self.debit:
                self.available_money -= amount
            self.journal.log(f"[ledger] withdrawn {amount} (available={self.available_money})")
            return amount

        self.journal.log(f"[ledger] refused {amount}: have={self.available_money}, need more than {amount}")
        return 0
