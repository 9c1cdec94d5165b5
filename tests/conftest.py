"""Pytest fixtures for the food order facade demo."""

import pytest

from food_facade.facade import OrderFacade
from food_facade.journal import Journal
from food_facade.ledger import Ledger


@pytest.fixture
def journal() -> Journal:
    return Journal()


@pytest.fixture
def make_facade(journal):
    def _make(balance: int = 10000, debit: bool = False) -> OrderFacade:
        ledger = Ledger(available_money=balance, debit=debit, journal=journal)
        return OrderFacade(ledger=ledger, journal=journal)

    return _make


@pytest.fixture
def facade(make_facade) -> OrderFacade:
    return make_facade()
