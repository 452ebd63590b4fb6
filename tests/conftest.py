"""
Pytest configuration and shared fixtures.
"""

import pytest
from trader_transactions.core.models import Trader, Transaction
from trader_transactions.store.transaction_store import TransactionStore


@pytest.fixture
def alice():
    return Trader('Alice', 'London')


@pytest.fixture
def bob():
    return Trader('Bob', 'Paris')


@pytest.fixture
def empty_store():
    """Create a store without transactions"""
    return TransactionStore()


@pytest.fixture
def sample_store(alice, bob):
    """Create a small store: Alice in London trading twice, Bob in Paris once"""
    store = TransactionStore()
    store.add(Transaction(alice, 2015, 100))
    store.add(Transaction(bob, 2015, 50))
    store.add(Transaction(alice, 2016, 200))
    return store


@pytest.fixture
def classic_traders():
    """Create the four traders of the classic sample data set"""
    return {
        'raoul': Trader('Raoul', 'Cambridge'),
        'mario': Trader('Mario', 'Milan'),
        'alan': Trader('Alan', 'Cambridge'),
        'brian': Trader('Brian', 'Cambridge'),
    }


@pytest.fixture
def classic_store(classic_traders):
    """Create a store holding the classic sample transactions"""
    t = classic_traders
    return TransactionStore([
        Transaction(t['brian'], 2011, 300),
        Transaction(t['raoul'], 2012, 1000),
        Transaction(t['raoul'], 2011, 400),
        Transaction(t['mario'], 2012, 710),
        Transaction(t['mario'], 2012, 700),
        Transaction(t['alan'], 2012, 950),
    ])
