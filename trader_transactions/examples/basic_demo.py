"""
Basic demonstration of the transaction store.
"""

import sys

from trader_transactions.core.models import Trader, Transaction
from trader_transactions.config.store_config import StoreConfig
from trader_transactions.store.transaction_store import TransactionStore
from trader_transactions.reporting.frames import yearly_summary


def create_demo_store(config: StoreConfig = None) -> TransactionStore:
    """Factory function to create a store with the sample transactions"""
    raoul = Trader("Raoul", "Cambridge")
    mario = Trader("Mario", "Milan")
    alan = Trader("Alan", "Cambridge")
    brian = Trader("Brian", "Cambridge")

    return TransactionStore([
        Transaction(brian, 2011, 300),
        Transaction(raoul, 2012, 1000),
        Transaction(raoul, 2011, 400),
        Transaction(mario, 2012, 710),
        Transaction(mario, 2012, 700),
        Transaction(alan, 2012, 950),
    ], config)


def demo_queries(store: TransactionStore) -> None:
    """Demonstrate the read-only queries"""
    print("=== Queries ===")
    print(f"Store: {store}")

    print("\nTransactions in 2011 (by value):")
    for transaction in store.transactions_in_year(2011):
        print(f"  {transaction}")

    print(f"\nCities: {', '.join(store.distinct_cities())}")
    print(f"Traders in Cambridge: {[t.name for t in store.traders_in_city('Cambridge')]}")
    print(f"Any trader in Milan: {store.has_trader_in_city('Milan')}")
    print(f"Trader names: {store.trader_names()}")

    print(f"\nHighest value: {store.highest_value()}")
    print(f"Total value: {store.total_value()}")
    print(f"Lowest value transaction: {store.lowest_value_transaction()}")

    print("\nTransactions by year:")
    for year, transactions in store.transactions_by_year().items():
        print(f"  {year}: {len(transactions)} transaction(s)")


def demo_relocation(store: TransactionStore) -> None:
    """Demonstrate moving traders between cities"""
    print("\n=== Relocation ===")
    moved = store.relocate_traders("Milan", "Cambridge")
    print(f"Moved from Milan: {[t.name for t in moved]}")
    print(f"Traders in Cambridge: {[t.name for t in store.traders_in_city('Cambridge')]}")
    print(f"Any trader in Milan: {store.has_trader_in_city('Milan')}")


def demo_reporting(store: TransactionStore) -> None:
    """Demonstrate the pandas views"""
    print("\n=== Reporting ===")
    print(store.to_frame().to_string(index=False))
    print()
    print(yearly_summary(store).to_string())


def comprehensive_demo():
    """Run a comprehensive demonstration"""
    config = StoreConfig.from_env()
    config.configure_logging()

    print("Trader Transactions Demo")
    print("=" * 50)

    store = create_demo_store(config)
    demo_queries(store)
    demo_relocation(store)
    demo_reporting(store)

    print("\n" + "=" * 50)
    return store


if __name__ == "__main__":
    if len(sys.argv) > 1:
        demo_name = sys.argv[1].lower()
        demo_store = create_demo_store()

        if demo_name == 'queries':
            demo_queries(demo_store)
        elif demo_name == 'relocation':
            demo_relocation(demo_store)
        elif demo_name == 'reporting':
            demo_reporting(demo_store)
        else:
            print(f"Unknown demo: {demo_name}")
            print("Available demos: queries, relocation, reporting")
    else:
        comprehensive_demo()
