"""
pandas views of transactions for analysis and display.
"""

from typing import Iterable

import pandas as pd

from ..core.models import Transaction


TRANSACTION_COLUMNS = ['year', 'value', 'trader', 'city']
SUMMARY_COLUMNS = ['count', 'total', 'lowest', 'highest']


def transactions_to_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """One row per transaction, in the given order"""
    rows = [
        {
            'year': t.year,
            'value': t.value,
            'trader': t.trader.name,
            'city': t.trader.city,
        }
        for t in transactions
    ]
    return pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)


def yearly_summary(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Count, total, lowest and highest value per year, sorted by year"""
    frame = transactions_to_frame(transactions)
    if frame.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS, index=pd.Index([], name='year'))

    summary = frame.groupby('year')['value'].agg(
        count='count', total='sum', lowest='min', highest='max'
    )
    return summary.sort_index()
