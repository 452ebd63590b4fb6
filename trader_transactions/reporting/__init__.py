"""Tabular reporting over stored transactions."""

from .frames import TRANSACTION_COLUMNS, SUMMARY_COLUMNS, transactions_to_frame, yearly_summary

__all__ = ['TRANSACTION_COLUMNS', 'SUMMARY_COLUMNS', 'transactions_to_frame', 'yearly_summary']
