"""Utility functions and helpers."""

from .parsing import parse_count, parse_currencies, parse_currency

__all__ = [
    "parse_count",
    "parse_currencies",
    "parse_currency",
]
