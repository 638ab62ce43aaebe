"""Adapters - implementations of ports."""

from .gregorian import GregorianDateProvider

__all__ = [
    "GregorianDateProvider",
]
