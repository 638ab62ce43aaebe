"""Ports - interfaces/protocols for external dependencies."""

from .date_provider import DateProvider

__all__ = [
    "DateProvider",
]
