"""Models for vanilla."""

from .value_record import ValueRecord

__all__ = [
    "ValueRecord",
]
