"""Core models and field access."""

from .fields import (UnknownFieldError, field_names, get_field, resolve_field,
                     set_field)
from .models import ValueRecord

__all__ = [
    "ValueRecord",
    "UnknownFieldError",
    "field_names",
    "get_field",
    "resolve_field",
    "set_field",
]
