"""Value record model using Pydantic."""

import math
from datetime import date, datetime
from typing import Any, Optional, Tuple, Union

from pydantic import BaseModel, Field

HASH_MULTIPLIER = 31

# Bit pattern of the canonical single-precision NaN; every NaN pct hashes to it.
NAN_PCT_HASH = 0x7FC00000


class ValueRecord(BaseModel):
    """Mutable record with value semantics.

    Records start empty (every optional field unset, ``age`` at zero) and are
    filled in one attribute at a time. Two records are equal when all five
    fields are equal, and the hash follows the same fields, so it changes when
    a field is reassigned.

    ``pct`` compares by value: any NaN equals any other NaN, and ``0.0`` differs
    from ``-0.0``.
    """

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
    }

    label: Optional[str] = Field(None, description="Free text label")
    age: int = Field(0, description="Age, no declared valid range")
    startDate: Optional[Union[date, datetime]] = Field(
        None, description="Start date, either a calendar date or an instant"
    )
    # Kept as raw text, independent from startDate.
    birthday: Optional[str] = Field(None, description="Birthday as free text")
    pct: Optional[float] = Field(None, description="Percentage, unset is not zero")

    def _pct_key(self) -> Optional[Tuple[Any, ...]]:
        """Comparison key for pct; NaNs collapse to one key, signed zeros stay apart."""
        if self.pct is None:
            return None
        if math.isnan(self.pct):
            return ("nan",)
        return (self.pct, math.copysign(1.0, self.pct))

    def _value_fields(self) -> Tuple[Any, ...]:
        """Field values in declaration order, with pct replaced by its comparison key."""
        return (self.label, self.age, self.startDate, self.birthday, self._pct_key())

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._value_fields() == other._value_fields()

    def __hash__(self) -> int:
        result = 0
        for value in (self.label, self.age, self.startDate, self.birthday):
            if value is None:
                field_hash = 0
            elif isinstance(value, int):
                field_hash = value
            else:
                field_hash = hash(value)
            result = HASH_MULTIPLIER * result + field_hash

        if self.pct is None:
            pct_hash = 0
        elif math.isnan(self.pct):
            pct_hash = NAN_PCT_HASH
        else:
            pct_hash = hash(self.pct)
        return hash(HASH_MULTIPLIER * result + pct_hash)
