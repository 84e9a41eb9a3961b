# services/roster-api/app/serve/ranker.py
from __future__ import annotations
import re
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from app.core.config import MAGIC_KEY, PHYSICAL_KEY, VALUE_KEY

Record = Mapping[str, str]

# Leading ASCII decimal literal, e.g. "12", "-3.5", ".5", "1e3", "Infinity"
_NUMBER_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


class InvalidMode(ValueError):
    """Raised when a ranking mode is not one of magic / physical / value."""


class RankingMode(str, Enum):
    MAGIC = "magic"
    PHYSICAL = "physical"
    VALUE = "value"


# mode -> (primary field, secondary field); both sorted high -> low
RANKING_FIELDS: Dict[RankingMode, Tuple[str, str]] = {
    RankingMode.MAGIC: (MAGIC_KEY, VALUE_KEY),
    RankingMode.PHYSICAL: (PHYSICAL_KEY, VALUE_KEY),
    RankingMode.VALUE: (VALUE_KEY, MAGIC_KEY),
}


def to_mode(mode: Union[RankingMode, str, None]) -> RankingMode:
    try:
        return RankingMode(mode)
    except ValueError:
        raise InvalidMode(f"unknown ranking mode: {mode!r}") from None


def resolve_fields(mode: Union[RankingMode, str]) -> Tuple[str, str]:
    """Return (primary_field, secondary_field) for a mode."""
    return RANKING_FIELDS[to_mode(mode)]


def parse_numeric_or_zero(value: Optional[str]) -> float:
    """
    Read the leading number of a cell, e.g. "12", " 3.5 ", "40 pts".
    Empty, missing, non-numeric and NaN cells all count as 0.
    """
    if value is None:
        return 0.0
    m = _NUMBER_PREFIX.match(str(value).strip())
    if not m:
        return 0.0
    return float(m.group(0).replace("Infinity", "inf"))


def rank(records: Sequence[Record], mode: Union[RankingMode, str], k: int = 5) -> List[Dict[str, str]]:
    """
    Top-k records by the mode's primary field, ties broken by its secondary
    field, both descending. Records equal on both keep their input order.
    Returned records are copies; the inputs are left untouched.
    """
    primary_key, secondary_key = resolve_fields(mode)

    decorated = [
        (parse_numeric_or_zero(r.get(primary_key)), parse_numeric_or_zero(r.get(secondary_key)), r)
        for r in records
    ]
    # list.sort is stable, including with reverse=True
    decorated.sort(key=lambda t: (t[0], t[1]), reverse=True)
    return [dict(r) for _, _, r in decorated[:max(k, 0)]]
