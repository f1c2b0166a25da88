"""Text encoding of a single set as typed into a spreadsheet cell.

    "70kg, 5"   weight 70, 5 reps
    "72.5kg 3"  weight 72.5, 3 reps
    "70, 5"     weight 70, 5 reps
    "10"        bodyweight (weight 0), 10 reps

Anything else is "no set logged" and parses to ``None``.
"""
from __future__ import annotations
import re
from decimal import Decimal
from typing import Iterable, NamedTuple, Optional

from liftlog.domain import WorkoutSet

_WEIGHTED_RE = re.compile(
    r"^(\d+(?:\.\d+)?)\s*(?:kg(?:\s*,\s*|\s+)|,\s*)(\d+)$",
    re.IGNORECASE,
)
_BODYWEIGHT_RE = re.compile(r"^(\d+)$")


class ParsedSet(NamedTuple):
    weight: float
    reps: int


def parse_set_value(cell: Optional[str]) -> ParsedSet | None:
    if cell is None:
        return None
    text = str(cell).strip()
    if not text:
        return None

    m = _WEIGHTED_RE.match(text)
    if m:
        return ParsedSet(weight=float(m.group(1)), reps=int(m.group(2)))

    m = _BODYWEIGHT_RE.match(text)
    if m:
        return ParsedSet(weight=0.0, reps=int(m.group(1)))

    return None


def _format_weight(weight: float | Decimal) -> str:
    # plain positional digits; "1e-05" would not parse back
    d = weight if isinstance(weight, Decimal) else Decimal(repr(float(weight)))
    return format(d.normalize(), "f")


def format_set_value(weight: float | Decimal, reps: int) -> str:
    if float(weight) == 0:
        return str(reps)
    return f"{_format_weight(weight)}kg, {reps}"


def build_sets(warmup_cell: Optional[str], set_cells: Iterable[Optional[str]]) -> list[WorkoutSet]:
    """Warmup cell becomes set 0; working cells keep their column position 1..n."""
    sets: list[WorkoutSet] = []
    warmup = parse_set_value(warmup_cell)
    if warmup is not None:
        sets.append(WorkoutSet(weight=warmup.weight, reps=warmup.reps, is_warmup=True, set_number=0))
    for number, cell in enumerate(set_cells, start=1):
        parsed = parse_set_value(cell)
        if parsed is not None:
            sets.append(WorkoutSet(weight=parsed.weight, reps=parsed.reps, is_warmup=False, set_number=number))
    return sets
