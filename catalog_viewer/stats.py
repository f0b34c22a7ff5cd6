"""
Exact summary statistics over decimal column values.

All arithmetic stays in ``decimal.Decimal``; no value is ever routed through a
float. Inputs are never mutated: sorting happens on an internal copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from typing import Iterable, Optional, Sequence

from catalog_viewer.exceptions import EmptyDataError

_TWO = Decimal(2)


@dataclass(frozen=True)
class ColumnStatistics:
    min: Decimal
    max: Decimal
    median: Decimal


def _midpoint(low: Decimal, high: Decimal) -> Decimal:
    """(low + high) / 2 without rounding, whatever the ambient context precision."""
    if not (low.is_finite() and high.is_finite()):
        # -Infinity + Infinity has no midpoint; yield NaN instead of trapping
        with localcontext() as ctx:
            ctx.traps[InvalidOperation] = False
            return (low + high) / _TWO
    # digits spanned by the exact sum, plus one for a carry and one for the halving
    span = (
        max(low.adjusted(), high.adjusted())
        - min(low.as_tuple().exponent, high.as_tuple().exponent)
        + 3
    )
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, span)
        return (low + high) / _TWO


def median(values: Sequence[Decimal]) -> Decimal:
    """
    Compute the median of a sequence of decimals.

    Parameters
    ----------
    values : Sequence[Decimal]
        Values in any order, none of them NaN. The sequence is copied before
        sorting.

    Returns
    -------
    Decimal
        The middle value for an odd count, or the exact mean of the two middle
        values for an even count.

    Raises
    ------
    EmptyDataError
        If ``values`` is empty.
    """
    ordered = sorted(values)
    size = len(ordered)
    if size == 0:
        raise EmptyDataError("median requires at least one value")
    middle = size // 2
    if size % 2 == 0:
        return _midpoint(ordered[middle - 1], ordered[middle])
    return ordered[middle]


def summarize(values: Iterable[Optional[Decimal]]) -> Optional[ColumnStatistics]:
    """
    Return min/max/median over the finite values, or None when there are none.

    NULLs, NaN and infinities (legal in BINARY_FLOAT / BINARY_DOUBLE columns)
    are left out, so they never reach the ordering comparisons.
    """
    present = [value for value in values if value is not None and value.is_finite()]
    if not present:
        return None
    return ColumnStatistics(min=min(present), max=max(present), median=median(present))


__all__ = ["ColumnStatistics", "median", "summarize"]
