"""Summary statistics for conversion diagnostics."""

from collections.abc import Sequence

from pydantic import BaseModel


class Statistics(BaseModel):
    mean: float
    median: float
    min: float
    max: float
    count: int


def _median(values: Sequence[float]) -> float:
    n = len(values)
    if n == 0:
        return 0.0
    ordered = sorted(values)
    mid = n // 2
    if n % 2:
        return float(ordered[mid])
    return (ordered[mid - 1] + ordered[mid]) / 2


def statistics(values: Sequence[float]) -> Statistics:
    """Compute basic statistics from a sequence of values.

    Args:
        values (Sequence[float]): The values to summarise, e.g. blocks per section.

    Returns:
        Statistics: All zeros when `values` is empty.
    """
    if not values:
        return Statistics(mean=0.0, median=0.0, min=0.0, max=0.0, count=0)

    return Statistics(
        mean=sum(values) / len(values),
        median=_median(values),
        min=min(values),
        max=max(values),
        count=len(values),
    )
