"""Growth chart calculations."""

from dataclasses import dataclass
from datetime import date

from baby_tracker.domain.dates import format_date_short
from baby_tracker.domain.models import GrowthRecord

GROWTH_METRICS = ("weight", "height")


@dataclass(frozen=True)
class ChartBar:
    """A single bar in a growth chart."""

    date: date
    label: str
    value: float
    percent: float


def growth_chart(records: list[GrowthRecord], metric: str) -> list[ChartBar]:
    """Scale each record's metric against the largest value in the series."""
    if metric not in GROWTH_METRICS:
        raise ValueError(f"Unknown growth metric: {metric}")
    if not records:
        return []
    values = [float(getattr(record, metric)) for record in records]
    peak = max(values)
    return [
        ChartBar(
            date=record.date,
            label=format_date_short(record.date),
            value=value,
            percent=(value / peak * 100) if peak else 0.0,
        )
        for record, value in zip(records, values, strict=True)
    ]
