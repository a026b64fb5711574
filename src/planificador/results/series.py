"""Normalization of the analytics series.

Two independent transforms:

- `normalize_history`: inertia-per-iteration into a fixed 100 x 100 line
  chart space where larger values are drawn higher (smaller y).
- `normalize_loads`: per-hospital neighborhood counts into bar widths
  relative to the busiest hospital.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from planificador.core.result import HospitalSummary
from planificador.results.formatting import format_number


CHART_SIZE = 100.0
FLAT_SERIES_Y = CHART_SIZE / 2


@dataclass(frozen=True)
class ConvergenceSeries:
    """Line-chart geometry for the inertia history.

    Attributes:
        points: (draw_x, draw_y) per sample, empty when there is nothing to draw.
        first: First raw history value, None when empty.
        last: Last raw history value, None when empty.
    """
    points: Tuple[Tuple[float, float], ...] = ()
    first: Optional[float] = None
    last: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def caption(self) -> str:
        """Initial and final inertia, rounded to whole units."""
        return f"Inercia inicial: {format_number(self.first, 0)} • Final: {format_number(self.last, 0)}"


def normalize_history(history: Sequence[float]) -> ConvergenceSeries:
    """Map an inertia history into 100 x 100 chart coordinates.

    For n + 1 samples h_0..h_n:

        draw_x_i = i / max(n, 1) * 100
        draw_y_i = 100 - (h_i - lo) / (hi - lo) * 100

    A flat series (hi == lo) is drawn along the vertical midpoint. Fewer
    than two samples give an empty series.
    """
    if len(history) < 2:
        return ConvergenceSeries()

    values = np.asarray(history, dtype=float)
    lo = float(values.min())
    hi = float(values.max())
    n = len(values) - 1

    xs = np.arange(len(values)) / max(n, 1) * CHART_SIZE
    if hi == lo:
        ys = np.full(len(values), FLAT_SERIES_Y)
    else:
        ys = CHART_SIZE - (values - lo) / (hi - lo) * CHART_SIZE

    points = tuple((float(x), float(y)) for x, y in zip(xs, ys))
    return ConvergenceSeries(points=points, first=float(values[0]), last=float(values[-1]))


@dataclass(frozen=True)
class LoadBar:
    """One bar of the hospital load chart.

    Attributes:
        hospital_id: Hospital the bar belongs to.
        count: Neighborhoods assigned to it.
        fraction: count / busiest count, in [0, 1].
    """
    hospital_id: int
    count: int
    fraction: float

    @property
    def width_percent(self) -> float:
        return self.fraction * 100

    @property
    def label(self) -> str:
        return f"H{self.hospital_id}"

    @property
    def count_label(self) -> str:
        return f"{self.count} vecindarios"


def load_fractions(counts: Sequence[int]) -> List[float]:
    """Each count divided by the largest one.

    The divisor never drops below 1, so all-zero counts give all-zero widths.
    """
    if len(counts) == 0:
        return []
    max_count = max(max(counts), 1)
    return [count / max_count for count in counts]


def normalize_loads(summaries: Sequence[HospitalSummary]) -> Tuple[LoadBar, ...]:
    """Bars for the load chart, one per summary, in summary order."""
    counts = [s.vecindarios_asignados for s in summaries]
    fractions = load_fractions(counts)
    return tuple(
        LoadBar(hospital_id=s.hospital_id, count=s.vecindarios_asignados, fraction=f)
        for s, f in zip(summaries, fractions)
    )
