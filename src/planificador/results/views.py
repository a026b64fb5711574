"""Result views, one variant per tab.

`build_view(tab, result)` returns exactly one of PlotView, AnalyticsView
or DetailView. The UI renders whichever variant it gets; nothing here
depends on Streamlit.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from planificador.core.entities import ViewTab
from planificador.core.result import Metrics, SimulationResult
from planificador.results.formatting import format_number
from planificador.results.geometry import PlotGeometry, build_plot_geometry
from planificador.results.rows import HospitalRow, compose_rows
from planificador.results.series import (
    ConvergenceSeries,
    LoadBar,
    normalize_history,
    normalize_loads,
)


@dataclass(frozen=True)
class QuickMetric:
    label: str
    value: str


def quick_metrics(metrics: Metrics) -> Tuple[QuickMetric, ...]:
    """Headline metric cards shown next to the form."""
    return (
        QuickMetric("Distancia promedio", f"{format_number(metrics.avg_distance)} km"),
        QuickMetric("Distancia máxima", f"{format_number(metrics.max_distance)} km"),
        QuickMetric("Inercia (km²)", format_number(metrics.inertia, 0)),
        QuickMetric("Iteraciones", str(metrics.iterations)),
    )


def convergence_badge(iterations: int) -> str:
    noun = "iteración" if iterations == 1 else "iteraciones"
    return f"Convergió en {iterations} {noun}."


def summary_line(result: SimulationResult) -> str:
    return (
        f"Se agruparon {len(result.neighborhoods)} vecindarios dentro de una "
        f"cuadrícula de {result.grid_size} km, ubicando {len(result.hospitals)} hospitales."
    )


@dataclass(frozen=True)
class PlotView:
    tab = ViewTab.PLOT
    geometry: PlotGeometry
    badge: str
    summary: str


@dataclass(frozen=True)
class AnalyticsView:
    tab = ViewTab.ANALYTICS
    convergence: ConvergenceSeries
    loads: Tuple[LoadBar, ...]


@dataclass(frozen=True)
class DetailView:
    tab = ViewTab.DETAIL
    rows: Tuple[HospitalRow, ...]


ResultView = Union[PlotView, AnalyticsView, DetailView]


def build_view(tab: ViewTab, result: SimulationResult) -> ResultView:
    """Build the view variant for the active tab.

    Raises:
        ValueError: For a tab with no view.
    """
    if tab is ViewTab.PLOT:
        return PlotView(
            geometry=build_plot_geometry(result),
            badge=convergence_badge(result.metrics.iterations),
            summary=summary_line(result),
        )
    if tab is ViewTab.ANALYTICS:
        return AnalyticsView(
            convergence=normalize_history(result.history),
            loads=normalize_loads(result.summaries),
        )
    if tab is ViewTab.DETAIL:
        return DetailView(rows=compose_rows(result.hospitals, result.summaries))
    raise ValueError(f"No view for tab {tab!r}")
