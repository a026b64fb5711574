"""Presentation layer: drawing-space geometry, series normalization, detail rows."""

from planificador.results.formatting import format_number
from planificador.results.geometry import (
    to_drawing_space,
    from_drawing_space,
    cluster_color,
    build_plot_geometry,
    PlotGeometry,
)
from planificador.results.series import (
    ConvergenceSeries,
    LoadBar,
    normalize_history,
    normalize_loads,
    load_fractions,
)
from planificador.results.rows import HospitalRow, compose_rows, rows_to_frame
from planificador.results.views import (
    PlotView,
    AnalyticsView,
    DetailView,
    build_view,
    quick_metrics,
)

__all__ = [
    "format_number",
    "to_drawing_space",
    "from_drawing_space",
    "cluster_color",
    "build_plot_geometry",
    "PlotGeometry",
    "ConvergenceSeries",
    "LoadBar",
    "normalize_history",
    "normalize_loads",
    "load_fractions",
    "HospitalRow",
    "compose_rows",
    "rows_to_frame",
    "PlotView",
    "AnalyticsView",
    "DetailView",
    "build_view",
    "quick_metrics",
]
