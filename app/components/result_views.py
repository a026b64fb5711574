"""Streamlit rendering of the result view variants."""

from typing import Sequence

import streamlit as st

from planificador.results.rows import rows_to_frame
from planificador.results.views import (
    AnalyticsView,
    DetailView,
    PlotView,
    QuickMetric,
    ResultView,
)

from app.components.charts import (
    build_convergence_figure,
    build_grid_figure,
    build_load_figure,
)


def render_quick_metrics(items: Sequence[QuickMetric]):
    """Metric cards, two per row."""
    for start in range(0, len(items), 2):
        cols = st.columns(2)
        for col, item in zip(cols, items[start:start + 2]):
            with col:
                st.metric(item.label, item.value)


def render_plot_view(view: PlotView):
    st.plotly_chart(build_grid_figure(view.geometry), use_container_width=True)
    st.info(f"**{view.badge}** {view.summary}")


def render_analytics_view(view: AnalyticsView):
    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Tendencia de convergencia")
        st.caption("Inercia por iteración")
        if not view.convergence.is_empty:
            st.plotly_chart(build_convergence_figure(view.convergence), use_container_width=True)
            st.caption(view.convergence.caption)

    with col2:
        st.subheader("Carga por hospital")
        st.caption("Vecindarios atendidos y equilibrio de clusters")
        if view.loads:
            st.plotly_chart(build_load_figure(view.loads), use_container_width=True)


def render_detail_view(view: DetailView):
    st.subheader("Hospitales sugeridos")
    st.caption("Coordenadas finales y cobertura de cada hospital en kilómetros.")

    cols = st.columns(3)
    for i, row in enumerate(view.rows):
        with cols[i % 3]:
            with st.container(border=True):
                st.markdown(f"**{row.title}** · {row.vecindarios_asignados} vecindarios")
                st.caption(f"Coordenadas: {row.coordinates_label}")
                st.caption(f"Distancia media: {row.distance_label}")

    with st.expander("Tabla"):
        st.dataframe(rows_to_frame(view.rows), hide_index=True, use_container_width=True)


def render_view(view: ResultView):
    """Render whichever view variant the active tab produced."""
    if isinstance(view, PlotView):
        render_plot_view(view)
    elif isinstance(view, AnalyticsView):
        render_analytics_view(view)
    elif isinstance(view, DetailView):
        render_detail_view(view)
    else:
        raise TypeError(f"Unknown view: {view!r}")
