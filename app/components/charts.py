"""Plotly figures for the result views.

Each builder takes an already-normalized view object from
planificador.results and only decides how it looks.
"""

from typing import Sequence

import plotly.graph_objects as go

from planificador.results.geometry import (
    HOSPITAL_RADIUS,
    NEIGHBORHOOD_OPACITY,
    NEIGHBORHOOD_RADIUS,
    PlotGeometry,
)
from planificador.results.series import CHART_SIZE, ConvergenceSeries, LoadBar


LINE_COLOR = "#3D8B7D"
BAR_COLOR = "#8FBC91"
GRID_BORDER = "#ECBDBF"

# Marker sizes are in pixels; radii are in drawing units.
_PX_PER_UNIT = 3


def build_grid_figure(geometry: PlotGeometry) -> go.Figure:
    """Scatter of neighborhoods (cluster colored) and hospitals on the grid.

    Coordinates are already in drawing space (y down), so the y axis is
    reversed to keep the top-left origin.
    """
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=[n.draw_x for n in geometry.neighborhoods],
        y=[n.draw_y for n in geometry.neighborhoods],
        mode='markers',
        name='Vecindarios',
        marker=dict(
            size=NEIGHBORHOOD_RADIUS * 2 * _PX_PER_UNIT,
            color=[n.color for n in geometry.neighborhoods],
            opacity=NEIGHBORHOOD_OPACITY,
        ),
        hoverinfo='text',
        hovertext=[f"Vecindario {n.id} · H{n.cluster}" for n in geometry.neighborhoods],
    ))

    fig.add_trace(go.Scatter(
        x=[h.draw_x for h in geometry.hospitals],
        y=[h.draw_y for h in geometry.hospitals],
        mode='markers+text',
        name='Hospitales',
        marker=dict(
            size=HOSPITAL_RADIUS * 2 * _PX_PER_UNIT,
            color=geometry.hospital_fill,
            line=dict(width=1.5, color=geometry.hospital_outline),
        ),
        text=[h.label for h in geometry.hospitals],
        textposition='bottom center',
        textfont=dict(size=11, color=geometry.hospital_outline),
        hoverinfo='text',
        hovertext=[h.label for h in geometry.hospitals],
    ))

    fig.update_layout(
        xaxis=dict(range=[0, geometry.grid_size], showgrid=False, zeroline=False, constrain='domain'),
        yaxis=dict(
            range=[geometry.grid_size, 0],
            showgrid=False,
            zeroline=False,
            scaleanchor='x',
            scaleratio=1,
        ),
        shapes=[dict(
            type='rect', x0=0, y0=0, x1=geometry.grid_size, y1=geometry.grid_size,
            line=dict(color=GRID_BORDER, width=1),
        )],
        plot_bgcolor='white',
        showlegend=False,
        margin=dict(l=10, r=10, t=10, b=10),
        height=560,
    )
    return fig


def build_convergence_figure(series: ConvergenceSeries) -> go.Figure:
    """Inertia history in the 100 x 100 chart space (larger inertia higher)."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[x for x, _ in series.points],
        y=[y for _, y in series.points],
        mode='lines',
        name='Inercia',
        line=dict(color=LINE_COLOR, width=3, shape='linear'),
        hoverinfo='skip',
    ))
    fig.update_layout(
        xaxis=dict(range=[0, CHART_SIZE], showticklabels=False, showgrid=False),
        yaxis=dict(range=[CHART_SIZE, 0], showticklabels=False, showgrid=False),
        plot_bgcolor='white',
        showlegend=False,
        margin=dict(l=10, r=10, t=10, b=10),
        height=260,
    )
    return fig


def build_load_figure(bars: Sequence[LoadBar]) -> go.Figure:
    """Horizontal bars, one per hospital, as a percentage of the busiest one."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=[bar.width_percent for bar in bars],
        y=[bar.label for bar in bars],
        orientation='h',
        marker=dict(color=BAR_COLOR),
        text=[bar.count_label for bar in bars],
        textposition='auto',
        hoverinfo='text',
        hovertext=[f"{bar.label}: {bar.count_label}" for bar in bars],
    ))
    fig.update_layout(
        xaxis=dict(range=[0, 100], ticksuffix='%'),
        yaxis=dict(autorange='reversed'),
        plot_bgcolor='white',
        showlegend=False,
        margin=dict(l=10, r=10, t=10, b=10),
        height=max(160, 40 * len(bars)),
    )
    return fig
