"""Geometry for the grid plot.

Solver space has its origin at the bottom-left with y growing upward.
The drawing surface is a `grid_size` x `grid_size` square with its origin
at the top-left and y growing downward. Points are expected to already
lie inside the grid; nothing is clipped.
"""

from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple

from planificador.core.entities import CLUSTER_PALETTE, HOSPITAL_FILL, HOSPITAL_OUTLINE
from planificador.core.result import SimulationResult


NEIGHBORHOOD_RADIUS = 1.4
NEIGHBORHOOD_OPACITY = 0.8
HOSPITAL_RADIUS = 4.5


class Point(Protocol):
    x: float
    y: float


def to_drawing_space(point: Point, grid_size: float) -> Tuple[float, float]:
    """Map a solver-space point to drawing space: (x, grid_size - y)."""
    return point.x, grid_size - point.y


def from_drawing_space(draw_x: float, draw_y: float, grid_size: float) -> Tuple[float, float]:
    """Inverse of to_drawing_space."""
    return draw_x, grid_size - draw_y


def cluster_color(cluster: int, palette: Sequence[str] = CLUSTER_PALETTE) -> str:
    """Color for a cluster index.

    Indices wrap modulo the palette length, so with more clusters than
    colors some clusters share a color.
    """
    return palette[cluster % len(palette)]


@dataclass(frozen=True)
class NeighborhoodMarker:
    id: int
    draw_x: float
    draw_y: float
    cluster: int
    color: str


@dataclass(frozen=True)
class HospitalMarker:
    id: int
    draw_x: float
    draw_y: float
    label: str


@dataclass(frozen=True)
class PlotGeometry:
    """Everything needed to draw the grid plot.

    Attributes:
        grid_size: Side of the square drawing surface.
        neighborhoods: One dot per neighborhood, in payload order.
        hospitals: One marker per hospital, in payload order.
        hospital_fill: Fill color for hospital markers.
        hospital_outline: Outline color for hospital markers.
    """
    grid_size: int
    neighborhoods: Tuple[NeighborhoodMarker, ...]
    hospitals: Tuple[HospitalMarker, ...]
    hospital_fill: str = HOSPITAL_FILL
    hospital_outline: str = HOSPITAL_OUTLINE


def build_plot_geometry(
    result: SimulationResult,
    palette: Sequence[str] = CLUSTER_PALETTE,
) -> PlotGeometry:
    """Map every neighborhood and hospital of a result into drawing space."""
    grid_size = result.grid_size

    neighborhoods = []
    for neigh in result.neighborhoods:
        draw_x, draw_y = to_drawing_space(neigh, grid_size)
        neighborhoods.append(NeighborhoodMarker(
            id=neigh.id,
            draw_x=draw_x,
            draw_y=draw_y,
            cluster=neigh.cluster,
            color=cluster_color(neigh.cluster, palette),
        ))

    hospitals = []
    for hospital in result.hospitals:
        draw_x, draw_y = to_drawing_space(hospital, grid_size)
        hospitals.append(HospitalMarker(
            id=hospital.id,
            draw_x=draw_x,
            draw_y=draw_y,
            label=f"H{hospital.id}",
        ))

    return PlotGeometry(
        grid_size=grid_size,
        neighborhoods=tuple(neighborhoods),
        hospitals=tuple(hospitals),
    )
