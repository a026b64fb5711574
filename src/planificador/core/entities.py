"""Core entity definitions for the planner.

This module contains enums and constants that are used across
the codebase, placed here to avoid circular imports.
"""

from enum import Enum


class ViewTab(Enum):
    """Result views the operator can switch between.

    Member order is display order; the first member is the default view
    restored whenever a new simulation result arrives.
    """
    PLOT = "plot"            # Grid scatter of neighborhoods and hospitals
    ANALYTICS = "analytics"  # Convergence line + load bars
    DETAIL = "detail"        # Per-hospital rows

    @property
    def label(self) -> str:
        """Operator-facing tab label."""
        return VIEW_TAB_LABELS[self]


VIEW_TAB_LABELS = {
    ViewTab.PLOT: "Mapa",
    ViewTab.ANALYTICS: "Analítica",
    ViewTab.DETAIL: "Hospitales",
}

DEFAULT_TAB = ViewTab.PLOT


class RequestStatus(Enum):
    """Lifecycle of the most recent submission."""
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# Cluster colors. Indices past the end wrap around, so once K exceeds
# the palette length two clusters share a color.
CLUSTER_PALETTE = (
    "#3D8B7D",
    "#8FBC91",
    "#DBC557",
    "#ECBDBF",
    "#F9DFE0",
    "#579487",
    "#C28D5F",
    "#9E6D9A",
)

HOSPITAL_FILL = "#FFFFFF"
HOSPITAL_OUTLINE = CLUSTER_PALETTE[0]
