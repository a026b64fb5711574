"""Tests for solver-space to drawing-space mapping and cluster colors."""

import pytest

from planificador.core.entities import CLUSTER_PALETTE
from planificador.core.result import Hospital, Neighborhood
from planificador.results.geometry import (
    build_plot_geometry,
    cluster_color,
    from_drawing_space,
    to_drawing_space,
)


class TestDrawingSpace:
    """Test the y-flip mapping."""

    def test_flips_y(self):
        point = Neighborhood(id=0, x=10.0, y=30.0, cluster=0)
        assert to_drawing_space(point, 100) == (10.0, 70.0)

    def test_corners(self):
        assert to_drawing_space(Hospital(id=0, x=0.0, y=0.0), 50) == (0.0, 50.0)
        assert to_drawing_space(Hospital(id=0, x=50.0, y=50.0), 50) == (50.0, 0.0)

    def test_idempotent(self):
        """Same input, same output."""
        point = Hospital(id=3, x=12.25, y=87.5)
        assert to_drawing_space(point, 100) == to_drawing_space(point, 100)

    @pytest.mark.parametrize("y", [0.0, 0.5, 33.25, 99.75, 100.0])
    def test_round_trip_exact(self, y):
        point = Hospital(id=0, x=1.0, y=y)
        draw_x, draw_y = to_drawing_space(point, 100)
        assert from_drawing_space(draw_x, draw_y, 100) == (1.0, y)

    def test_same_mapping_for_hospitals_and_neighborhoods(self):
        """Relative positions are preserved across entity types."""
        hospital = Hospital(id=0, x=40.0, y=60.0)
        neigh = Neighborhood(id=0, x=40.0, y=60.0, cluster=0)
        assert to_drawing_space(hospital, 80) == to_drawing_space(neigh, 80)


class TestClusterColor:
    """Test palette indexing."""

    def test_palette_has_at_least_eight_distinct_colors(self):
        assert len(CLUSTER_PALETTE) >= 8
        assert len(set(CLUSTER_PALETTE)) == len(CLUSTER_PALETTE)

    def test_first_clusters_get_distinct_colors(self):
        colors = [cluster_color(i) for i in range(len(CLUSTER_PALETTE))]
        assert colors == list(CLUSTER_PALETTE)

    def test_wraps_past_palette_end(self):
        """Cluster indices past the palette reuse colors (known collision)."""
        n = len(CLUSTER_PALETTE)
        assert cluster_color(n) == cluster_color(0)
        assert cluster_color(n + 3) == CLUSTER_PALETTE[3]

    def test_custom_palette(self):
        assert cluster_color(5, palette=("#000", "#fff")) == "#fff"


class TestPlotGeometry:
    """Test full-result mapping."""

    def test_markers_follow_payload(self, sample_result):
        geometry = build_plot_geometry(sample_result)

        assert geometry.grid_size == 100
        assert [m.id for m in geometry.neighborhoods] == [0, 1, 2, 3, 4]
        first = geometry.neighborhoods[0]
        assert (first.draw_x, first.draw_y) == (20.0, 20.0)
        assert first.color == CLUSTER_PALETTE[0]

    def test_hospital_labels(self, sample_result):
        geometry = build_plot_geometry(sample_result)
        assert [h.label for h in geometry.hospitals] == ["H0", "H1", "H2"]

    def test_hospital_outline_uses_first_palette_color(self, sample_result):
        geometry = build_plot_geometry(sample_result)
        assert geometry.hospital_outline == CLUSTER_PALETTE[0]
        assert geometry.hospital_fill == "#FFFFFF"
