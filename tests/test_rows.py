"""Tests for per-hospital detail rows."""

import pandas as pd

from planificador.core.result import Coordinates, Hospital, HospitalSummary
from planificador.results.rows import HospitalRow, compose_rows, rows_to_frame


HOSPITALS = [
    Hospital(id=0, x=10.0, y=10.0),
    Hospital(id=1, x=20.0, y=20.0),
    Hospital(id=2, x=30.0, y=30.0),
]


class TestComposeRows:
    """Test the hospital / summary join."""

    def test_missing_summaries_default_to_zero(self):
        summaries = [HospitalSummary(hospital_id=1, vecindarios_asignados=12)]

        rows = compose_rows(HOSPITALS, summaries)

        assert [(r.hospital_id, r.vecindarios_asignados) for r in rows] == [(0, 0), (1, 12), (2, 0)]

    def test_summary_order_does_not_matter(self):
        summaries = [
            HospitalSummary(hospital_id=2, vecindarios_asignados=5),
            HospitalSummary(hospital_id=0, vecindarios_asignados=7),
            HospitalSummary(hospital_id=1, vecindarios_asignados=3),
        ]

        forward = compose_rows(HOSPITALS, summaries)
        backward = compose_rows(HOSPITALS, list(reversed(summaries)))

        assert forward == backward
        assert [r.vecindarios_asignados for r in forward] == [7, 3, 5]

    def test_one_row_per_hospital(self, sample_result):
        rows = compose_rows(sample_result.hospitals, sample_result.summaries)
        assert len(rows) == len(sample_result.hospitals)

    def test_summary_details_carried(self, sample_result):
        rows = compose_rows(sample_result.hospitals, sample_result.summaries)

        assert rows[1].avg_distance == 3.1
        assert rows[1].coordinates == Coordinates(x=70.0, y=30.0)
        assert rows[2].avg_distance is None
        assert rows[2].coordinates is None

    def test_no_hospitals_no_rows(self):
        assert compose_rows([], [HospitalSummary(hospital_id=0, vecindarios_asignados=1)]) == ()


class TestHospitalRowLabels:
    """Test display text."""

    def test_title_is_one_based(self):
        assert HospitalRow(hospital_id=0).title == "Hospital #1"

    def test_labels_with_summary(self):
        row = HospitalRow(
            hospital_id=3,
            vecindarios_asignados=4,
            avg_distance=2.5,
            coordinates=Coordinates(x=12.345, y=6.0),
        )
        assert row.coordinates_label == "12.35 km · 6.00 km"
        assert row.distance_label == "2.50 km"

    def test_labels_without_summary(self):
        row = HospitalRow(hospital_id=3)
        assert row.coordinates_label == "-- km · -- km"
        assert row.distance_label == "-- km"


class TestRowsToFrame:
    """Test the DataFrame export."""

    def test_columns_and_values(self, sample_result):
        frame = rows_to_frame(compose_rows(sample_result.hospitals, sample_result.summaries))

        assert list(frame.columns) == [
            "Hospital", "Vecindarios", "X (km)", "Y (km)", "Distancia media (km)",
        ]
        assert frame["Hospital"].tolist() == ["Hospital #1", "Hospital #2", "Hospital #3"]
        assert frame["Vecindarios"].tolist() == [2, 2, 0]
        assert pd.isna(frame.loc[2, "Distancia media (km)"])
