"""Per-hospital detail rows: hospitals joined with their solver summaries."""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from planificador.core.result import Coordinates, Hospital, HospitalSummary
from planificador.results.formatting import format_number


@dataclass(frozen=True)
class HospitalRow:
    """One hospital as shown in the detail list.

    Attributes:
        hospital_id: Hospital id (0-based).
        vecindarios_asignados: Neighborhoods assigned; 0 without a summary.
        avg_distance: Mean distance to its neighborhoods, if summarized.
        coordinates: Final coordinates from the summary, if summarized.
    """
    hospital_id: int
    vecindarios_asignados: int = 0
    avg_distance: Optional[float] = None
    coordinates: Optional[Coordinates] = None

    @property
    def title(self) -> str:
        return f"Hospital #{self.hospital_id + 1}"

    @property
    def coordinates_label(self) -> str:
        x = self.coordinates.x if self.coordinates else None
        y = self.coordinates.y if self.coordinates else None
        return f"{format_number(x)} km · {format_number(y)} km"

    @property
    def distance_label(self) -> str:
        return f"{format_number(self.avg_distance)} km"


def compose_rows(
    hospitals: Sequence[Hospital],
    summaries: Sequence[HospitalSummary],
) -> Tuple[HospitalRow, ...]:
    """One row per hospital, in hospital order.

    Summaries are matched by hospital_id; their order and completeness do
    not affect the output.
    """
    by_id = {s.hospital_id: s for s in summaries}
    rows: List[HospitalRow] = []
    for hospital in hospitals:
        summary = by_id.get(hospital.id)
        if summary is None:
            rows.append(HospitalRow(hospital_id=hospital.id))
            continue
        rows.append(HospitalRow(
            hospital_id=hospital.id,
            vecindarios_asignados=summary.vecindarios_asignados,
            avg_distance=summary.avg_distance,
            coordinates=summary.coordinates,
        ))
    return tuple(rows)


def rows_to_frame(rows: Sequence[HospitalRow]) -> pd.DataFrame:
    """Tabular form of the detail rows for st.dataframe and CSV export."""
    return pd.DataFrame({
        "Hospital": [row.title for row in rows],
        "Vecindarios": [row.vecindarios_asignados for row in rows],
        "X (km)": [row.coordinates.x if row.coordinates else None for row in rows],
        "Y (km)": [row.coordinates.y if row.coordinates else None for row in rows],
        "Distancia media (km)": [row.avg_distance for row in rows],
    })
