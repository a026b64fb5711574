"""Simulation result returned by the solver.

All entities are immutable. `SimulationResult.from_dict` parses the JSON
payload of a successful POST /simular and `to_dict` gives it back with the
same field names, so views can be compared against the raw payload.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Coordinates:
    """Point in solver space (origin bottom-left, y upward)."""
    x: float
    y: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coordinates":
        return cls(x=float(data["x"]), y=float(data["y"]))

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Neighborhood:
    """Synthetic neighborhood and the cluster (hospital id) it was assigned to."""
    id: int
    x: float
    y: float
    cluster: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Neighborhood":
        return cls(
            id=int(data["id"]),
            x=float(data["x"]),
            y=float(data["y"]),
            cluster=int(data["cluster"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "x": self.x, "y": self.y, "cluster": self.cluster}


@dataclass(frozen=True)
class Hospital:
    """Cluster center. Ids are dense, 0..k-1."""
    id: int
    x: float
    y: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Hospital":
        return cls(id=int(data["id"]), x=float(data["x"]), y=float(data["y"]))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class Metrics:
    """Solver quality metrics.

    Attributes:
        avg_distance: Mean neighborhood-to-hospital distance (km).
        max_distance: Worst neighborhood-to-hospital distance (km).
        inertia: Sum of squared distances (km²).
        iterations: K-means iterations until convergence.
        history: Inertia after each iteration, if the solver sent it.
    """
    avg_distance: float
    max_distance: float
    inertia: float
    iterations: int
    history: Optional[Tuple[float, ...]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Metrics":
        history = data.get("history")
        return cls(
            avg_distance=float(data["avg_distance"]),
            max_distance=float(data["max_distance"]),
            inertia=float(data["inertia"]),
            iterations=int(data["iterations"]),
            history=tuple(float(h) for h in history) if history is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "avg_distance": self.avg_distance,
            "max_distance": self.max_distance,
            "inertia": self.inertia,
            "iterations": self.iterations,
        }
        if self.history is not None:
            data["history"] = list(self.history)
        return data


@dataclass(frozen=True)
class HospitalSummary:
    """Per-hospital load as reported by the solver."""
    hospital_id: int
    vecindarios_asignados: int
    avg_distance: Optional[float] = None
    coordinates: Optional[Coordinates] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HospitalSummary":
        avg_distance = data.get("avg_distance")
        coordinates = data.get("coordinates")
        return cls(
            hospital_id=int(data["hospital_id"]),
            vecindarios_asignados=int(data["vecindarios_asignados"]),
            avg_distance=float(avg_distance) if avg_distance is not None else None,
            coordinates=Coordinates.from_dict(coordinates) if coordinates is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "hospital_id": self.hospital_id,
            "vecindarios_asignados": self.vecindarios_asignados,
        }
        if self.avg_distance is not None:
            data["avg_distance"] = self.avg_distance
        if self.coordinates is not None:
            data["coordinates"] = self.coordinates.to_dict()
        return data


@dataclass(frozen=True)
class SimulationResult:
    """Complete solver answer for one scenario.

    `summaries` may be shorter than `hospitals`; a hospital without a
    summary has no neighborhoods assigned.
    """
    grid_size: int
    hospitals: Tuple[Hospital, ...]
    neighborhoods: Tuple[Neighborhood, ...]
    metrics: Metrics
    summaries: Tuple[HospitalSummary, ...] = field(default_factory=tuple)
    mensaje: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationResult":
        """Parse a solver payload.

        Raises:
            KeyError: A required field is missing.
            TypeError, ValueError: A field has the wrong shape.
        """
        summaries = data.get("resumen_hospitales") or []
        return cls(
            grid_size=int(data["grid_size"]),
            hospitals=tuple(Hospital.from_dict(h) for h in data["hospitals"]),
            neighborhoods=tuple(Neighborhood.from_dict(n) for n in data["neighborhoods"]),
            metrics=Metrics.from_dict(data["metrics"]),
            summaries=tuple(HospitalSummary.from_dict(s) for s in summaries),
            mensaje=data.get("mensaje"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "grid_size": self.grid_size,
            "hospitals": [h.to_dict() for h in self.hospitals],
            "neighborhoods": [n.to_dict() for n in self.neighborhoods],
            "metrics": self.metrics.to_dict(),
            "resumen_hospitales": [s.to_dict() for s in self.summaries],
        }
        if self.mensaje is not None:
            data["mensaje"] = self.mensaje
        return data

    @property
    def history(self) -> List[float]:
        """Inertia history, empty when the solver did not send one."""
        return list(self.metrics.history or ())

    def summary_for(self, hospital_id: int) -> Optional[HospitalSummary]:
        """Summary for one hospital, or None if the solver left it out."""
        for summary in self.summaries:
            if summary.hospital_id == hospital_id:
                return summary
        return None
