"""Pytest fixtures for Planificador tests."""

import copy
from unittest.mock import Mock

import pytest

from planificador.core.result import SimulationResult
from planificador.core.scenario import ScenarioRequest


SAMPLE_PAYLOAD = {
    "grid_size": 100,
    "hospitals": [
        {"id": 0, "x": 25.0, "y": 75.0},
        {"id": 1, "x": 70.0, "y": 30.0},
        {"id": 2, "x": 50.0, "y": 50.0},
    ],
    "neighborhoods": [
        {"id": 0, "x": 20.0, "y": 80.0, "cluster": 0},
        {"id": 1, "x": 30.0, "y": 70.0, "cluster": 0},
        {"id": 2, "x": 72.5, "y": 28.0, "cluster": 1},
        {"id": 3, "x": 68.0, "y": 33.0, "cluster": 1},
        {"id": 4, "x": 49.0, "y": 52.0, "cluster": 2},
    ],
    "metrics": {
        "avg_distance": 3.456,
        "max_distance": 7.891,
        "inertia": 1234.5,
        "iterations": 3,
        "history": [2000.0, 1500.0, 1234.5],
    },
    "resumen_hospitales": [
        {
            "hospital_id": 1,
            "vecindarios_asignados": 2,
            "avg_distance": 3.1,
            "coordinates": {"x": 70.0, "y": 30.0},
        },
        {
            "hospital_id": 0,
            "vecindarios_asignados": 2,
            "avg_distance": 7.07,
            "coordinates": {"x": 25.0, "y": 75.0},
        },
    ],
    "mensaje": "Simulación completada",
}


@pytest.fixture
def sample_payload() -> dict:
    """Solver payload for a three-hospital scenario (hospital 2 has no summary)."""
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def sample_result(sample_payload) -> SimulationResult:
    return SimulationResult.from_dict(sample_payload)


@pytest.fixture
def scenario_request() -> ScenarioRequest:
    """The default scenario: 100 km grid, 600 neighborhoods, K=5, seed 42."""
    return ScenarioRequest(m=100, num_neighborhoods=600, k=5, random_seed=42)


def make_response(status_code: int = 200, json_body=None, text: str = "") -> Mock:
    """Stand-in for a requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    if isinstance(json_body, Exception):
        response.json.side_effect = json_body
    else:
        response.json.return_value = json_body
    return response


@pytest.fixture
def fake_session():
    """Mock requests.Session whose post() answers with the sample payload."""
    session = Mock()
    session.post.return_value = make_response(200, copy.deepcopy(SAMPLE_PAYLOAD))
    return session


@pytest.fixture
def response_factory():
    """Factory for fake requests.Response objects."""
    return make_response
