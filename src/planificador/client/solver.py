"""HTTP client for the K-means solver service.

The solver exposes a single endpoint:

    POST {base_url}/simular
    Content-Type: application/json
    {"m": 100, "num_neighborhoods": 600, "k": 5, "random_seed": 42}

A 2xx answer carries the SimulationResult payload. Any other status is
an error whose body text, when present, is the message to show.

Example usage:
    from planificador.client.solver import SolverClient
    from planificador.core.scenario import ScenarioRequest

    client = SolverClient("http://localhost:8000", timeout=30)
    result = client.simulate(ScenarioRequest(m=100, num_neighborhoods=600, k=5))
    print(result.metrics.inertia)
"""

import logging
from typing import Optional

import requests

from planificador.config import Settings, DEFAULT_REQUEST_TIMEOUT
from planificador.core.errors import (
    REQUEST_FALLBACK_MESSAGE,
    TRANSPORT_FALLBACK_MESSAGE,
    SolverRequestError,
    SolverTransportError,
)
from planificador.core.result import SimulationResult
from planificador.core.scenario import ScenarioRequest

logger = logging.getLogger(__name__)

SIMULATE_PATH = "/simular"


class SolverClient:
    """Thin wrapper around a requests.Session for POST /simular.

    Attributes:
        base_url: Solver base URL without trailing slash.
        timeout: Seconds to wait for the solver before giving up.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings, session: Optional[requests.Session] = None) -> "SolverClient":
        return cls(settings.api_base_url, timeout=settings.request_timeout, session=session)

    @property
    def simulate_url(self) -> str:
        return f"{self.base_url}{SIMULATE_PATH}"

    def simulate(self, request: ScenarioRequest) -> SimulationResult:
        """Post one scenario and parse the answer.

        Exactly one HTTP call is made per invocation.

        Args:
            request: Validated scenario.

        Returns:
            The parsed SimulationResult.

        Raises:
            SolverRequestError: Non-2xx status.
            SolverTransportError: Connection failure, timeout, or a body
                that is not a valid result payload.
        """
        payload = request.to_payload()
        try:
            response = self._session.post(
                self.simulate_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning(f"Solver unreachable at {self.simulate_url}: {exc}")
            raise SolverTransportError(TRANSPORT_FALLBACK_MESSAGE) from exc

        if not response.ok:
            detail = response.text
            logger.warning(f"Solver returned HTTP {response.status_code}: {detail[:200]!r}")
            raise SolverRequestError(detail or REQUEST_FALLBACK_MESSAGE, status_code=response.status_code)

        try:
            return SimulationResult.from_dict(response.json())
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.warning(f"Unreadable solver payload: {exc!r}")
            raise SolverTransportError(TRANSPORT_FALLBACK_MESSAGE) from exc
