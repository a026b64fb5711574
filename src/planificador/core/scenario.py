"""Scenario drafts, validation and the request sent to the solver."""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from planificador.core.errors import ScenarioValidationError


M_MESSAGE = "m debe ser mayor a 0."
NEIGHBORHOODS_MESSAGE = "El número de vecindarios debe ser mayor a 0."
K_MESSAGE = "K debe ser mayor a 0."
K_EXCEEDS_MESSAGE = "K no puede superar al número de vecindarios."

FormValue = Union[str, int, float, None]


@dataclass(frozen=True)
class ScenarioDraft:
    """Form values as typed by the operator, before validation.

    Numeric fields may hold NaN when the operator typed something that
    is not a number; validation rejects those.
    """
    m: float
    num_neighborhoods: float
    k: float
    random_seed: Optional[float] = None


DEFAULT_DRAFT = ScenarioDraft(m=100, num_neighborhoods=600, k=5, random_seed=42)


@dataclass(frozen=True)
class ScenarioRequest:
    """Validated scenario, ready to be posted to the solver."""
    m: int
    num_neighborhoods: int
    k: int
    random_seed: Optional[int] = None

    def to_payload(self) -> Dict[str, int]:
        """JSON body for POST /simular.

        random_seed is left out entirely when unset, never sent as null.
        """
        payload = {
            "m": self.m,
            "num_neighborhoods": self.num_neighborhoods,
            "k": self.k,
        }
        if self.random_seed is not None:
            payload["random_seed"] = self.random_seed
        return payload


def parse_number(value: FormValue, blank: Optional[float] = 0.0) -> Optional[float]:
    """Parse one form field.

    Args:
        value: Raw text or number from the form widget.
        blank: Result for an empty field.

    Returns:
        The number, `blank` for empty input, or NaN for unparsable text.
    """
    if value is None:
        return blank
    if isinstance(value, (int, float)):
        return float(value)
    text = value.strip()
    if text == "":
        return blank
    try:
        return float(text)
    except ValueError:
        return math.nan


def draft_from_form(
    m: FormValue,
    num_neighborhoods: FormValue,
    k: FormValue,
    random_seed: FormValue = None,
) -> ScenarioDraft:
    """Build a draft from raw form fields.

    Empty required fields become 0 so they fail validation. An empty or
    unparsable seed means "no seed".
    """
    seed = parse_number(random_seed, blank=None)
    if seed is not None and not math.isfinite(seed):
        seed = None
    return ScenarioDraft(
        m=parse_number(m),
        num_neighborhoods=parse_number(num_neighborhoods),
        k=parse_number(k),
        random_seed=seed,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)


def _is_positive_count(value: Any) -> bool:
    return _is_number(value) and value > 0 and float(value).is_integer()


def validate(draft: ScenarioDraft) -> List[str]:
    """Check a draft against every rule.

    All violations are reported together. An empty list means the draft
    can be submitted. m, num_neighborhoods and k must be whole numbers
    greater than 0; fractional values fail the positivity rule for their
    field.
    """
    errors: List[str] = []
    if not _is_positive_count(draft.m):
        errors.append(M_MESSAGE)
    if not _is_positive_count(draft.num_neighborhoods):
        errors.append(NEIGHBORHOODS_MESSAGE)
    if not _is_positive_count(draft.k):
        errors.append(K_MESSAGE)
    if (
        _is_number(draft.num_neighborhoods)
        and _is_number(draft.k)
        and draft.k > draft.num_neighborhoods
    ):
        errors.append(K_EXCEEDS_MESSAGE)
    return errors


def build_request(draft: ScenarioDraft) -> ScenarioRequest:
    """Validate a draft and convert it to a request.

    Raises:
        ScenarioValidationError: If any rule is violated.
    """
    errors = validate(draft)
    if errors:
        raise ScenarioValidationError(errors)
    return ScenarioRequest(
        m=int(draft.m),
        num_neighborhoods=int(draft.num_neighborhoods),
        k=int(draft.k),
        random_seed=int(draft.random_seed) if draft.random_seed is not None else None,
    )
