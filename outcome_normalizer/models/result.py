"""Models for normalized test results."""

from dataclasses import dataclass

from outcome_normalizer.models.identity import FailureDetail
from outcome_normalizer.models.outcome import Color, OutcomeKind


@dataclass(frozen=True, kw_only=True)
class NormalizedResult:
    """Display-ready record of a single test outcome.

    Built once per outcome event by ``normalize`` and handed to a renderer.
    """

    id: str
    case_name: str
    description: str
    kind: OutcomeKind
    icon: str
    color: Color
    detail: FailureDetail | None = None
    warning: str = ""
