"""Outcome events emitted by the test engine, one JSON object per line."""

import logging
from collections.abc import Sequence
from typing import TextIO

from pydantic import Field, ValidationError

from outcome_normalizer.models.base import Model
from outcome_normalizer.models.identity import FailureDetail, TestIdentity
from outcome_normalizer.models.outcome import OutcomeKind

log = logging.getLogger(__name__)


class InvalidEventError(Exception):
    """Raised when an event line cannot be parsed."""


class OutcomeEvent(Model):
    """A single raw outcome reported by the test engine."""

    test: TestIdentity = Field(..., description="Identity of the test")
    kind: OutcomeKind = Field(..., description="Outcome of the test")
    detail: FailureDetail | None = Field(
        default=None, description="Failure detail, for outcomes that carry one"
    )


def load_events(stream: TextIO) -> Sequence[OutcomeEvent]:
    """Parse outcome events from a JSON lines stream.

    Blank lines are ignored.

    Args:
        stream: Text stream with one JSON encoded event per line

    Returns:
        Events in stream order

    Raises:
        InvalidEventError: If a line is not a valid event

    """
    events: list[OutcomeEvent] = []
    for line_number, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            events.append(OutcomeEvent.model_validate_json(line))
        except ValidationError as exc:
            raise InvalidEventError(
                f"Invalid event on line {line_number}: {exc}"
            ) from exc

    log.debug("Loaded %d event(s)", len(events))
    return events
