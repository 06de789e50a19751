"""Outcome kinds reported by the test engine."""

from enum import StrEnum
from typing import Literal, TypeAlias

Color: TypeAlias = Literal["red", "yellow", "green"]


class OutcomeKind(StrEnum):
    """Closed set of test outcome categories.

    Values match the wire constants emitted by the upstream reporter, which is
    why ``INCOMPLETE`` and ``WARNING`` read ``incompleted`` and ``warnings``.
    """

    FAILED = "failed"
    SKIPPED = "skipped"
    INCOMPLETE = "incompleted"
    RISKY = "risky"
    DEPRECATED = "deprecated"
    WARNING = "warnings"
    RUNNING = "pending"
    PASSED = "passed"


WARNING_KINDS = frozenset(
    {
        OutcomeKind.WARNING,
        OutcomeKind.RISKY,
        OutcomeKind.SKIPPED,
        OutcomeKind.DEPRECATED,
        OutcomeKind.INCOMPLETE,
    }
)
