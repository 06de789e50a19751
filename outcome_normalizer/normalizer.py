"""Normalization of raw test outcomes into display-ready results."""

import re

from outcome_normalizer.models.identity import FailureDetail, TestIdentity, TestMethod
from outcome_normalizer.models.outcome import WARNING_KINDS, Color, OutcomeKind
from outcome_normalizer.models.result import NormalizedResult
from outcome_normalizer.naming.base import PrintableNameProvider

UPPERCASE_PATTERN = re.compile(r"([A-Z])")
LINE_BREAK_PATTERN = re.compile(r"\r|\n")


class UnsupportedIdentityKindError(Exception):
    """Raised when an outcome does not belong to an individual test method."""


def normalize(
    identity: TestIdentity,
    kind: OutcomeKind,
    detail: FailureDetail | None = None,
    *,
    name_provider: PrintableNameProvider | None = None,
) -> NormalizedResult:
    """Build the display record for one test outcome.

    Args:
        identity: Identity of the test as reported by the engine
        kind: Outcome of the test
        detail: Failure detail, for outcomes that carry one
        name_provider: Custom display names for the identity's test case,
            resolved by the caller

    Returns:
        The normalized result

    Raises:
        UnsupportedIdentityKindError: If the identity is not a test method

    """
    if not isinstance(identity, TestMethod):
        raise UnsupportedIdentityKindError(
            f"Cannot normalize {type(identity).__name__} '{identity.id}': "
            "not an individual test method"
        )

    return NormalizedResult(
        id=identity.id,
        case_name=make_case_name(identity, name_provider),
        description=make_description(identity, name_provider),
        kind=kind,
        icon=make_icon(kind),
        color=make_color(kind),
        detail=detail,
        warning=make_warning(kind, detail),
    )


def make_case_name(
    identity: TestMethod, name_provider: PrintableNameProvider | None = None
) -> str:
    """Get the display name of the test case."""
    if name_provider is not None:
        return name_provider.case_name()

    return identity.class_name


def make_description(
    identity: TestMethod, name_provider: PrintableNameProvider | None = None
) -> str:
    """Get the test description, with the data set appended when named."""
    if name_provider is not None:
        return name_provider.case_method_name()

    description = humanize(identity.method_name)

    if identity.data_set is None:
        return description

    match identity.data_set.label:
        case int(index):
            return f"{description} with data set #{index}"
        case str(name) if name:
            return f'{description} with data set "{name}"'
        case _:
            return description


def humanize(name: str) -> str:
    """Turn a test method name into lower-case words.

    ``testUserCanLogin`` and ``test_user_can_login`` both become
    ``user can login``.
    """
    name = name.replace("_", " ")
    name = UPPERCASE_PATTERN.sub(r" \1", name)
    name = name.removeprefix("test")
    return name.strip().lower()


def make_icon(kind: OutcomeKind) -> str:
    """Get the icon glyph for an outcome kind."""
    match kind:
        case OutcomeKind.DEPRECATED:
            return "d"
        case OutcomeKind.FAILED:
            return "⨯"
        case OutcomeKind.SKIPPED:
            return "-"
        case OutcomeKind.WARNING | OutcomeKind.RISKY:
            return "!"
        case OutcomeKind.INCOMPLETE:
            return "…"
        case OutcomeKind.RUNNING:
            return "•"
        case _:
            # Also reached by kinds added upstream after this table was written.
            return "✓"


def make_color(kind: OutcomeKind) -> Color:
    """Get the display color for an outcome kind."""
    match kind:
        case OutcomeKind.FAILED:
            return "red"
        case (
            OutcomeKind.DEPRECATED
            | OutcomeKind.SKIPPED
            | OutcomeKind.INCOMPLETE
            | OutcomeKind.RISKY
            | OutcomeKind.WARNING
            | OutcomeKind.RUNNING
        ):
            return "yellow"
        case _:
            return "green"


def make_warning(kind: OutcomeKind, detail: FailureDetail | None) -> str:
    """Get the single-line warning text for warning-like outcomes."""
    if detail is None or kind not in WARNING_KINDS:
        return ""

    return LINE_BREAK_PATTERN.sub(" ", detail.message).strip()
