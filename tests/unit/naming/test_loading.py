"""Tests for printable-name provider resolution."""

import logging
from unittest.mock import Mock, patch

import pytest

from outcome_normalizer.models.identity import TestMethod
from outcome_normalizer.naming.base import PrintableNameProvider
from outcome_normalizer.naming.loading import (
    ENTRY_POINT_GROUP,
    NameProviderRegistry,
    load_name_provider_registry,
)
from outcome_normalizer.testing.factories import TestMethodFactory, TestSuiteFactory


class DescribedCase(PrintableNameProvider):
    """Provider naming a test case after its described behaviour."""

    def __init__(self, identity: TestMethod) -> None:
        self.identity = identity

    def case_name(self) -> str:
        return "Login"

    def case_method_name(self) -> str:
        return f"it handles {self.identity.method_name}"


def entry_point(name: str, target: object) -> Mock:
    """Create an entry point stub loading to the given target."""
    entry = Mock()
    entry.name = name
    entry.load.return_value = target
    return entry


def test_resolve_builds_provider_for_registered_class() -> None:
    """Builds the provider from the factory registered for the class."""
    registry = NameProviderRegistry(factories={"LoginTest": DescribedCase})
    identity = TestMethodFactory.build(class_name="LoginTest", method_name="logout")

    provider = registry.resolve(identity)

    assert isinstance(provider, DescribedCase)
    assert provider.case_method_name() == "it handles logout"


def test_resolve_returns_none_for_unregistered_class() -> None:
    """Returns None when no factory serves the class."""
    registry = NameProviderRegistry(factories={"LoginTest": DescribedCase})

    assert registry.resolve(TestMethodFactory.build(class_name="OtherTest")) is None


def test_resolve_returns_none_for_suite() -> None:
    """Never resolves a provider for suite-level identities."""
    registry = NameProviderRegistry(factories={"Feature": DescribedCase})

    assert registry.resolve(TestSuiteFactory.build(name="Feature")) is None


def test_empty_registry_resolves_nothing() -> None:
    """Resolves nothing when no factories are registered."""
    assert NameProviderRegistry().resolve(TestMethodFactory.build()) is None


def test_load_registry_from_entry_points() -> None:
    """Loads one factory per entry point, keyed by entry point name."""
    entries = [entry_point("LoginTest", DescribedCase)]

    with patch(
        "outcome_normalizer.naming.loading.entry_points", return_value=entries
    ) as entry_points_mock:
        registry = load_name_provider_registry()

    entry_points_mock.assert_called_once_with(group=ENTRY_POINT_GROUP)
    assert registry.factories == {"LoginTest": DescribedCase}


def test_load_registry_keeps_first_duplicate(caplog: pytest.LogCaptureFixture) -> None:
    """Keeps the first factory and warns when a class is registered twice."""
    other_factory = Mock()
    entries = [
        entry_point("LoginTest", DescribedCase),
        entry_point("LoginTest", other_factory),
    ]

    with (
        caplog.at_level(logging.WARNING),
        patch("outcome_normalizer.naming.loading.entry_points", return_value=entries),
    ):
        registry = load_name_provider_registry()

    assert registry.factories["LoginTest"] is DescribedCase
    entries[1].load.assert_not_called()
    assert "Duplicate name provider for LoginTest" in caplog.text
