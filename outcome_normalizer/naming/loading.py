"""Resolution of printable-name providers from entry points."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from importlib.metadata import entry_points
from typing import TypeAlias

from outcome_normalizer.models.identity import TestIdentity, TestMethod
from outcome_normalizer.naming.base import PrintableNameProvider

ENTRY_POINT_GROUP = "outcome_normalizer.name_providers"

log = logging.getLogger(__name__)

PrintableNameFactory: TypeAlias = Callable[[TestMethod], PrintableNameProvider]


@dataclass(frozen=True, kw_only=True)
class NameProviderRegistry:
    """Printable-name factories keyed by the test case class they serve."""

    factories: Mapping[str, PrintableNameFactory] = field(default_factory=dict)

    def resolve(self, identity: TestIdentity) -> PrintableNameProvider | None:
        """Build the provider for an identity, if its class registered one.

        Suite-level identities never resolve; the normalizer rejects them.
        """
        if not isinstance(identity, TestMethod):
            return None

        if (factory := self.factories.get(identity.class_name)) is None:
            return None

        return factory(identity)


def load_name_provider_registry() -> NameProviderRegistry:
    """Build a registry from the installed name provider entry points.

    Each entry point is named after the fully qualified test case class it
    serves and loads to a ``PrintableNameFactory``.

    Returns:
        Registry containing every installed factory

    """
    factories: dict[str, PrintableNameFactory] = {}

    for entry in entry_points(group=ENTRY_POINT_GROUP):
        if entry.name in factories:
            log.warning(
                "Duplicate name provider for %s, keeping the first one", entry.name
            )
            continue
        factories[entry.name] = entry.load()

    log.debug("Loaded %d name provider(s)", len(factories))
    return NameProviderRegistry(factories=factories)
