"""Printable-name capability and its resolution."""

from outcome_normalizer.naming.base import PrintableNameProvider
from outcome_normalizer.naming.loading import (
    NameProviderRegistry,
    PrintableNameFactory,
    load_name_provider_registry,
)

__all__ = [
    "NameProviderRegistry",
    "PrintableNameFactory",
    "PrintableNameProvider",
    "load_name_provider_registry",
]
