"""Capability for test cases that provide their own display names."""

from abc import ABC, abstractmethod


class PrintableNameProvider(ABC):
    """Custom display names for a test case and one of its methods.

    When a provider is handed to ``normalize`` its names are used verbatim and
    the default humanization of the method name is skipped entirely.
    """

    @abstractmethod
    def case_name(self) -> str:
        """Return the display name of the test case."""

    @abstractmethod
    def case_method_name(self) -> str:
        """Return the display description of the test method."""
