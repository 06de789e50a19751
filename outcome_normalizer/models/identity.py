"""Models describing what the test engine reports about a test."""

from typing import Annotated, Literal

from pydantic import Field

from outcome_normalizer.models.base import Model


class DataSet(Model):
    """Parameterization data for one data-provider invocation."""

    label: int | str | None = Field(
        default=None, description="Data set index or name (None when unnamed)"
    )


class TestMethod(Model):
    """An individual, nameable test method invocation."""

    __test__ = False

    level: Literal["method"] = "method"
    id: str = Field(..., description="Stable identifier of the invocation")
    class_name: str = Field(..., description="Declaring test case class")
    method_name: str = Field(..., description="Test method name")
    data_set: DataSet | None = Field(
        default=None, description="Present only when run under a data provider"
    )


class TestSuite(Model):
    """A suite-level event; not something a result can be built from."""

    __test__ = False

    level: Literal["suite"] = "suite"
    id: str = Field(..., description="Stable identifier of the suite")
    name: str = Field(..., description="Suite name")
    test_count: int = Field(default=0, description="Number of tests in the suite")


TestIdentity = Annotated[TestMethod | TestSuite, Field(discriminator="level")]


class FailureDetail(Model):
    """Diagnostic information attached to a non-passing outcome."""

    message: str = Field(..., description="Human-readable, possibly multi-line")
    class_name: str | None = Field(
        default=None, description="Class of the raised error, when known"
    )
    stack_trace: str = Field(default="", description="Formatted stack trace")
