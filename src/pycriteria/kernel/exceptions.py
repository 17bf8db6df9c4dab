"""Exception hierarchy for pycriteria.

All library exceptions inherit from PyCriteriaException so callers can
handle every library error in one place.

Categories:
- ConfigurationException: programmer mistakes detected at use time, such as
  a filter criterion that never declared its filterable columns. These are
  not meant to be caught by normal control flow.

Errors raised by SQLAlchemy or the database (unknown columns, connection
failures, constraint violations) are never wrapped and propagate unchanged.
"""

from __future__ import annotations


class PyCriteriaException(Exception):
    """Base exception for all pycriteria errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CRITERIA_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(PyCriteriaException):
    """A criterion or repository is wired up incorrectly."""


class MissingFilterableColumnsException(ConfigurationException):
    """A filter criterion was applied without declaring its ``columns`` allow-list."""

    def __init__(self, criterion: str) -> None:
        super().__init__(
            f"Implement a columns attribute in the {criterion} class",
            code="CRITERIA_001",
            context={"criterion": criterion},
        )
