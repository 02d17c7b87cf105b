"""Standardized error response schema (problem document)."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.problem_types import ProblemType


class ProblemField(BaseModel):
    """A single field-level violation inside a problem document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Dotted path of the offending field")
    user_message: str = Field(
        ..., alias="userMessage", description="Message safe to show to end users"
    )


class Problem(BaseModel):
    """Error body returned for every failed request (4xx and 5xx)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: datetime = Field(..., description="When the problem was built (UTC)")
    status: int = Field(..., description="HTTP status code")
    type: str | None = Field(
        default=None, description="Stable, machine-readable problem type uri"
    )
    title: str = Field(..., description="Short human-readable summary")
    detail: str | None = Field(
        default=None, description="Explanation specific to this occurrence"
    )
    user_message: str | None = Field(
        default=None, alias="userMessage", description="Message safe to show to end users"
    )
    violations: tuple[ProblemField, ...] | None = Field(
        default=None, alias="fields", description="Per-field violations, in order"
    )

    def to_content(self) -> dict[str, Any]:
        """JSON-ready body with wire names and absent fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ProblemBuilder:
    """Incremental builder for :class:`Problem`.

    The clock is read once, when the builder is created, so every field of a
    document shares the same timestamp.
    """

    def __init__(self, status: int, *, timestamp: datetime | None = None):
        self._values: dict[str, Any] = {
            "timestamp": timestamp or datetime.now(timezone.utc),
            "status": status,
        }

    def problem_type(self, problem_type: ProblemType) -> ProblemBuilder:
        # Copy the values, the document must not follow later registry changes.
        self._values["type"] = problem_type.uri
        self._values["title"] = problem_type.title
        return self

    def title(self, title: str) -> ProblemBuilder:
        self._values["title"] = title
        return self

    def detail(self, detail: str | None) -> ProblemBuilder:
        self._values["detail"] = detail
        return self

    def user_message(self, user_message: str | None) -> ProblemBuilder:
        self._values["user_message"] = user_message
        return self

    def fields(self, fields: list[ProblemField] | tuple[ProblemField, ...] | None) -> ProblemBuilder:
        self._values["violations"] = tuple(fields) if fields else None
        return self

    def build(self) -> Problem:
        return Problem(**self._values)
