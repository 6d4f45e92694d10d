# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the rubocheck package."""

from __future__ import annotations

from pathlib import Path
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rubocheck.core.severity import AnnotationLevel, Conclusion, OffenseSeverity, annotation_level_for

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = "JsonScalar | list[JsonValue] | dict[str, JsonValue]"


class RunContext(BaseModel):
    """Immutable values describing the commit and repository being checked."""

    model_config = ConfigDict(frozen=True)

    commit_sha: str
    workspace: Path
    owner: str
    repo: str
    token: str = Field(repr=False)


class Offense(BaseModel):
    """Single violation reported by the linter."""

    model_config = ConfigDict(frozen=True)

    path: str
    severity: OffenseSeverity
    message: str
    line: int = Field(ge=1)


class Annotation(BaseModel):
    """Inline remark attached to one source line of a check run."""

    model_config = ConfigDict(frozen=True)

    path: str
    start_line: int
    end_line: int
    annotation_level: AnnotationLevel
    message: str

    @classmethod
    def from_offense(cls, offense: Offense) -> Annotation:
        """Build the annotation rendered for ``offense``.

        Args:
            offense: Linter offense being reported.

        Returns:
            Annotation: Single-line annotation carrying the mapped level.
        """

        return cls(
            path=offense.path,
            start_line=offense.line,
            end_line=offense.line,
            annotation_level=annotation_level_for(offense.severity),
            message=offense.message,
        )


class FileOffenses(BaseModel):
    """Offenses reported for one file, in the order the linter emitted them."""

    model_config = ConfigDict(frozen=True)

    path: str
    offenses: tuple[Offense, ...] = Field(default_factory=tuple)


class CheckReport(BaseModel):
    """Aggregate result published when completing a check run."""

    model_config = ConfigDict(frozen=True)

    title: str
    summary: str
    annotations: tuple[Annotation, ...] = Field(default_factory=tuple)
    conclusion: Conclusion = Conclusion.SUCCESS

    @model_validator(mode="after")
    def _check_conclusion(self) -> CheckReport:
        """Reject reports whose conclusion disagrees with their annotations.

        Returns:
            CheckReport: The validated report.

        Raises:
            ValueError: If the conclusion does not reflect the failure annotations.
        """

        has_failure = any(item.annotation_level is AnnotationLevel.FAILURE for item in self.annotations)
        expected = Conclusion.FAILURE if has_failure else Conclusion.SUCCESS
        if self.conclusion is not expected:
            raise ValueError(f"conclusion {self.conclusion.value!r} does not match annotations")
        return self

    def to_output(self) -> dict[str, JsonValue]:
        """Return the ``output`` object sent to the check-run API.

        Returns:
            dict[str, JsonValue]: JSON-compatible output payload.
        """

        return {
            "title": self.title,
            "summary": self.summary,
            "annotations": [item.model_dump(mode="json") for item in self.annotations],
        }


__all__ = [
    "Annotation",
    "CheckReport",
    "FileOffenses",
    "JsonScalar",
    "JsonValue",
    "Offense",
    "RunContext",
]
