# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class OffenseSeverity(str, Enum):
    """Severity vocabulary emitted by RuboCop's JSON formatter."""

    REFACTOR = "refactor"
    CONVENTION = "convention"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


class AnnotationLevel(str, Enum):
    """Annotation levels accepted by the check-run API."""

    FAILURE = "failure"
    WARNING = "warning"


class Conclusion(str, Enum):
    """Final verdicts reported for a completed check run."""

    SUCCESS = "success"
    FAILURE = "failure"


_SEVERITY_TO_LEVEL: Final[dict[OffenseSeverity, AnnotationLevel]] = {
    OffenseSeverity.REFACTOR: AnnotationLevel.FAILURE,
    OffenseSeverity.CONVENTION: AnnotationLevel.FAILURE,
    OffenseSeverity.WARNING: AnnotationLevel.WARNING,
    OffenseSeverity.ERROR: AnnotationLevel.FAILURE,
    OffenseSeverity.FATAL: AnnotationLevel.FAILURE,
}


def annotation_level_for(severity: OffenseSeverity) -> AnnotationLevel:
    """Map an offense severity to its check-run annotation level.

    Args:
        severity: Severity reported by the linter.

    Returns:
        AnnotationLevel: Level used when annotating the offending line.

    Raises:
        ValueError: If ``severity`` is not part of the RuboCop vocabulary.
    """

    try:
        return _SEVERITY_TO_LEVEL[OffenseSeverity(severity)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"unmapped offense severity: {severity!r}") from exc


__all__ = ["AnnotationLevel", "Conclusion", "OffenseSeverity", "annotation_level_for"]
