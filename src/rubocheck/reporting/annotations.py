# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build check-run reports from linter offenses."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.models import Annotation, CheckReport, FileOffenses
from ..core.severity import AnnotationLevel, Conclusion


def format_summary(count: int) -> str:
    """Return the summary line for ``count`` offenses."""

    return f"{count} offense(s) found"


def build_check_report(results: Iterable[FileOffenses], *, title: str) -> CheckReport:
    """Convert per-file offenses into a :class:`CheckReport`.

    Annotations follow the linter's file order and then in-file order. The
    conclusion becomes ``failure`` as soon as one annotation is failure level
    and never reverts.

    Args:
        results: Offenses grouped by file as reported by the linter.
        title: Title shown on the check run output.

    Returns:
        CheckReport: Report ready to be published.
    """

    annotations: list[Annotation] = []
    conclusion = Conclusion.SUCCESS
    for file_result in results:
        for offense in file_result.offenses:
            annotation = Annotation.from_offense(offense)
            annotations.append(annotation)
            if annotation.annotation_level is AnnotationLevel.FAILURE:
                conclusion = Conclusion.FAILURE
    return CheckReport(
        title=title,
        summary=format_summary(len(annotations)),
        annotations=tuple(annotations),
        conclusion=conclusion,
    )


__all__ = ["build_check_report", "format_summary"]
