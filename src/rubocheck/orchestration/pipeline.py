# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sequence change detection, linting and check-run publication."""

from __future__ import annotations

import json
from collections.abc import Sequence

from ..config import CheckSettings
from ..core.logging import RunLogger
from ..core.models import CheckReport, RunContext
from ..core.severity import Conclusion
from ..discovery.git import resolve_change_set
from ..github.checks import CheckRunClient
from ..interfaces import Linter, VersionControl
from ..reporting.annotations import build_check_report


def run_lint_pipeline(
    context: RunContext,
    change_set: Sequence[str],
    *,
    linter: Linter,
    settings: CheckSettings,
    logger: RunLogger,
) -> CheckReport:
    """Lint ``change_set`` and translate the offenses into a report.

    An empty change set yields a passing report without invoking the linter.

    Args:
        context: Run context supplying the workspace root.
        change_set: Files to lint, relative to the workspace.
        linter: Linter capability.
        settings: Run settings (check name used as title).
        logger: Console logger for progress lines.

    Returns:
        CheckReport: Report for the change set.
    """

    if not change_set:
        logger.info("No new files to run rubocop on, exiting...")
        return build_check_report((), title=settings.check_name)
    logger.info(f"Running rubocop on these files: {list(change_set)}")
    results = linter.lint(change_set, cwd=context.workspace)
    return build_check_report(results, title=settings.check_name)


def run_check(
    context: RunContext,
    *,
    client: CheckRunClient,
    vcs: VersionControl,
    linter: Linter,
    settings: CheckSettings,
    logger: RunLogger,
) -> CheckReport:
    """Run the whole check for one invocation.

    Git errors surface before any check run exists. After ``create`` any
    failure leaves the remote run ``in_progress``. A ``failure`` conclusion is
    followed by a second completion forcing ``failure`` with no output.

    Returns:
        CheckReport: The report that was published.
    """

    logger.section(f"Starting {settings.check_name}...")
    change_set = resolve_change_set(vcs, extension=settings.source_extension)
    check_run_id = client.create()
    report = run_lint_pipeline(context, change_set, linter=linter, settings=settings, logger=logger)
    output = report.to_output()
    logger.echo(f"Results:\n\n{json.dumps(output, indent=2)}")

    client.complete(check_run_id, report.conclusion, output)
    if report.conclusion is Conclusion.FAILURE:
        client.complete(check_run_id, Conclusion.FAILURE, None)
    return report


__all__ = ["run_check", "run_lint_pipeline"]
