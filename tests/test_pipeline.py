# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end tests for the check orchestration."""

from __future__ import annotations

import pytest

from helpers.fakes import FakeLinter, FakeSession, FakeVersionControl, file_offenses, make_response
from rubocheck.config import CheckSettings
from rubocheck.core.logging import RunLogger
from rubocheck.core.models import CheckReport, FileOffenses, RunContext
from rubocheck.core.severity import Conclusion
from rubocheck.discovery import VersionControlError
from rubocheck.github import CheckRunClient, GithubAPIError
from rubocheck.linting import LintExecutionError
from rubocheck.orchestration import run_check, run_lint_pipeline


def _run(
    run_context: RunContext,
    settings: CheckSettings,
    run_logger: RunLogger,
    *,
    session: FakeSession,
    vcs: FakeVersionControl,
    linter: FakeLinter,
) -> CheckReport:
    client = CheckRunClient(run_context, settings, session=session)  # type: ignore[arg-type]
    return run_check(run_context, client=client, vcs=vcs, linter=linter, settings=settings, logger=run_logger)


def test_empty_change_set_skips_linter(run_context: RunContext, settings: CheckSettings, run_logger: RunLogger) -> None:
    linter = FakeLinter()

    report = run_lint_pipeline(run_context, [], linter=linter, settings=settings, logger=run_logger)

    assert linter.calls == []
    assert report.conclusion is Conclusion.SUCCESS
    assert report.summary == "0 offense(s) found"


def test_lint_pipeline_uses_workspace(run_context: RunContext, settings: CheckSettings, run_logger: RunLogger) -> None:
    linter = FakeLinter(results=[file_offenses("a.rb", ("warning", 10, "careful"))])

    report = run_lint_pipeline(run_context, ["a.rb"], linter=linter, settings=settings, logger=run_logger)

    assert linter.calls == [(("a.rb",), run_context.workspace)]
    assert report.summary == "1 offense(s) found"


def test_warning_only_run_completes_once(
    run_context: RunContext, settings: CheckSettings, run_logger: RunLogger
) -> None:
    session = FakeSession(responses=[make_response(201, {"id": 9}), make_response(200, {})])
    linter = FakeLinter(results=[file_offenses("a.rb", ("warning", 10, "Lint/Void: unused"))])

    report = _run(
        run_context,
        settings,
        run_logger,
        session=session,
        vcs=FakeVersionControl(files=["a.rb", "README.md"]),
        linter=linter,
    )

    assert report.conclusion is Conclusion.SUCCESS
    assert linter.calls == [(("a.rb",), run_context.workspace)]
    assert [call["method"] for call in session.calls] == ["POST", "PATCH"]
    body = session.calls[1]["json"]
    assert body["conclusion"] == "success"
    assert body["output"]["summary"] == "1 offense(s) found"
    assert body["output"]["annotations"] == [
        {
            "path": "a.rb",
            "start_line": 10,
            "end_line": 10,
            "annotation_level": "warning",
            "message": "Lint/Void: unused",
        }
    ]


def test_failure_run_forces_second_completion(
    run_context: RunContext, settings: CheckSettings, run_logger: RunLogger
) -> None:
    session = FakeSession(
        responses=[make_response(201, {"id": 9}), make_response(200, {}), make_response(200, {})],
    )
    linter = FakeLinter(results=[file_offenses("a.rb", ("fatal", 10, "Lint/Syntax: unexpected token"))])

    report = _run(
        run_context,
        settings,
        run_logger,
        session=session,
        vcs=FakeVersionControl(files=["a.rb"]),
        linter=linter,
    )

    assert report.conclusion is Conclusion.FAILURE
    assert [call["method"] for call in session.calls] == ["POST", "PATCH", "PATCH"]
    first, second = session.calls[1]["json"], session.calls[2]["json"]
    assert first["conclusion"] == "failure"
    assert first["output"]["annotations"][0]["annotation_level"] == "failure"
    assert second["conclusion"] == "failure"
    assert second["output"] is None
    assert session.calls[2]["url"].endswith("/check-runs/9")


def test_error_in_one_file_and_clean_file(
    run_context: RunContext, settings: CheckSettings, run_logger: RunLogger
) -> None:
    session = FakeSession(
        responses=[make_response(201, {"id": 1}), make_response(200, {}), make_response(200, {})],
    )
    linter = FakeLinter(results=[file_offenses("a.rb", ("error", 3, "bad")), FileOffenses(path="b.rb")])

    report = _run(
        run_context,
        settings,
        run_logger,
        session=session,
        vcs=FakeVersionControl(files=["a.rb", "b.rb"]),
        linter=linter,
    )

    assert report.conclusion is Conclusion.FAILURE
    assert len(report.annotations) == 1
    assert report.summary == "1 offense(s) found"


def test_no_changed_sources_reports_success(
    run_context: RunContext, settings: CheckSettings, run_logger: RunLogger, capsys: pytest.CaptureFixture[str]
) -> None:
    session = FakeSession(responses=[make_response(201, {"id": 5}), make_response(200, {})])
    linter = FakeLinter()

    report = _run(
        run_context,
        settings,
        run_logger,
        session=session,
        vcs=FakeVersionControl(files=["docs/index.md"]),
        linter=linter,
    )

    assert linter.calls == []
    assert report.conclusion is Conclusion.SUCCESS
    assert session.calls[1]["json"]["output"]["summary"] == "0 offense(s) found"
    assert "No new files to run rubocop on, exiting..." in capsys.readouterr().out


def test_create_failure_prevents_lint(run_context: RunContext, settings: CheckSettings, run_logger: RunLogger) -> None:
    session = FakeSession(responses=[make_response(401, {"message": "Bad credentials"})])
    linter = FakeLinter()

    with pytest.raises(GithubAPIError, match="Bad credentials"):
        _run(
            run_context,
            settings,
            run_logger,
            session=session,
            vcs=FakeVersionControl(files=["a.rb"]),
            linter=linter,
        )

    assert linter.calls == []
    assert len(session.calls) == 1


def test_version_control_error_precedes_check_creation(
    run_context: RunContext, settings: CheckSettings, run_logger: RunLogger
) -> None:
    session = FakeSession()

    with pytest.raises(VersionControlError):
        _run(
            run_context,
            settings,
            run_logger,
            session=session,
            vcs=FakeVersionControl(error=VersionControlError("need two commits")),
            linter=FakeLinter(),
        )

    assert session.calls == []


def test_lint_error_leaves_check_in_progress(
    run_context: RunContext, settings: CheckSettings, run_logger: RunLogger
) -> None:
    session = FakeSession(responses=[make_response(201, {"id": 3})])

    with pytest.raises(LintExecutionError):
        _run(
            run_context,
            settings,
            run_logger,
            session=session,
            vcs=FakeVersionControl(files=["a.rb"]),
            linter=FakeLinter(error=LintExecutionError("garbage")),
        )

    assert [call["method"] for call in session.calls] == ["POST"]


def test_first_completion_error_propagates(
    run_context: RunContext, settings: CheckSettings, run_logger: RunLogger
) -> None:
    session = FakeSession(responses=[make_response(201, {"id": 3}), make_response(500, {"message": "oops"})])

    with pytest.raises(GithubAPIError, match="oops"):
        _run(
            run_context,
            settings,
            run_logger,
            session=session,
            vcs=FakeVersionControl(files=["a.rb"]),
            linter=FakeLinter(results=[file_offenses("a.rb", ("error", 1, "bad"))]),
        )

    assert len(session.calls) == 2
