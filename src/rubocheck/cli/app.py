# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the check pipeline."""

from __future__ import annotations

from typing import Annotated

import typer

from ..config import CheckSettings, load_run_context, resolve_api_url
from ..core.logging import RunLogger, configure_logging, detect_tty
from ..discovery.git import GitVersionControl
from ..errors import RubocheckError
from ..github.checks import CheckRunClient
from ..linting.rubocop import RubocopLinter
from ..orchestration.pipeline import run_check

app = typer.Typer(help="Report RuboCop offenses as a GitHub check run.", no_args_is_help=True)


@app.callback()
def _root() -> None:
    """Report RuboCop offenses as a GitHub check run."""


@app.command("run")
def run(
    check_name: Annotated[str, typer.Option("--check-name", help="Name shown for the check run.")] = "Rubocop",
    extension: Annotated[str, typer.Option("--extension", help="Source suffix selecting files to lint.")] = ".rb",
    rubocop: Annotated[str, typer.Option("--rubocop", help="RuboCop executable to invoke.")] = "rubocop",
    base_branch: Annotated[
        str,
        typer.Option("--base-branch", help="Branch whose merge base is reported."),
    ] = "origin/master",
    api_url: Annotated[
        str | None,
        typer.Option("--api-url", help="GitHub API base URL (defaults to GITHUB_API_URL)."),
    ] = None,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji output.")] = False,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Emit debug traces on stderr.")] = False,
) -> None:
    """Lint the files changed by the current commit and publish a check run."""

    use_color = not no_color and detect_tty()
    configure_logging(debug=debug, use_color=use_color)
    logger = RunLogger(use_emoji=not no_emoji, use_color=use_color)
    settings = CheckSettings(
        check_name=check_name,
        source_extension=extension,
        rubocop_executable=rubocop,
        base_branch=base_branch,
        api_url=resolve_api_url(override=api_url),
    )
    try:
        context = load_run_context()
        with CheckRunClient(context, settings, logger=logger) as client:
            report = run_check(
                context,
                client=client,
                vcs=GitVersionControl(context.workspace, base_branch=settings.base_branch, logger=logger),
                linter=RubocopLinter(settings.rubocop_executable),
                settings=settings,
                logger=logger,
            )
        logger.ok(f"{settings.check_name} check completed: {report.conclusion.value} ({report.summary})")
    except RubocheckError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
