# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""RuboCop invocation and JSON report parsing."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import cast

from pydantic import ValidationError

from ..core.models import FileOffenses, JsonValue, Offense
from ..core.runtime.process import CommandOptions, run_command
from ..errors import RubocheckError
from ..interfaces import Linter

LOGGER = logging.getLogger(__name__)

LintRunner = Callable[[Sequence[str], Path], str]


class LintExecutionError(RubocheckError):
    """Raised when the linter output cannot be interpreted."""


def _iter_dicts(value: JsonValue, *, field: str) -> Iterator[Mapping[str, JsonValue]]:
    if not isinstance(value, list):
        raise LintExecutionError(f"rubocop output field '{field}' is not a list")
    for item in value:
        if not isinstance(item, Mapping):
            raise LintExecutionError(f"rubocop output field '{field}' contains a non-object entry")
        yield item


def _offense_line(location: JsonValue) -> JsonValue:
    if not isinstance(location, Mapping):
        return None
    # Older RuboCop releases only emit ``line``.
    return location.get("start_line", location.get("line"))


def parse_rubocop_report(stdout: str) -> list[FileOffenses]:
    """Parse ``rubocop --format json`` output into per-file offenses.

    Args:
        stdout: Raw standard output of the linter.

    Returns:
        list[FileOffenses]: Offenses grouped by file, preserving report order.

    Raises:
        LintExecutionError: If the payload is not a RuboCop JSON report, an
            entry is malformed, or an offense carries an unknown severity or
            missing location.
    """

    try:
        payload = cast(JsonValue, json.loads(stdout))
    except json.JSONDecodeError as exc:
        raise LintExecutionError(f"rubocop output is not valid JSON: {exc}") from exc
    if not isinstance(payload, Mapping) or not isinstance(payload.get("files"), list):
        raise LintExecutionError("rubocop output does not contain a 'files' list")

    results: list[FileOffenses] = []
    for entry in _iter_dicts(payload["files"], field="files"):
        path = entry.get("path")
        if not isinstance(path, str) or not path:
            raise LintExecutionError("rubocop output lists a file without a path")
        try:
            offenses = tuple(
                Offense(
                    path=path,
                    severity=offense.get("severity"),
                    message=offense.get("message"),
                    line=_offense_line(offense.get("location")),
                )
                for offense in _iter_dicts(entry.get("offenses"), field="offenses")
            )
        except ValidationError as exc:
            raise LintExecutionError(f"invalid offense reported for {path}: {exc}") from exc
        results.append(FileOffenses(path=path, offenses=offenses))
    return results


class RubocopLinter(Linter):
    """Run RuboCop restricted to an explicit list of files."""

    def __init__(self, executable: str = "rubocop", *, runner: LintRunner | None = None) -> None:
        self._executable = executable
        self._runner = runner or self._default_runner

    def command(self, files: Sequence[str]) -> list[str]:
        """Return the command line used to lint ``files``."""

        return [self._executable, "--format", "json", *files]

    def lint(self, files: Sequence[str], *, cwd: Path) -> list[FileOffenses]:
        """Lint ``files`` with ``cwd`` as the working directory.

        Args:
            files: Non-empty change set.
            cwd: Workspace root the paths are relative to.

        Returns:
            list[FileOffenses]: Parsed offenses per file.

        Raises:
            LintExecutionError: If ``files`` is empty, the executable is missing,
                or the output is unparseable.
        """

        if not files:
            raise LintExecutionError("refusing to run rubocop without files")
        try:
            stdout = self._runner(self.command(files), cwd)
        except FileNotFoundError as exc:
            raise LintExecutionError(str(exc)) from exc
        return parse_rubocop_report(stdout)

    @staticmethod
    def _default_runner(cmd: Sequence[str], cwd: Path) -> str:
        # RuboCop exits 1 whenever offenses exist, so only the output decides success.
        cp = run_command(cmd, options=CommandOptions(cwd=cwd, check=False))
        if cp.returncode not in (0, 1):
            LOGGER.warning("rubocop exited with status %s: %s", cp.returncode, (cp.stderr or "").strip())
        return cp.stdout or ""


__all__ = ["LintExecutionError", "LintRunner", "RubocopLinter", "parse_rubocop_report"]
