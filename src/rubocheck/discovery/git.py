# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git-based change-set discovery."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from ..core.logging import RunLogger
from ..core.runtime.process import CommandOptions, SubprocessExecutionError, run_command
from ..errors import RubocheckError
from ..interfaces import VersionControl

LOGGER = logging.getLogger(__name__)

GitRunner = Callable[[Sequence[str], Path], list[str]]


class VersionControlError(RubocheckError):
    """Raised when the changed files cannot be determined from git history."""


class GitVersionControl(VersionControl):
    """Collect files changed by the most recent commit."""

    def __init__(
        self,
        root: Path,
        *,
        base_branch: str = "origin/master",
        runner: GitRunner | None = None,
        logger: RunLogger | None = None,
    ) -> None:
        """Create a git-backed change-set source.

        Args:
            root: Repository root used as the working directory for git.
            base_branch: Branch whose fork point is reported for context.
            runner: Optional command runner returning stdout lines and raising
                :class:`SubprocessExecutionError` on failure.
            logger: Optional console logger receiving progress lines.
        """

        self._root = root
        self._base_branch = base_branch
        self._runner = runner or self._default_runner
        self._logger = logger

    def changed_files(self) -> list[str]:
        """Return paths differing between the two most recent commits.

        Returns:
            list[str]: Paths in the order reported by ``git diff``.

        Raises:
            VersionControlError: If fewer than two commits exist or git fails.
        """

        self._report_context()
        log_lines = self._git(["git", "log", "-n", "2", "--format=format:%H"])
        commits = [line.strip() for line in log_lines if line.strip()]
        if len(commits) < 2:
            raise VersionControlError("at least two commits are required to determine changed files")
        current, previous = commits[0], commits[1]
        diff = self._git(["git", "diff", "--name-only", f"{current}..{previous}"])
        return [line.strip() for line in diff if line.strip()]

    def merge_base(self) -> str | None:
        """Return the fork point with the base branch, or ``None`` when unknown."""

        try:
            output = self._runner(["git", "merge-base", "--fork-point", self._base_branch], self._root)
        except (SubprocessExecutionError, FileNotFoundError) as exc:
            LOGGER.debug("merge-base lookup failed: %s", exc)
            return None
        return output[0].strip() if output else None

    def _report_context(self) -> None:
        if self._logger is None:
            return
        self._logger.info(f"Merge base with {self._base_branch} {self.merge_base() or '<unknown>'}")
        try:
            summary = self._runner(["git", "log", "-n", "2"], self._root)
        except (SubprocessExecutionError, FileNotFoundError) as exc:
            LOGGER.debug("git log summary failed: %s", exc)
            return
        self._logger.echo("\n".join(summary))

    def _git(self, cmd: Sequence[str]) -> list[str]:
        try:
            return self._runner(cmd, self._root)
        except (SubprocessExecutionError, FileNotFoundError) as exc:
            raise VersionControlError(f"{' '.join(cmd)} failed: {exc}") from exc

    @staticmethod
    def _default_runner(cmd: Sequence[str], root: Path) -> list[str]:
        """Execute ``cmd`` in ``root`` returning stdout lines.

        Args:
            cmd: Git command to execute.
            root: Repository root directory.

        Returns:
            list[str]: Raw stdout lines produced by the command.
        """

        cp = run_command(cmd, options=CommandOptions(cwd=root))
        return (cp.stdout or "").splitlines()


def resolve_change_set(vcs: VersionControl, *, extension: str) -> list[str]:
    """Return changed files ending in ``extension``, deduplicated in diff order.

    Args:
        vcs: Source of changed paths.
        extension: Source-file suffix the linter understands (e.g. ``.rb``).

    Returns:
        list[str]: Ordered change set; empty when nothing relevant changed.
    """

    seen: set[str] = set()
    change_set: list[str] = []
    for path in vcs.changed_files():
        if not path.endswith(extension) or path in seen:
            continue
        seen.add(path)
        change_set.append(path)
    return change_set


__all__ = ["GitRunner", "GitVersionControl", "VersionControlError", "resolve_change_set"]
