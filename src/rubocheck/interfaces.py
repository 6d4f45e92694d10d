# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Interfaces for the external tools the pipeline drives."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from .core.models import FileOffenses


@runtime_checkable
class VersionControl(Protocol):
    """Report the files changed by the commit under check."""

    @abstractmethod
    def changed_files(self) -> Sequence[str]:
        """Return paths changed between the two most recent commits, in diff order.

        Returns:
            Sequence[str]: Repository-relative paths.

        Raises:
            VersionControlError: If fewer than two commits exist or the diff fails.
        """

        ...


@runtime_checkable
class Linter(Protocol):
    """Lint a set of files and report offenses grouped by file."""

    @abstractmethod
    def lint(self, files: Sequence[str], *, cwd: Path) -> Sequence[FileOffenses]:
        """Run the linter on ``files`` inside ``cwd``.

        Args:
            files: Non-empty list of paths relative to ``cwd``.
            cwd: Working directory for the linter process.

        Returns:
            Sequence[FileOffenses]: Offenses per file in report order.

        Raises:
            LintExecutionError: If the linter output cannot be parsed.
        """

        ...


__all__ = ["Linter", "VersionControl"]
