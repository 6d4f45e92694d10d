# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import logging
import shutil

# Bandit: subprocess usage is intentional; commands are argument lists and
# ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess

LOGGER = logging.getLogger(__name__)


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


@dataclass(slots=True, frozen=True)
class CommandOptions:
    """Immutable command execution options."""

    cwd: Path | None = None
    check: bool = True
    capture_output: bool = True


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_command(args: Sequence[str], *, options: CommandOptions | None = None) -> CompletedProcess[str]:
    """Execute *args* after normalising the executable path.

    Args:
        args: Command and arguments to execute.
        options: Execution options; defaults capture output and check the exit status.

    Returns:
        CompletedProcess[str]: Completed process with text output.

    Raises:
        SubprocessExecutionError: If ``options.check`` is set and the command fails.
        FileNotFoundError: If the executable cannot be located on ``PATH``.
    """

    opts = options or CommandOptions()
    normalized = _normalize_args(args)
    LOGGER.debug("running command=%s cwd=%s", " ".join(normalized), opts.cwd)
    completed: CompletedProcess[str] = subprocess.run(  # nosec B603
        normalized,
        cwd=str(opts.cwd) if opts.cwd is not None else None,
        check=False,
        capture_output=opts.capture_output,
        text=True,
    )

    if opts.check and completed.returncode != 0:
        raise SubprocessExecutionError(
            normalized,
            completed.returncode,
            completed.stdout,
            completed.stderr,
        )

    return completed


__all__ = ["CommandOptions", "SubprocessExecutionError", "run_command"]
