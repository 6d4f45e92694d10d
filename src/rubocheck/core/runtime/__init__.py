# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime helpers shared across rubocheck."""

from __future__ import annotations

from .process import CommandOptions, SubprocessExecutionError, run_command

__all__ = ["CommandOptions", "SubprocessExecutionError", "run_command"]
