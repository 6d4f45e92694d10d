# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Linter adapters."""

from __future__ import annotations

from .rubocop import LintExecutionError, RubocopLinter, parse_rubocop_report

__all__ = ["LintExecutionError", "RubocopLinter", "parse_rubocop_report"]
