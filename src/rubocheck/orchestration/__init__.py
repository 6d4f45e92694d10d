# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end sequencing of a check run."""

from __future__ import annotations

from .pipeline import run_check, run_lint_pipeline

__all__ = ["run_check", "run_lint_pipeline"]
