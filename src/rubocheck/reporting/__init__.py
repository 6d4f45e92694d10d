# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate linter offenses into check-run reports."""

from __future__ import annotations

from .annotations import build_check_report, format_summary

__all__ = ["build_check_report", "format_summary"]
