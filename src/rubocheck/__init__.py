# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Publish RuboCop results as GitHub check runs."""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
