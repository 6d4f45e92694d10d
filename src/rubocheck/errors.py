# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Base exception shared by every rubocheck failure mode."""

from __future__ import annotations


class RubocheckError(Exception):
    """Raised when a run cannot complete and the process must exit non-zero."""


__all__ = ["RubocheckError"]
