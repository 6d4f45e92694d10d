# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Change-set discovery backed by version control."""

from __future__ import annotations

from .git import GitVersionControl, VersionControlError, resolve_change_set

__all__ = ["GitVersionControl", "VersionControlError", "resolve_change_set"]
