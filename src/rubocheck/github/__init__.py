# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""GitHub check-run API client."""

from __future__ import annotations

from .checks import CheckRunClient, GithubAPIError

__all__ = ["CheckRunClient", "GithubAPIError"]
