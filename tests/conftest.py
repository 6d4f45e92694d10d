# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from rubocheck.config import CheckSettings
from rubocheck.core.logging import RunLogger
from rubocheck.core.models import RunContext


@pytest.fixture
def run_context(tmp_path: Path) -> RunContext:
    """Return a context rooted in a temporary workspace."""
    return RunContext(commit_sha="abc123", workspace=tmp_path, owner="octo", repo="widgets", token="s3cret")


@pytest.fixture
def settings() -> CheckSettings:
    return CheckSettings()


@pytest.fixture
def run_logger() -> RunLogger:
    return RunLogger(use_emoji=False, use_color=False)
