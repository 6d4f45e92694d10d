# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime configuration derived from the Actions environment and CLI."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.models import RunContext
from .errors import RubocheckError

SHA_ENV: Final[str] = "GITHUB_SHA"
EVENT_PATH_ENV: Final[str] = "GITHUB_EVENT_PATH"
TOKEN_ENV: Final[str] = "GITHUB_TOKEN"
WORKSPACE_ENV: Final[str] = "GITHUB_WORKSPACE"
API_URL_ENV: Final[str] = "GITHUB_API_URL"

DEFAULT_API_URL: Final[str] = "https://api.github.com"


class ConfigError(RubocheckError):
    """Raised when configuration input is invalid."""


class CheckSettings(BaseModel):
    """Presentation and protocol settings for a single run."""

    model_config = ConfigDict(frozen=True)

    check_name: str = "Rubocop"
    source_extension: str = ".rb"
    rubocop_executable: str = "rubocop"
    base_branch: str = "origin/master"
    api_url: str = DEFAULT_API_URL
    accept: str = "application/vnd.github.antiope-preview+json"
    user_agent: str = "github-actions-rubocop"
    timeout: float = Field(default=30.0, gt=0)


class _Owner(BaseModel):
    login: str = Field(min_length=1)


class _Repository(BaseModel):
    name: str = Field(min_length=1)
    owner: _Owner


class _EventPayload(BaseModel):
    repository: _Repository


def _require(env: Mapping[str, str], key: str) -> str:
    value = env.get(key, "").strip()
    if not value:
        raise ConfigError(f"environment variable {key} is required")
    return value


def _load_event(path: Path) -> _EventPayload:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"unable to read event payload {path}: {exc}") from exc
    try:
        return _EventPayload.model_validate(json.loads(raw))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"event payload {path} is not valid JSON: {exc}") from exc
    except ValidationError as exc:
        raise ConfigError(f"event payload {path} lacks repository.owner.login/repository.name") from exc


def load_run_context(env: Mapping[str, str] | None = None) -> RunContext:
    """Build the :class:`RunContext` for this invocation.

    Args:
        env: Environment mapping; defaults to :data:`os.environ`.

    Returns:
        RunContext: Immutable context consumed by the pipeline.

    Raises:
        ConfigError: If a required variable or payload field is missing.
    """

    environment = os.environ if env is None else env
    commit_sha = _require(environment, SHA_ENV)
    event_path = Path(_require(environment, EVENT_PATH_ENV))
    token = _require(environment, TOKEN_ENV)
    workspace = Path(_require(environment, WORKSPACE_ENV))
    event = _load_event(event_path)
    return RunContext(
        commit_sha=commit_sha,
        workspace=workspace,
        owner=event.repository.owner.login,
        repo=event.repository.name,
        token=token,
    )


def resolve_api_url(env: Mapping[str, str] | None = None, override: str | None = None) -> str:
    """Return the API base URL, preferring ``override`` then ``GITHUB_API_URL``."""

    if override:
        return override.rstrip("/")
    environment = os.environ if env is None else env
    return (environment.get(API_URL_ENV) or DEFAULT_API_URL).rstrip("/")


__all__ = [
    "CheckSettings",
    "ConfigError",
    "DEFAULT_API_URL",
    "load_run_context",
    "resolve_api_url",
]
