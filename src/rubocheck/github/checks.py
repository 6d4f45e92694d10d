# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Create and complete GitHub check runs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Final

import requests

from ..config import DEFAULT_API_URL, CheckSettings
from ..core.logging import RunLogger
from ..core.models import JsonValue, RunContext
from ..core.severity import Conclusion
from ..errors import RubocheckError

LOGGER = logging.getLogger(__name__)

Clock = Callable[[], datetime]

STATUS_IN_PROGRESS: Final[str] = "in_progress"
STATUS_COMPLETED: Final[str] = "completed"


class GithubAPIError(RubocheckError):
    """Raised when the check-run API answers with a non-success status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, Mapping) and isinstance(body.get("message"), str):
        return body["message"]
    return response.reason or f"HTTP {response.status_code}"


class CheckRunClient:
    """Speak the two-call check-run protocol for one commit.

    ``create`` opens a run directly in ``in_progress``; ``complete`` patches it
    to ``completed`` with a conclusion and output. There is no retry.
    """

    def __init__(
        self,
        context: RunContext,
        settings: CheckSettings | None = None,
        *,
        session: requests.Session | None = None,
        clock: Clock | None = None,
        logger: RunLogger | None = None,
    ) -> None:
        self._context = context
        self._settings = settings or CheckSettings()
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._clock = clock or _utc_now
        self._logger = logger

    def __enter__(self) -> CheckRunClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session when this client created it."""

        if self._owns_session:
            self._session.close()

    @property
    def headers(self) -> dict[str, str]:
        """Return the request headers sent with every call."""

        return {
            "Content-Type": "application/json",
            "Accept": self._settings.accept,
            "Authorization": f"Bearer {self._context.token}",
            "User-Agent": self._settings.user_agent,
        }

    @property
    def base_path(self) -> str:
        """Return the collection URL for this repository's check runs."""

        api_url = (self._settings.api_url or DEFAULT_API_URL).rstrip("/")
        return f"{api_url}/repos/{self._context.owner}/{self._context.repo}/check-runs"

    def _timestamp(self) -> str:
        return self._clock().astimezone(UTC).isoformat(timespec="seconds")

    def _send(self, method: str, url: str, body: Mapping[str, JsonValue], *, label: str) -> requests.Response:
        LOGGER.debug("request method=%s url=%s", method, url)
        try:
            response = self._session.request(
                method,
                url,
                json=body,
                headers=self.headers,
                timeout=self._settings.timeout,
            )
        except requests.RequestException as exc:
            self._report_failure(label, str(exc))
            raise GithubAPIError(str(exc)) from exc
        LOGGER.debug("response status=%s", response.status_code)
        if response.status_code >= 300:
            message = _error_message(response)
            self._report_failure(label, message)
            raise GithubAPIError(message, status_code=response.status_code)
        return response

    def _report_failure(self, label: str, message: str) -> None:
        if self._logger is not None:
            self._logger.fail(f"[{label}] Failed Posting to Github: {message}")

    def create(self) -> int:
        """Create an ``in_progress`` check run for the commit.

        Returns:
            int: Identifier assigned by the API.

        Raises:
            GithubAPIError: If the API rejects the request.
        """

        body: dict[str, JsonValue] = {
            "name": self._settings.check_name,
            "head_sha": self._context.commit_sha,
            "status": STATUS_IN_PROGRESS,
            "started_at": self._timestamp(),
        }
        response = self._send("POST", self.base_path, body, label="Github Create Check")
        try:
            return int(response.json()["id"])
        except (ValueError, KeyError, TypeError) as exc:
            raise GithubAPIError("check run response did not include an id") from exc

    def complete(
        self,
        check_run_id: int,
        conclusion: Conclusion,
        output: Mapping[str, JsonValue] | None,
    ) -> None:
        """Mark the check run completed with ``conclusion`` and ``output``.

        Args:
            check_run_id: Identifier returned by :meth:`create`.
            conclusion: Final verdict.
            output: ``{title, summary, annotations}`` object, or ``None``.

        Raises:
            GithubAPIError: If the API rejects the request.
        """

        if self._logger is not None:
            self._logger.echo(f"[{check_run_id}] Updating check {conclusion.value}")
        body: dict[str, JsonValue] = {
            "name": self._settings.check_name,
            "head_sha": self._context.commit_sha,
            "status": STATUS_COMPLETED,
            "completed_at": self._timestamp(),
            "conclusion": conclusion.value,
            "output": dict(output) if output is not None else None,
        }
        self._send("PATCH", f"{self.base_path}/{check_run_id}", body, label="Github Update Check")


__all__ = ["CheckRunClient", "Clock", "GithubAPIError"]
