"""Thin client for the two GitHub Checks API calls a run needs."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Protocol
from urllib.parse import quote

import httpx

from ..config import ActionContext

logger = logging.getLogger(__name__)


class ChecksClient(Protocol):
    """Contract used by the reporter to talk to the check-run service."""

    def list_for_ref(self, owner: str, repo: str, ref: str) -> List[Mapping[str, Any]]:
        ...

    def update(
        self, owner: str, repo: str, check_run_id: int, payload: Mapping[str, Any]
    ) -> None:
        ...


class GitHubChecksClient:
    """GitHub REST implementation of :class:`ChecksClient` built on ``httpx``."""

    def __init__(self, context: ActionContext, http_client: httpx.Client | None = None) -> None:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if context.token:
            headers["Authorization"] = f"Bearer {context.token}"

        self._client = http_client or httpx.Client(base_url=context.api_url, headers=headers)

    def list_for_ref(self, owner: str, repo: str, ref: str) -> List[Mapping[str, Any]]:
        """Return the check runs attached to ``ref``."""

        response = self._client.get(
            f"/repos/{owner}/{repo}/commits/{quote(ref, safe='')}/check-runs"
        )
        response.raise_for_status()
        data: Dict[str, Any] = response.json() or {}
        check_runs = data.get("check_runs") or []
        logger.debug("Found %d check runs for %s", len(check_runs), ref)
        return list(check_runs)

    def update(
        self, owner: str, repo: str, check_run_id: int, payload: Mapping[str, Any]
    ) -> None:
        """Apply ``payload`` to the check run identified by ``check_run_id``."""

        response = self._client.patch(
            f"/repos/{owner}/{repo}/check-runs/{check_run_id}", json=dict(payload)
        )
        response.raise_for_status()

    def close(self) -> None:
        self._client.close()
