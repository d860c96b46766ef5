"""Trigger context for a run, resolved once from the Actions environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping

DEFAULT_API_URL = "https://api.github.com"


class ContextError(ValueError):
    """Raised when the trigger context is missing or malformed."""


@dataclass(frozen=True, slots=True)
class ActionContext:
    """Everything the collector and reporter need to know about the trigger.

    Instances are passed explicitly into each component so tests can build a
    fixture context without touching ``os.environ``.
    """

    workspace: Path
    token: str | None = None
    owner: str = ""
    repo: str = ""
    ref: str = ""
    sha: str = ""
    action: str = ""
    api_url: str = DEFAULT_API_URL
    step_summary_path: Path | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ActionContext":
        """Build a context from ``GITHUB_*`` variables."""

        env = os.environ if environ is None else environ

        owner, repo = _split_repository(env.get("GITHUB_REPOSITORY", ""))
        workspace = env.get("GITHUB_WORKSPACE") or os.getcwd()
        summary = env.get("GITHUB_STEP_SUMMARY")

        return cls(
            workspace=Path(workspace),
            token=env.get("GITHUB_TOKEN") or env.get("INPUT_GITHUB_TOKEN") or None,
            owner=owner,
            repo=repo,
            ref=env.get("GITHUB_REF", ""),
            sha=env.get("GITHUB_SHA", ""),
            action=env.get("GITHUB_ACTION", ""),
            api_url=env.get("GITHUB_API_URL") or DEFAULT_API_URL,
            step_summary_path=Path(summary) if summary else None,
        )

    def with_workspace(self, workspace: Path) -> "ActionContext":
        return replace(self, workspace=workspace)

    def require_publish_fields(self) -> None:
        """Raise :class:`ContextError` when a check-run update cannot be addressed."""

        missing = [
            name
            for name, value in (
                ("GITHUB_TOKEN", self.token),
                ("GITHUB_REPOSITORY", self.owner and self.repo),
                ("GITHUB_REF", self.ref),
                ("GITHUB_SHA", self.sha),
            )
            if not value
        ]
        if missing:
            raise ContextError(f"Missing trigger context: {', '.join(missing)}")


def _split_repository(value: str) -> tuple[str, str]:
    value = value.strip()
    if not value:
        return "", ""
    parts = value.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ContextError(f"GITHUB_REPOSITORY must be in 'owner/repo' format: {value}")
    return parts[0], parts[1]
