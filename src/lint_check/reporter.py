"""Fold diagnostic records into a verdict and publish it to the check run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, List, Sequence

import httpx

from .adapters import ChecksClient
from .config import ActionContext, ContextError
from .models import Annotation, Conclusion, DiagnosticRecord, Verdict
from .normalization import build_annotation, coerce_count

logger = logging.getLogger(__name__)

DEFAULT_LINTER_NAME = "XO"
LINT_ERRORS_MESSAGE = ":x: Lint errors found!"
LINT_WARNINGS_MESSAGE = ":x: Lint warnings found!"


class CheckLookupError(LookupError):
    """Raised when the check run for the current ref cannot be resolved."""


class CheckUpdateError(RuntimeError):
    """Raised when the check-run update is rejected."""


class ExitLevel(str, Enum):
    """How the process should signal the outcome of a run."""

    OK = "ok"
    WARNING = "warning"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class ExitSignal:
    level: ExitLevel
    message: str | None = None

    @property
    def exit_code(self) -> int:
        return 1 if self.level is ExitLevel.FAILURE else 0


def decide_conclusion(total_warnings: int, total_errors: int) -> Conclusion:
    """Errors always win over warnings; no findings means success."""

    conclusion = Conclusion.SUCCESS
    if total_warnings > 0:
        conclusion = Conclusion.NEUTRAL
    if total_errors > 0:
        conclusion = Conclusion.FAILURE
    return conclusion


def summarize(total_warnings: int, total_errors: int) -> tuple[str, ...]:
    lines: List[str] = []
    if total_warnings > 0:
        lines.append(f":warning: Found {total_warnings} warnings.")
    if total_errors > 0:
        lines.append(f":x: Found {total_errors} errors.")
    return tuple(lines)


def resolve_exit(verdict: Verdict) -> ExitSignal:
    """Map a verdict onto the process exit signal.

    There is no neutral exit status on the Actions runner, so a warning-only
    run exits cleanly with a warning notice.
    """

    if verdict.total_errors > 0:
        return ExitSignal(ExitLevel.FAILURE, LINT_ERRORS_MESSAGE)
    if verdict.total_warnings > 0:
        return ExitSignal(ExitLevel.WARNING, LINT_WARNINGS_MESSAGE)
    return ExitSignal(ExitLevel.OK)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class VerdictReporter:
    """Compute the verdict for a run and drive the check run to completion."""

    def __init__(
        self,
        context: ActionContext,
        checks_client: ChecksClient | None,
        *,
        linter_name: str = DEFAULT_LINTER_NAME,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.context = context
        self.checks_client = checks_client
        self.linter_name = linter_name
        self._clock = clock

    # ------------------------------------------------------------------
    def report(self, records: Sequence[DiagnosticRecord]) -> Verdict:
        """Aggregate ``records`` in collector order into a :class:`Verdict`."""

        workspace = str(self.context.workspace)
        total_warnings = 0
        total_errors = 0
        annotations: List[Annotation] = []

        for record in records:
            total_warnings += coerce_count(record.warning_count)
            total_errors += coerce_count(record.error_count)
            for message in record.messages:
                annotations.append(build_annotation(record.file_path, message, workspace))

        verdict = Verdict(
            total_warnings=total_warnings,
            total_errors=total_errors,
            conclusion=decide_conclusion(total_warnings, total_errors),
            summary_lines=summarize(total_warnings, total_errors),
            annotations=tuple(annotations),
        )
        logger.info(
            "Lint verdict: %s (%d warnings, %d errors, %d annotations)",
            verdict.conclusion.value,
            total_warnings,
            total_errors,
            len(annotations),
        )
        return verdict

    # ------------------------------------------------------------------
    def publish(self, verdict: Verdict) -> None:
        """Move the current check run to its completed state, exactly once."""

        ctx = self.context
        client = self._require_client()
        check_run_id = self._resolve_check_run_id(client)
        payload = self.build_update_payload(verdict)

        logger.info(
            "Updating check run %s with conclusion %s", check_run_id, verdict.conclusion.value
        )
        try:
            client.update(ctx.owner, ctx.repo, check_run_id, payload)
        except httpx.HTTPError as exc:
            raise CheckUpdateError(f"Failed to update check run {check_run_id}: {exc}") from exc

    def build_update_payload(self, verdict: Verdict) -> Dict[str, Any]:
        if verdict.conclusion is Conclusion.SUCCESS:
            summary = f"{self.linter_name} found no lint in your code."
            text = f":tada: {self.linter_name} found no lint in your code."
        else:
            summary = "\n".join(verdict.summary_lines)
            text = summary

        completed_at = self._clock().astimezone(timezone.utc)
        return {
            "head_sha": self.context.sha,
            "status": "completed",
            "completed_at": completed_at.strftime("%Y-%m-%dT%H:%M:%SZ"),
            "conclusion": verdict.conclusion.value,
            "output": {
                "title": self.context.action,
                "summary": summary,
                "text": text,
                "annotations": [annotation.to_payload() for annotation in verdict.annotations],
            },
        }

    def _require_client(self) -> ChecksClient:
        if self.checks_client is None:
            raise CheckLookupError("No checks client configured")
        try:
            self.context.require_publish_fields()
        except ContextError as exc:
            raise CheckLookupError(str(exc)) from exc
        return self.checks_client

    def _resolve_check_run_id(self, client: ChecksClient) -> int:
        ctx = self.context
        try:
            check_runs = client.list_for_ref(ctx.owner, ctx.repo, ctx.ref)
        except httpx.HTTPError as exc:
            raise CheckLookupError(f"Failed to list check runs for {ctx.ref}: {exc}") from exc

        if not check_runs:
            raise CheckLookupError(f"No check runs found for {ctx.ref}")

        check_run_id = check_runs[0].get("id")
        if check_run_id is None:
            raise CheckLookupError(f"Check run for {ctx.ref} has no id")
        return check_run_id


__all__ = [
    "CheckLookupError",
    "CheckUpdateError",
    "DEFAULT_LINTER_NAME",
    "ExitLevel",
    "ExitSignal",
    "LINT_ERRORS_MESSAGE",
    "LINT_WARNINGS_MESSAGE",
    "VerdictReporter",
    "decide_conclusion",
    "resolve_exit",
    "summarize",
]
