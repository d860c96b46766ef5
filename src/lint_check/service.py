"""Orchestration layer used by the CLI to run the lint and report its verdict."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Sequence

from .adapters import ChecksClient, DiagnosticCollector, LinterError
from .config import ActionContext
from .models import DiagnosticRecord, Verdict
from .reporter import CheckLookupError, CheckUpdateError, VerdictReporter

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    """Result returned by :class:`LintCheckService` runs."""

    verdict: Verdict
    published: bool
    error: str | None = None

    @property
    def publish_failed(self) -> bool:
        return self.error is not None


CollectorFactory = Callable[[ActionContext], DiagnosticCollector]


class LintCheckService:
    """Run the collector, compute the verdict and publish it to the check run."""

    def __init__(
        self,
        context: ActionContext,
        *,
        checks_client: ChecksClient | None = None,
        collector_factory: CollectorFactory | None = None,
        reporter: VerdictReporter | None = None,
        linter_name: str | None = None,
    ) -> None:
        self.context = context
        self._collector_factory = collector_factory or (
            lambda ctx: DiagnosticCollector(ctx.workspace)
        )
        if reporter is None:
            kwargs = {"linter_name": linter_name} if linter_name else {}
            reporter = VerdictReporter(context, checks_client, **kwargs)
        self.reporter = reporter

    # ------------------------------------------------------------------
    def run(
        self,
        *,
        extra_flags: Sequence[str] = (),
        results_path: Path | None = None,
        publish: bool = True,
    ) -> RunResult:
        """Execute a single collect, report and publish pass.

        Collector failures propagate to the caller; publish failures are
        captured on the result so the verdict is still available.
        """

        records = self.collect(extra_flags=extra_flags, results_path=results_path)
        verdict = self.reporter.report(records)

        if not publish:
            logger.info("Skipping check-run update")
            return RunResult(verdict=verdict, published=False)

        try:
            self.reporter.publish(verdict)
        except (CheckLookupError, CheckUpdateError) as exc:
            logger.error("Publishing the check run failed: %s", exc)
            return RunResult(verdict=verdict, published=False, error=str(exc))

        return RunResult(verdict=verdict, published=True)

    def collect(
        self,
        *,
        extra_flags: Sequence[str] = (),
        results_path: Path | None = None,
    ) -> List[DiagnosticRecord]:
        collector = self._collector_factory(self.context)
        if results_path is not None:
            return collector.load_results(results_path)
        return collector.collect(extra_flags)


__all__ = ["LintCheckService", "RunResult", "LinterError", "CheckLookupError", "CheckUpdateError"]
