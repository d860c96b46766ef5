from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Sequence

import pytest

from lint_check.adapters import LinterDecodeError
from lint_check.config import ActionContext
from lint_check.models import Conclusion, DiagnosticRecord, Message, Severity
from lint_check.service import LintCheckService, RunResult


class DummyCollector:
    def __init__(self, records: Sequence[DiagnosticRecord], error: Exception | None = None):
        self.records = list(records)
        self.error = error
        self.flags: list[str] | None = None
        self.loaded: Path | None = None

    def collect(self, extra_flags: Sequence[str] = ()) -> list[DiagnosticRecord]:
        self.flags = list(extra_flags)
        if self.error is not None:
            raise self.error
        return self.records

    def load_results(self, path: Path) -> list[DiagnosticRecord]:
        self.loaded = path
        return self.records


class DummyChecksClient:
    def __init__(self, check_runs: list[Mapping[str, Any]] | None = None) -> None:
        self.check_runs = [{"id": 1}] if check_runs is None else check_runs
        self.updates: list[Mapping[str, Any]] = []

    def list_for_ref(self, owner: str, repo: str, ref: str) -> list[Mapping[str, Any]]:
        return self.check_runs

    def update(
        self, owner: str, repo: str, check_run_id: int, payload: Mapping[str, Any]
    ) -> None:
        self.updates.append(payload)


CONTEXT = ActionContext(
    workspace=Path("/ws"),
    token="ghs_test",
    owner="octo",
    repo="demo",
    ref="refs/heads/main",
    sha="abc123",
    action="lint",
)

RECORDS = [
    DiagnosticRecord(
        file_path="/ws/a.js",
        messages=(Message(text="Missing semicolon.", severity=Severity.ERROR, line=1),),
        error_count=1,
    )
]


def test_lint_check_service_runs_pipeline() -> None:
    collector = DummyCollector(RECORDS)
    client = DummyChecksClient()
    service = LintCheckService(
        CONTEXT, checks_client=client, collector_factory=lambda ctx: collector
    )

    result = service.run(extra_flags=["--prettier"])

    assert isinstance(result, RunResult)
    assert result.published is True
    assert result.error is None
    assert result.verdict.conclusion is Conclusion.FAILURE
    assert collector.flags == ["--prettier"]
    assert len(client.updates) == 1


def test_publish_failure_is_captured_on_result() -> None:
    client = DummyChecksClient(check_runs=[])
    service = LintCheckService(
        CONTEXT, checks_client=client, collector_factory=lambda ctx: DummyCollector(RECORDS)
    )

    result = service.run()

    assert result.published is False
    assert result.publish_failed is True
    assert "No check runs found" in (result.error or "")
    assert result.verdict.total_errors == 1
    assert client.updates == []


def test_collector_errors_propagate() -> None:
    client = DummyChecksClient()
    collector = DummyCollector([], error=LinterDecodeError("Linter output was not valid JSON"))
    service = LintCheckService(
        CONTEXT, checks_client=client, collector_factory=lambda ctx: collector
    )

    with pytest.raises(LinterDecodeError):
        service.run()

    assert client.updates == []


def test_saved_results_and_skipped_publish() -> None:
    collector = DummyCollector(RECORDS)
    service = LintCheckService(
        CONTEXT, checks_client=None, collector_factory=lambda ctx: collector
    )

    result = service.run(results_path=Path("/tmp/xo.json"), publish=False)

    assert collector.loaded == Path("/tmp/xo.json")
    assert collector.flags is None
    assert result.published is False
    assert result.publish_failed is False


def test_linter_name_is_forwarded_to_reporter() -> None:
    service = LintCheckService(CONTEXT, checks_client=DummyChecksClient(), linter_name="ESLint")

    assert service.reporter.linter_name == "ESLint"
