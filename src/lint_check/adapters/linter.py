"""Run the linter and collect its JSON report as diagnostic records."""

from __future__ import annotations

import json
import logging
import os
import subprocess
from pathlib import Path
from typing import Any, List, Sequence

from ..models import DiagnosticRecord
from ..normalization import DiagnosticNormalizer

logger = logging.getLogger(__name__)

DEFAULT_LINTER = "xo"
JSON_REPORTER_FLAG = "--reporter=json"


class LinterError(RuntimeError):
    """Base class for failures while collecting linter diagnostics."""


class LinterExecutionError(LinterError):
    """Raised when the linter executable cannot be started."""


class LinterDecodeError(LinterError):
    """Raised when the linter output is not a JSON array of results."""


class DiagnosticCollector:
    """Invoke the linter in the workspace and parse its JSON output.

    A non-zero exit status is expected whenever the linter reports errors, so
    only undecodable output is treated as a failure.
    """

    def __init__(
        self,
        workspace: str | os.PathLike[str],
        *,
        linter_bin: str | os.PathLike[str] | None = None,
        normalizer: DiagnosticNormalizer | None = None,
    ) -> None:
        self.workspace = Path(workspace)
        if linter_bin is None:
            self.linter_bin = str(self.workspace / "node_modules" / ".bin" / DEFAULT_LINTER)
        else:
            self.linter_bin = str(linter_bin)
        self._normalizer = normalizer or DiagnosticNormalizer()

    def collect(self, extra_flags: Sequence[str] = ()) -> List[DiagnosticRecord]:
        """Run the linter and return one record per reported file."""

        command = self.build_command(extra_flags)
        logger.info("Running linter: %s", " ".join(command))
        output = self._run_command(command)
        return self._normalizer.normalize(self._parse_output(output))

    def load_results(self, path: str | os.PathLike[str]) -> List[DiagnosticRecord]:
        """Parse a previously saved JSON report instead of running the linter."""

        report_path = Path(path)
        try:
            output = report_path.read_text(encoding="utf-8-sig")
        except OSError as exc:
            raise LinterExecutionError(f"Failed to read linter report {report_path}") from exc
        return self._normalizer.normalize(self._parse_output(output))

    def build_command(self, extra_flags: Sequence[str] = ()) -> List[str]:
        return [self.linter_bin, JSON_REPORTER_FLAG, *[flag for flag in extra_flags if flag]]

    # ------------------------------------------------------------------
    def _parse_output(self, output: str) -> List[Any]:
        if not output.strip():
            return []

        try:
            data = json.loads(output)
        except json.JSONDecodeError as exc:
            raise LinterDecodeError(f"Linter output was not valid JSON: {exc.msg}") from exc

        if not isinstance(data, list):
            raise LinterDecodeError("Linter output must be a JSON array of file results")
        return data

    def _run_command(self, args: List[str]) -> str:
        try:
            completed = subprocess.run(  # noqa: S603 - linter path comes from trusted config
                args,
                cwd=self.workspace,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except FileNotFoundError as exc:
            raise LinterExecutionError(f"Executable not found: {args[0]}") from exc

        logger.debug("Linter exited with code %s", completed.returncode)
        return completed.stdout or ""
