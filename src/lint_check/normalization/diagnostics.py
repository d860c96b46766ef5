"""Conversion helpers that turn raw ESLint-style JSON into diagnostic models."""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List, Mapping, Optional

from ..models import DiagnosticRecord, Message, Severity

logger = logging.getLogger(__name__)


def coerce_int(value: object | None) -> int | None:
    """Return ``value`` as an integer, or ``None`` when it is not numeric."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        try:
            return int(stripped)
        except ValueError:
            return None
    return None


def coerce_count(value: object | None) -> int:
    """Coerce a warning/error counter; non-numeric values count as zero."""

    coerced = coerce_int(value)
    if coerced is None or coerced < 0:
        return 0
    return coerced


class DiagnosticNormalizer:
    """Normalize the linter's JSON report into :class:`DiagnosticRecord` instances."""

    def normalize(self, results: Iterable[Any]) -> List[DiagnosticRecord]:
        """Return one record per well-formed entry, preserving linter order."""

        records: List[DiagnosticRecord] = []
        for index, entry in enumerate(results):
            if not isinstance(entry, Mapping):
                logger.warning("Skipping malformed diagnostic entry at index %d", index)
                continue
            file_path = entry.get("filePath")
            if not isinstance(file_path, str) or not file_path:
                logger.warning("Skipping diagnostic entry without filePath at index %d", index)
                continue
            records.append(self._normalize_entry(entry))
        return records

    # ------------------------------------------------------------------
    def _normalize_entry(self, entry: Mapping[str, Any]) -> DiagnosticRecord:
        raw_messages = entry.get("messages") or []
        if not isinstance(raw_messages, list):
            raw_messages = []

        messages = tuple(
            self._normalize_message(message)
            for message in raw_messages
            if isinstance(message, Mapping)
        )

        return DiagnosticRecord(
            file_path=entry["filePath"],
            messages=messages,
            warning_count=coerce_count(entry.get("warningCount")),
            error_count=coerce_count(entry.get("errorCount")),
        )

    def _normalize_message(self, message: Mapping[str, Any]) -> Message:
        rule_id = message.get("ruleId")
        return Message(
            text=str(message.get("message") or ""),
            severity=self._normalize_severity(message.get("severity")),
            line=coerce_int(message.get("line")),
            end_line=coerce_int(message.get("endLine")),
            rule_id=str(rule_id) if rule_id is not None else None,
        )

    def _normalize_severity(self, value: object) -> Optional[Severity]:
        # JSON numbers may arrive as integral floats such as 2.0.
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        try:
            return Severity(value)
        except ValueError:
            return None
