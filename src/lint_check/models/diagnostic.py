"""Raw diagnostic models produced by the linter collector."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Tuple


class Severity(IntEnum):
    """Severity codes emitted by ESLint-style JSON reporters."""

    INFO = 0
    WARNING = 1
    ERROR = 2


@dataclass(frozen=True, slots=True)
class Message:
    """A single finding reported for a file."""

    text: str
    severity: Optional[Severity] = None
    line: Optional[int] = None
    end_line: Optional[int] = None
    rule_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DiagnosticRecord:
    """All findings the linter reported for one source file."""

    file_path: str
    messages: Tuple[Message, ...] = field(default_factory=tuple)
    warning_count: int = 0
    error_count: int = 0
