"""Normalized annotations and the aggregate verdict of a lint run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class AnnotationLevel(str, Enum):
    """Annotation levels accepted by the GitHub Checks API."""

    NOTICE = "notice"
    WARNING = "warning"
    FAILURE = "failure"


class Conclusion(str, Enum):
    """Terminal conclusions a check run can be moved to."""

    SUCCESS = "success"
    NEUTRAL = "neutral"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class Annotation:
    """A finding pinned to a line range, ready to attach to a check run."""

    path: str
    start_line: int
    end_line: int
    annotation_level: AnnotationLevel
    message: str
    rule_id: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "path": self.path,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "annotation_level": self.annotation_level.value,
            "message": self.message,
        }
        if self.rule_id is not None:
            payload["raw_details"] = self.rule_id
        return payload


@dataclass(frozen=True, slots=True)
class Verdict:
    """Totals, conclusion and annotations computed from one lint run."""

    total_warnings: int = 0
    total_errors: int = 0
    conclusion: Conclusion = Conclusion.SUCCESS
    summary_lines: Tuple[str, ...] = field(default_factory=tuple)
    annotations: Tuple[Annotation, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": {
                "total_warnings": self.total_warnings,
                "total_errors": self.total_errors,
                "conclusion": self.conclusion.value,
                "lines": list(self.summary_lines),
            },
            "annotations": [annotation.to_payload() for annotation in self.annotations],
        }
