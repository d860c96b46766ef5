"""Pure helpers that turn diagnostic messages into check-run annotations.

Every rule here is a small decision table kept free of I/O so it can be
exercised on its own:

* quotes become backticks and long texts are bounded by code-point count,
* severities map onto the three annotation levels,
* line ranges always satisfy ``1 <= start_line <= end_line``.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..models import Annotation, AnnotationLevel, Message, Severity

MAX_MESSAGE_LENGTH = 64
TRUNCATED_LENGTH = 60
ELLIPSIS = "..."

_QUOTE_TRANSLATION = str.maketrans({'"': "`", "'": "`"})


def normalize_message_text(text: str) -> str:
    """Replace quotes with backticks and bound the text length.

    Lengths are measured in Unicode code points, which is what ``len`` counts
    for ``str``.
    """

    normalized = text.translate(_QUOTE_TRANSLATION)
    if len(normalized) >= MAX_MESSAGE_LENGTH:
        normalized = normalized[:TRUNCATED_LENGTH] + ELLIPSIS
    return normalized


def annotation_level_for(severity: object) -> AnnotationLevel:
    if isinstance(severity, bool):
        return AnnotationLevel.NOTICE
    if severity == Severity.ERROR:
        return AnnotationLevel.FAILURE
    if severity == Severity.WARNING:
        return AnnotationLevel.WARNING
    return AnnotationLevel.NOTICE


def line_range(line: Optional[int], end_line: Optional[int]) -> Tuple[int, int]:
    """Return ``(start_line, end_line)`` with a falsy line defaulting to 1."""

    start = line or 1
    if start < 1:
        start = 1
    if not end_line or end_line < start:
        end_line = start
    return start, end_line


def relative_path(file_path: str, workspace: str | None) -> str:
    """Strip the working-directory prefix from ``file_path`` when present."""

    if not workspace:
        return file_path
    prefix = workspace.rstrip("/") + "/"
    if file_path.startswith(prefix):
        return file_path[len(prefix):]
    return file_path


def build_annotation(file_path: str, message: Message, workspace: str | None) -> Annotation:
    start_line, end_line = line_range(message.line, message.end_line)
    return Annotation(
        path=relative_path(file_path, workspace),
        start_line=start_line,
        end_line=end_line,
        annotation_level=annotation_level_for(message.severity),
        message=normalize_message_text(message.text),
        rule_id=message.rule_id,
    )
