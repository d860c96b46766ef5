"""Normalization helpers for raw linter output and check-run annotations."""

from .annotations import (
    ELLIPSIS,
    MAX_MESSAGE_LENGTH,
    TRUNCATED_LENGTH,
    annotation_level_for,
    build_annotation,
    line_range,
    normalize_message_text,
    relative_path,
)
from .diagnostics import DiagnosticNormalizer, coerce_count, coerce_int

__all__ = [
    "DiagnosticNormalizer",
    "ELLIPSIS",
    "MAX_MESSAGE_LENGTH",
    "TRUNCATED_LENGTH",
    "annotation_level_for",
    "build_annotation",
    "coerce_count",
    "coerce_int",
    "line_range",
    "normalize_message_text",
    "relative_path",
]
