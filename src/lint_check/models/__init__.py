"""Data models for linter diagnostics and the verdicts derived from them."""

from .diagnostic import DiagnosticRecord, Message, Severity
from .verdict import Annotation, AnnotationLevel, Conclusion, Verdict

__all__ = [
    "Annotation",
    "AnnotationLevel",
    "Conclusion",
    "DiagnosticRecord",
    "Message",
    "Severity",
    "Verdict",
]
