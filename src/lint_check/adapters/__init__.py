"""Adapter layer for the external linter process and the GitHub Checks API."""

from .checks_api import ChecksClient, GitHubChecksClient
from .linter import (
    DEFAULT_LINTER,
    JSON_REPORTER_FLAG,
    DiagnosticCollector,
    LinterDecodeError,
    LinterError,
    LinterExecutionError,
)

__all__ = [
    "ChecksClient",
    "DEFAULT_LINTER",
    "DiagnosticCollector",
    "GitHubChecksClient",
    "JSON_REPORTER_FLAG",
    "LinterDecodeError",
    "LinterError",
    "LinterExecutionError",
]
