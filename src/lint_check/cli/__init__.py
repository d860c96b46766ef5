"""Command-line interface package for the lint check reporter."""

from .app import build_parser, create_checks_client, create_service, main, run

__all__ = [
    "build_parser",
    "create_checks_client",
    "create_service",
    "main",
    "run",
]
