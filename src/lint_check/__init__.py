"""Report linter findings as GitHub check-run annotations."""

__version__ = "0.1.0"
