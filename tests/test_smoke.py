"""Minimal smoke tests for the lint check package."""


def test_package_importable() -> None:
    """Ensure the top-level package exposes the expected namespace."""
    import lint_check  # noqa: F401  # Imported for side effects
    import lint_check.cli  # noqa: F401
