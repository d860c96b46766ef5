"""Tests for GitHub Actions reporting helpers."""

from __future__ import annotations

from pathlib import Path

from lint_check.cli.github_reporting import (
    error_command,
    format_command,
    format_summary,
    iter_annotation_commands,
    warning_command,
    write_summary,
)
from lint_check.models import Annotation, AnnotationLevel, Conclusion, Verdict


def _build_verdict() -> Verdict:
    return Verdict(
        total_warnings=1,
        total_errors=1,
        conclusion=Conclusion.FAILURE,
        summary_lines=(":warning: Found 1 warnings.", ":x: Found 1 errors."),
        annotations=(
            Annotation(
                path="src/a.js",
                start_line=3,
                end_line=3,
                annotation_level=AnnotationLevel.FAILURE,
                message="Missing semicolon.",
                rule_id="semi",
            ),
            Annotation(
                path="src/b.js",
                start_line=5,
                end_line=8,
                annotation_level=AnnotationLevel.WARNING,
                message="Unexpected console statement.",
            ),
        ),
    )


def test_format_summary_includes_key_sections() -> None:
    """Rendered summaries should include the conclusion, counts and annotations."""

    summary = format_summary(_build_verdict(), linter_name="XO")

    assert "# XO Lint Report" in summary
    assert "**Conclusion:** Failure" in summary
    assert "| Errors | 1 |" in summary
    assert "| Warnings | 1 |" in summary
    assert "- **Failure** `src/a.js:3` `semi` - Missing semicolon." in summary


def test_format_summary_for_clean_run() -> None:
    summary = format_summary(Verdict(), linter_name="XO")

    assert ":tada: XO found no lint in your code." in summary
    assert "## Annotations" not in summary


def test_iter_annotation_commands_maps_levels() -> None:
    """Workflow commands should map annotation levels to the runner's levels."""

    commands = list(iter_annotation_commands(_build_verdict().annotations))

    assert commands[0] == "::error file=src/a.js,line=3,title=semi::Missing semicolon."
    assert commands[1] == "::warning file=src/b.js,line=5,endLine=8::Unexpected console statement."


def test_format_command_escapes_values() -> None:
    assert format_command("notice", "50%\ndone", {"title": "a,b:c"}) == (
        "::notice title=a%2Cb%3Ac::50%25%0Adone"
    )
    assert error_command(":x: Lint errors found!") == "::error:::x: Lint errors found!"
    assert warning_command("careful") == "::warning::careful"


def test_write_summary_appends(tmp_path: Path) -> None:
    destination = tmp_path / "nested" / "summary.md"
    destination.parent.mkdir()
    destination.write_text("previous\n", encoding="utf-8")

    write_summary(_build_verdict(), destination, linter_name="XO")

    content = destination.read_text(encoding="utf-8")
    assert content.startswith("previous\n# XO Lint Report")


def test_write_summary_without_destination_is_noop() -> None:
    write_summary(_build_verdict(), None, linter_name="XO")
