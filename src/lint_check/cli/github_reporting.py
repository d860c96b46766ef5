"""Helpers for publishing lint verdicts to GitHub Actions surfaces."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

from ..models import Annotation, AnnotationLevel, Verdict

# Workflow commands only know notice/warning/error.
WORKFLOW_LEVELS = {
    AnnotationLevel.NOTICE: "notice",
    AnnotationLevel.WARNING: "warning",
    AnnotationLevel.FAILURE: "error",
}
SUMMARY_DISPLAY_LIMIT = 10


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(
    command: str, message: str, properties: Mapping[str, object] | None = None
) -> str:
    """Render a ``::command key=value::message`` workflow command."""

    attribute_segment = ""
    if properties:
        attributes = [
            f"{key}={_escape_property(str(value))}"
            for key, value in properties.items()
            if value is not None
        ]
        if attributes:
            attribute_segment = " " + ",".join(attributes)
    return f"::{command}{attribute_segment}::{_escape_data(message)}"


def error_command(message: str) -> str:
    return format_command("error", message)


def warning_command(message: str) -> str:
    return format_command("warning", message)


def iter_annotation_commands(annotations: Iterable[Annotation]) -> Iterable[str]:
    """Generate workflow command annotations for offline (dry-run) reporting."""

    for annotation in annotations:
        properties: dict[str, object] = {
            "file": annotation.path,
            "line": annotation.start_line,
        }
        if annotation.end_line != annotation.start_line:
            properties["endLine"] = annotation.end_line
        if annotation.rule_id:
            properties["title"] = annotation.rule_id

        yield format_command(
            WORKFLOW_LEVELS[annotation.annotation_level], annotation.message, properties
        )


def format_summary(verdict: Verdict, *, linter_name: str) -> str:
    """Render a Markdown job summary for the provided verdict."""

    lines: list[str] = [
        f"# {linter_name} Lint Report",
        "",
        f"**Conclusion:** {verdict.conclusion.value.title()}",
        "",
        "| Kind | Count |",
        "| --- | ---: |",
        f"| Errors | {verdict.total_errors} |",
        f"| Warnings | {verdict.total_warnings} |",
    ]

    if not verdict.annotations:
        lines.extend(["", f":tada: {linter_name} found no lint in your code."])
    else:
        lines.extend(["", "## Annotations", ""])
        for annotation in verdict.annotations[:SUMMARY_DISPLAY_LIMIT]:
            bullet = f"- **{annotation.annotation_level.value.title()}**"
            bullet += f" `{annotation.path}:{annotation.start_line}`"
            if annotation.rule_id:
                bullet += f" `{annotation.rule_id}`"
            bullet += f" - {annotation.message}"
            lines.append(bullet)

        remaining = len(verdict.annotations) - SUMMARY_DISPLAY_LIMIT
        if remaining > 0:
            lines.append(f"- ...and {remaining} more annotations.")

    lines.append("")
    return "\n".join(lines)


def write_summary(verdict: Verdict, destination: Path | None, *, linter_name: str) -> None:
    if destination is None:
        return

    content = format_summary(verdict, linter_name=linter_name)
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("a", encoding="utf-8") as handle:
        handle.write(content)
