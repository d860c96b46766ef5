"""Command-line interface implementation for the lint check reporter."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Mapping, Sequence

from ..adapters import ChecksClient, DiagnosticCollector, GitHubChecksClient, LinterError
from ..config import PRETTIER_FLAG, ActionContext, lint_flags
from ..reporter import DEFAULT_LINTER_NAME, ExitLevel, VerdictReporter, resolve_exit
from ..service import LintCheckService, RunResult
from .github_reporting import (
    error_command,
    iter_annotation_commands,
    warning_command,
    write_summary,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="lint-check", description="Report linter findings on a GitHub check run"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser(
        "run", help="Lint the workspace and publish the verdict to the current check run."
    )
    run_parser.add_argument(
        "--workspace",
        type=Path,
        default=None,
        help="Project root to lint. Defaults to GITHUB_WORKSPACE or the current directory.",
    )
    run_parser.add_argument(
        "--linter-bin",
        default=None,
        help="Linter executable. Defaults to node_modules/.bin/xo inside the workspace.",
    )
    run_parser.add_argument(
        "--linter-name",
        default=DEFAULT_LINTER_NAME,
        help="Display name of the linter used in check-run summaries.",
    )
    run_parser.add_argument(
        "--results-json",
        type=Path,
        default=None,
        help="Path to a saved `--reporter=json` report to use instead of running the linter.",
    )
    prettier_group = run_parser.add_mutually_exclusive_group()
    prettier_group.add_argument(
        "--prettier",
        dest="prettier",
        action="store_true",
        default=None,
        help="Always pass --prettier to the linter.",
    )
    prettier_group.add_argument(
        "--no-prettier",
        dest="prettier",
        action="store_false",
        help="Never pass --prettier, ignoring the project configuration.",
    )
    run_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Skip the check-run update and print annotations as workflow commands.",
    )
    run_parser.add_argument(
        "--format",
        choices=["none", "json"],
        default="none",
        help="Also print the computed verdict to stdout.",
    )

    return parser


def log_level(verbose: bool) -> int:
    """Stay quiet unless asked; a clean run prints nothing."""

    return logging.DEBUG if verbose else logging.WARNING


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=log_level(verbose),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def create_checks_client(context: ActionContext) -> GitHubChecksClient:
    """Create the GitHub Checks client for the trigger context."""

    return GitHubChecksClient(context)


def create_service(
    context: ActionContext,
    *,
    checks_client: ChecksClient | None,
    linter_bin: str | None = None,
    linter_name: str = DEFAULT_LINTER_NAME,
) -> LintCheckService:
    """Create a lint check service wired to the linter and the checks client."""

    def factory(ctx: ActionContext) -> DiagnosticCollector:
        return DiagnosticCollector(ctx.workspace, linter_bin=linter_bin)

    reporter = VerdictReporter(context, checks_client, linter_name=linter_name)
    return LintCheckService(context, collector_factory=factory, reporter=reporter)


def _resolve_flags(args: argparse.Namespace, context: ActionContext) -> list[str]:
    if args.results_json is not None:
        return []
    if args.prettier is None:
        return lint_flags(context.workspace)
    return [PRETTIER_FLAG] if args.prettier else []


def _resolve_context(
    args: argparse.Namespace, environ: Mapping[str, str] | None
) -> ActionContext:
    context = ActionContext.from_env(environ)
    if args.workspace is not None:
        context = context.with_workspace(args.workspace.resolve())
    return context


def _emit_result(args: argparse.Namespace, context: ActionContext, result: RunResult) -> None:
    if args.dry_run:
        for command in iter_annotation_commands(result.verdict.annotations):
            print(command)
    if args.format == "json":
        print(json.dumps(result.verdict.to_dict(), indent=2))
    write_summary(result.verdict, context.step_summary_path, linter_name=args.linter_name)


def _handle_run(args: argparse.Namespace, environ: Mapping[str, str] | None) -> int:
    context = _resolve_context(args, environ)
    checks_client = None if args.dry_run else create_checks_client(context)

    try:
        service = create_service(
            context,
            checks_client=checks_client,
            linter_bin=args.linter_bin,
            linter_name=args.linter_name,
        )
        try:
            result = service.run(
                extra_flags=_resolve_flags(args, context),
                results_path=args.results_json,
                publish=not args.dry_run,
            )
        except LinterError as exc:
            print(error_command(str(exc)))
            return 1
    finally:
        if checks_client is not None:
            checks_client.close()

    _emit_result(args, context, result)

    if result.publish_failed:
        print(error_command(result.error or "Publishing the check run failed"))
        return 1

    signal = resolve_exit(result.verdict)
    if signal.level is ExitLevel.FAILURE and signal.message:
        print(error_command(signal.message))
    elif signal.level is ExitLevel.WARNING and signal.message:
        print(warning_command(signal.message))
    return signal.exit_code


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    """Entry point used by tests and the console script."""

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command != "run":
        parser.print_help()
        return 0

    try:
        return _handle_run(args, environ)
    except Exception as exc:  # noqa: BLE001 - every failure must reach the runner
        logger.debug("Lint check failed", exc_info=True)
        print(error_command(str(exc) or exc.__class__.__name__))
        return 1


def run() -> None:  # pragma: no cover - thin wrapper for console script execution
    """Execute the CLI and exit with the produced status code."""

    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
