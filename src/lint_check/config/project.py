"""Inspect the project manifest to derive extra linter flags."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping

import yaml

logger = logging.getLogger(__name__)

PRETTIER_FLAG = "--prettier"
_PRETTIER_PLUGINS = {"prettier", "eslint-plugin-prettier"}
_YAML_CONFIGS = (".eslintrc.yml", ".eslintrc.yaml")


class ProjectConfigError(RuntimeError):
    """Raised when a project configuration file cannot be parsed."""


def needs_prettier(workspace: Path) -> bool:
    """Return ``True`` when the project opts into the formatting integration."""

    manifest = _load_package_json(workspace / "package.json")
    eslint_config = manifest.get("eslintConfig") or {}
    xo_config = manifest.get("xo") or {}

    if isinstance(eslint_config, Mapping) and _declares_prettier(eslint_config.get("plugins")):
        return True
    if isinstance(xo_config, Mapping) and xo_config.get("prettier"):
        return True

    for name in _YAML_CONFIGS:
        path = workspace / name
        if path.exists() and _declares_prettier(_load_yaml(path).get("plugins")):
            return True

    return False


def lint_flags(workspace: Path) -> List[str]:
    """Return the extra flags the collector should pass to the linter."""

    if needs_prettier(workspace):
        logger.debug("Formatting integration enabled by project configuration")
        return [PRETTIER_FLAG]
    return []


# ----------------------------------------------------------------------
def _declares_prettier(plugins: object) -> bool:
    if not isinstance(plugins, list):
        return False
    return any(isinstance(plugin, str) and plugin in _PRETTIER_PLUGINS for plugin in plugins)


def _load_package_json(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        logger.debug("No package.json found at %s", path)
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8-sig") or "{}")
    except json.JSONDecodeError as exc:
        raise ProjectConfigError(f"Invalid JSON in project manifest {path}") from exc

    if not isinstance(data, Mapping):
        raise ProjectConfigError(f"Project manifest must be an object: {path}")
    return data


def _load_yaml(path: Path) -> Mapping[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ProjectConfigError(f"Invalid YAML in lint configuration {path}") from exc

    if not isinstance(data, Mapping):
        raise ProjectConfigError(f"Lint configuration must be a mapping: {path}")
    return data
