"""Run configuration: trigger context and project manifest inspection."""

from .context import DEFAULT_API_URL, ActionContext, ContextError
from .project import PRETTIER_FLAG, ProjectConfigError, lint_flags, needs_prettier

__all__ = [
    "ActionContext",
    "ContextError",
    "DEFAULT_API_URL",
    "PRETTIER_FLAG",
    "ProjectConfigError",
    "lint_flags",
    "needs_prettier",
]
