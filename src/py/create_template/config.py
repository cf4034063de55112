"""Configuration for create-template runs."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from create_template.utils import get_package_path

__all__ = ("DEFAULT_PROJECT_NAME", "CreateTemplateConfig", "get_default_log_level")

DEFAULT_PROJECT_NAME = "project-name"

LogLevel = Literal["quiet", "normal", "verbose"]


def get_default_log_level() -> LogLevel:
    """Get default log level from environment variable.

    Checks CREATE_TEMPLATE_LOG_LEVEL environment variable.
    Falls back to "normal" if not set or invalid.

    Returns:
        The log level from environment or "normal" default.
    """
    env_level = os.getenv("CREATE_TEMPLATE_LOG_LEVEL", "").lower()
    match env_level:
        case "quiet" | "normal" | "verbose":
            return env_level
        case _:
            return "normal"


def _default_templates_dir() -> Path:
    return get_package_path("templates")


@dataclass
class CreateTemplateConfig:
    """Settings for a single scaffolding run.

    Attributes:
        cwd: Directory the project name is resolved against.
        templates_dir: Directory holding the ``template-<name>`` directories.
        default_project_name: Value offered by the project name prompt.
        log_level: Console verbosity.
            - "quiet": errors only
            - "normal": progress and next steps (default)
            - "verbose": also every created file, and tracebacks on failure
            Can also be set via CREATE_TEMPLATE_LOG_LEVEL environment variable.
            Precedence: explicit config > env var > default ("normal")
    """

    cwd: Path = field(default_factory=Path.cwd)
    templates_dir: Path = field(default_factory=_default_templates_dir)
    default_project_name: str = DEFAULT_PROJECT_NAME
    log_level: LogLevel = field(default_factory=get_default_log_level)

    def __post_init__(self) -> None:
        self.cwd = Path(self.cwd).resolve()
        self.templates_dir = Path(self.templates_dir)

    @property
    def is_quiet(self) -> bool:
        return self.log_level == "quiet"

    @property
    def is_verbose(self) -> bool:
        return self.log_level == "verbose"

    def get_template_dir(self, template: str) -> Path:
        """Get the source directory for a template identifier.

        Args:
            template: The template identifier, e.g. ``react-ts``.

        Returns:
            Path to the template directory (not checked for existence).
        """
        return self.templates_dir / f"template-{template}"

    def get_project_root(self, project_name: str) -> Path:
        """Get the destination directory for a project name.

        Args:
            project_name: The normalized project name.

        Returns:
            Absolute, normalized destination path.
        """
        return Path(os.path.normpath(self.cwd / project_name))
