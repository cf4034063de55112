"""Utility helpers for create-template."""

import logging
import os
from importlib.util import find_spec
from pathlib import Path
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("create_template")


def get_package_path(*parts: str) -> Path:
    """Resolve a path inside the installed create-template package.

    Args:
        *parts: Path segments relative to the package root.

    Returns:
        The resolved package path.
    """
    spec = find_spec("create_template")
    if spec and spec.origin:
        return Path(spec.origin).parent.joinpath(*parts)
    # Fallback for uncommon import contexts.
    return Path(__file__).resolve().parent.joinpath(*parts)


def configure_logging(level: "Literal['quiet', 'normal', 'verbose']") -> None:
    """Attach a stderr handler to the package logger for the given verbosity.

    Args:
        level: The console verbosity level.
    """
    logger.setLevel(
        logging.DEBUG if level == "verbose" else logging.ERROR if level == "quiet" else logging.WARNING
    )
    if not logger.handlers:
        logger.addHandler(RichHandler(console=err_console, show_time=False, show_path=False))


def normalize_project_name(value: "str | None") -> str:
    """Trim whitespace and trailing path separators from a project name.

    Args:
        value: The raw project name, possibly ``None``.

    Returns:
        The normalized name; empty when nothing usable was given.
    """
    if not value:
        return ""
    return value.strip().rstrip(os.sep + (os.altsep or ""))
