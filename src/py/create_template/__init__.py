"""create-template: scaffold a new Vite project from a bundled template.

Basic usage::

    create-template my-app --template vue-ts

Programmatic usage::

    from create_template import CreateTemplateConfig, ResolvedChoice, create_project

    create_project(ResolvedChoice(project_name="my-app", template="react-ts"), CreateTemplateConfig())
"""

from create_template.commands import create_project, run
from create_template.config import CreateTemplateConfig
from create_template.exceptions import CreateTemplateError, CreationCancelledError, UnknownTemplateError
from create_template.resolver import ResolvedChoice, resolve_choice

__all__ = (
    "CreateTemplateConfig",
    "CreateTemplateError",
    "CreationCancelledError",
    "ResolvedChoice",
    "UnknownTemplateError",
    "create_project",
    "resolve_choice",
    "run",
)
