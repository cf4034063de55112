"""Resolve the project name and template from flags and interactive prompts.

Resolution runs in three stages: project name, framework, then variant. A stage
is skipped when the command line already answers it, so a fully specified
invocation never prompts.

Prompts are line based: the project name is taken when the line is submitted,
not updated on every keystroke.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from create_template.display import build_help_text, get_style
from create_template.exceptions import CreationCancelledError, UnknownTemplateError
from create_template.prompts import Choice
from create_template.scaffolding.templates import (
    Framework,
    get_available_frameworks,
    get_framework,
    get_template_names,
    is_known_template,
)
from create_template.utils import console, logger, normalize_project_name

if TYPE_CHECKING:
    from create_template.cli import ParsedArgs
    from create_template.config import CreateTemplateConfig
    from create_template.prompts import Prompter

__all__ = ("ResolvedChoice", "resolve_choice")

T = TypeVar("T")


@dataclass(frozen=True)
class ResolvedChoice:
    """The project name and template identifier that drive materialization."""

    project_name: str
    template: str


def _ask(question: Callable[[], T]) -> T:
    try:
        return question()
    except (KeyboardInterrupt, EOFError) as e:
        raise CreationCancelledError from e


def _preset_project_name(args: "ParsedArgs") -> "str | None":
    return normalize_project_name(args.project_name) or None


def _preset_template(args: "ParsedArgs") -> "str | None":
    """Return the ``--template`` value when it names a known template.

    Raises:
        UnknownTemplateError: If a template was given but is not known.
    """
    if not args.template:
        return None
    if not is_known_template(args.template):
        raise UnknownTemplateError(args.template, get_template_names())
    return args.template


def _prompt_project_name(prompter: "Prompter", config: "CreateTemplateConfig") -> str:
    answer = _ask(lambda: prompter.text("Project name", default=config.default_project_name))
    return normalize_project_name(answer) or config.default_project_name


def _prompt_framework(prompter: "Prompter") -> Framework:
    frameworks = get_available_frameworks()
    choices = [Choice(value=f.name, label=f.display, style=get_style(f.type)) for f in frameworks]
    answer = _ask(lambda: prompter.select("Select a framework:", choices, default=frameworks[0].name))
    framework = get_framework(answer)
    if framework is None:  # pragma: no cover
        msg = f"Prompt returned an unknown framework: {answer!r}"
        raise ValueError(msg)
    return framework


def _prompt_variant(prompter: "Prompter", framework: Framework) -> str:
    """Ask for a variant of ``framework``.

    Returns:
        The variant name, or the framework name when it has no variants.
    """
    if not framework.variants:
        return framework.name
    style = get_style(framework.type)
    choices = [Choice(value=v.name, label=v.display, style=style) for v in framework.variants]
    return _ask(lambda: prompter.select("Select a variant:", choices, default=framework.variants[0].name))


def resolve_choice(
    args: "ParsedArgs",
    prompter: "Prompter",
    config: "CreateTemplateConfig",
) -> "ResolvedChoice | None":
    """Decide the project name and template, prompting only for what is missing.

    Args:
        args: The parsed command line.
        prompter: Source of interactive answers.
        config: The run configuration.

    Raises:
        CreationCancelledError: If the user cancels a prompt.
        UnknownTemplateError: If ``--template`` names an unknown template.

    Returns:
        The resolved choice, or None when help was requested and printed.
    """
    if args.help:
        console.print(build_help_text())
        return None

    template = _preset_template(args)
    project_name = _preset_project_name(args)
    logger.debug("Preset project name: %r, preset template: %r", project_name, template)

    if project_name is None:
        project_name = _prompt_project_name(prompter, config)
    if template is None:
        framework = _prompt_framework(prompter)
        template = _prompt_variant(prompter, framework)

    return ResolvedChoice(project_name=project_name, template=template)
