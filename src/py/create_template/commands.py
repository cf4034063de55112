"""Top-level run function for create-template.

This module wires the resolver and the scaffolding generator together and is
the only place where errors are caught and turned into an exit code.
"""

import os
from typing import TYPE_CHECKING

from rich.markup import escape

from create_template.exceptions import CreateTemplateError
from create_template.resolver import resolve_choice
from create_template.scaffolding import generate_project
from create_template.scaffolding.templates import get_variant
from create_template.utils import console, err_console, logger

if TYPE_CHECKING:
    from pathlib import Path

    from create_template.cli import ParsedArgs
    from create_template.config import CreateTemplateConfig
    from create_template.prompts import Prompter
    from create_template.resolver import ResolvedChoice


def get_next_steps(choice: "ResolvedChoice", root: "Path", cwd: "Path") -> list[str]:
    """Get the commands suggested after scaffolding.

    Args:
        choice: The resolved project name and template.
        root: The project directory.
        cwd: The current working directory.

    Returns:
        Commands to show, ``cd`` first when the project is not the current directory.
    """
    steps: list[str] = []
    if root != cwd:
        cd_target = os.path.relpath(root, cwd)
        steps.append(f'cd "{cd_target}"' if " " in cd_target else f"cd {cd_target}")
    variant = get_variant(choice.template)
    if variant is not None and variant.custom_command:
        steps.append(variant.custom_command)
    else:
        steps.extend(["npm install", "npm run dev"])
    return steps


def create_project(choice: "ResolvedChoice", config: "CreateTemplateConfig") -> "list[Path]":
    """Copy the chosen template into the project directory and print the next steps.

    Args:
        choice: The resolved project name and template.
        config: The run configuration.

    Returns:
        List of generated file paths.
    """
    root = config.get_project_root(choice.project_name)
    template_dir = config.get_template_dir(choice.template)

    if not config.is_quiet:
        console.print(f"\nScaffolding project in {escape(str(root))}...", soft_wrap=True)
    generated = generate_project(template_dir, root)

    if config.is_verbose:
        for path in generated:
            console.print(f"[green]Created {escape(str(path))}[/]", soft_wrap=True)
    if not config.is_quiet:
        console.print("\nDone. Now run:\n")
        for step in get_next_steps(choice, root, config.cwd):
            console.print(f"  {step}", markup=False)
        console.print()
    return generated


def run(args: "ParsedArgs", config: "CreateTemplateConfig", prompter: "Prompter") -> int:
    """Resolve the choice, scaffold the project, and report failures.

    Args:
        args: The parsed command line.
        config: The run configuration.
        prompter: Source of interactive answers.

    Returns:
        The process exit code: 0 on success or help, 1 on failure.
    """
    try:
        choice = resolve_choice(args, prompter, config)
        if choice is None:
            return 0
        create_project(choice, config)
    except (CreateTemplateError, OSError) as e:
        if config.is_verbose:
            logger.exception("Creation failed")
        err_console.print(f"[bold red]✗ Creation failed: {escape(str(e))}[/]", highlight=False, soft_wrap=True)
        return 1
    return 0
