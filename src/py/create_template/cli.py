import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from click import UNPROCESSED, Context, UsageError, argument, command, option, pass_context

from create_template.commands import run
from create_template.config import CreateTemplateConfig
from create_template.prompts import RichPrompter
from create_template.utils import configure_logging, logger

__all__ = ("ParsedArgs", "create_template_command", "parse_args")


def _first_positional(tokens: "str | Sequence[str] | None") -> "Optional[str]":
    """Pick the project name out of the positional tokens.

    Unknown options are passed through as tokens, so anything starting with ``-`` is skipped.
    """
    if not tokens:
        return None
    if isinstance(tokens, str):
        tokens = (tokens,)
    return next((token for token in tokens if token and not token.startswith("-")), None)


@dataclass(frozen=True)
class ParsedArgs:
    """Command line flags, unvalidated."""

    project_name: "Optional[str]" = None
    template: "Optional[str]" = None
    help: bool = False
    verbose: bool = False
    quiet: bool = False

    @classmethod
    def from_params(cls, params: "Mapping[str, Any]") -> "ParsedArgs":
        return cls(
            project_name=_first_positional(params.get("project_name")),
            template=params.get("template") or None,
            help=bool(params.get("show_help")),
            verbose=bool(params.get("verbose")),
            quiet=bool(params.get("quiet")),
        )


@command(
    name="create-template",
    add_help_option=False,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    help="Create a new Vite project in JavaScript or TypeScript.",
)
@argument("project_name", nargs=-1, type=UNPROCESSED)
@option(
    "-t",
    "--template",
    type=str,
    help="Template name. Given without a value, the template is asked for.",
    default=None,
    required=False,
    is_flag=False,
    flag_value="",
)
@option("-h", "--help", "show_help", type=bool, help="Show this message and exit.", default=False, is_flag=True)
@option("-v", "--verbose", type=bool, help="List every created file.", default=False, is_flag=True)
@option("-q", "--quiet", type=bool, help="Only print errors.", default=False, is_flag=True)
@pass_context
def create_template_command(ctx: "Context", **_: Any) -> None:
    """Scaffold a new project from one of the bundled templates."""
    args = ParsedArgs.from_params(ctx.params)
    config = CreateTemplateConfig()
    if args.verbose:
        config.log_level = "verbose"
    elif args.quiet:
        config.log_level = "quiet"
    configure_logging(config.log_level)

    exit_code = run(args, config, RichPrompter())
    if exit_code:
        sys.exit(exit_code)


def parse_args(argv: "Sequence[str]") -> ParsedArgs:
    """Turn raw command line tokens into :class:`ParsedArgs` without running anything.

    Unknown options are skipped and a ``-t`` without a value leaves the template unset;
    every value that did parse is kept.

    Args:
        argv: Tokens after the program name.

    Returns:
        The parsed flags.
    """
    try:
        ctx = create_template_command.make_context("create-template", list(argv), resilient_parsing=True)
    except UsageError as e:
        logger.debug("Ignoring malformed arguments %r: %s", list(argv), e)
        return ParsedArgs()
    return ParsedArgs.from_params(ctx.params)
