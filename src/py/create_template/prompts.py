"""Interactive prompts used while resolving the project name and template."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

from create_template.utils import console as default_console

__all__ = ("Choice", "Prompter", "RichPrompter")


@dataclass(frozen=True)
class Choice:
    """One entry of a single-select prompt."""

    value: str
    label: str
    style: str = ""


class Prompter(Protocol):
    """Source of interactive answers.

    Implementations raise ``KeyboardInterrupt`` or ``EOFError`` when the user cancels.
    """

    def text(self, message: str, default: str) -> str: ...

    def select(self, message: str, choices: Sequence[Choice], default: str) -> str: ...


class RichPrompter:
    """Prompt on the terminal with ``rich.prompt``."""

    def __init__(self, console: "Console | None" = None) -> None:
        self.console = console or default_console

    def text(self, message: str, default: str) -> str:
        return Prompt.ask(message, default=default, console=self.console)

    def select(self, message: str, choices: Sequence[Choice], default: str) -> str:
        """Show the labelled choices and ask for one of their values.

        Returns:
            The selected choice value.
        """
        self.console.print(message)
        for choice in choices:
            line = Text("  ")
            line.append(choice.value, style=choice.style)
            line.append(f" - {choice.label}")
            self.console.print(line)
        return Prompt.ask(
            "Select",
            choices=[choice.value for choice in choices],
            default=default,
            console=self.console,
        )
