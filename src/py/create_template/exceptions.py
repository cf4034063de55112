"""create-template exception classes."""

__all__ = [
    "CreateTemplateError",
    "CreationCancelledError",
    "UnknownTemplateError",
]


class CreateTemplateError(Exception):
    """Base exception for create-template related errors."""


class CreationCancelledError(CreateTemplateError):
    """Raised when the user cancels an interactive prompt."""

    def __init__(self, message: str = "creation cancelled") -> None:
        super().__init__(message)


class UnknownTemplateError(CreateTemplateError):
    """Raised when ``--template`` names a template that does not exist."""

    def __init__(self, template: str, available: "list[str]") -> None:
        super().__init__(f"Unknown template {template!r}. Available templates: {', '.join(available)}")
        self.template = template
        self.available = available
