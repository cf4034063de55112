"""Console presentation helpers: framework colors and the help text."""

from rich.text import Text

from create_template.scaffolding.templates import FrameworkType, get_available_frameworks

FRAMEWORK_STYLES: dict[FrameworkType, str] = {
    FrameworkType.VUE: "green",
    FrameworkType.REACT: "cyan",
}

HELP_HEADER = """\
Usage: create-template [OPTIONS] [PROJECT_NAME]

Create a new Vite project in JavaScript or TypeScript.
With no arguments, start the CLI in interactive mode.

Options:
  -t, --template <template>  Template name
  -v, --verbose              List every created file
  -q, --quiet                Only print errors
  -h, --help                 Show this message and exit

Available templates:
"""


def get_style(framework_type: FrameworkType) -> str:
    """Get the display style for a framework, empty when it has none.

    Returns:
        A rich style string.
    """
    return FRAMEWORK_STYLES.get(framework_type, "")


def build_help_text() -> Text:
    """Build the usage text, listing every template identifier with its label.

    Returns:
        The help text with template names colored per framework.
    """
    text = Text(HELP_HEADER)
    for framework in get_available_frameworks():
        style = get_style(framework.type)
        for variant in framework.variants:
            text.append(variant.name, style=style)
            text.append(f" - {variant.display}\n")
    return text
