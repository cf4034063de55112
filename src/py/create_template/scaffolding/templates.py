"""Framework template definitions for scaffolding.

This module defines the available frameworks, their variants, and lookup helpers.
Each variant maps to one ``template-<name>`` directory shipped with the package.
"""

from dataclasses import dataclass, field
from enum import Enum


class FrameworkType(str, Enum):
    """Supported frontend framework families."""

    VUE = "vue"
    REACT = "react"


@dataclass(frozen=True)
class Variant:
    """A concrete template flavor within a framework.

    Attributes:
        name: Template identifier, also the suffix of the template directory
        display: Label shown in the selection UI and the help text
        custom_command: Optional command suggested instead of the default next steps
    """

    name: str
    display: str
    custom_command: "str | None" = None


@dataclass(frozen=True)
class Framework:
    """A top-level project family and its variants.

    Attributes:
        name: Framework identifier
        type: Framework type enum
        display: Label shown in the selection UI
        variants: Template flavors offered for the framework
    """

    name: str
    type: FrameworkType
    display: str
    variants: "tuple[Variant, ...]" = field(default_factory=tuple)


FRAMEWORKS: "tuple[Framework, ...]" = (
    Framework(
        name="vue",
        type=FrameworkType.VUE,
        display="Vue",
        variants=(
            Variant(name="vue-ts", display="Vue3 + TypeScript"),
            Variant(name="vue", display="Vue3 + JavaScript"),
        ),
    ),
    Framework(
        name="react",
        type=FrameworkType.REACT,
        display="React",
        variants=(
            Variant(name="react-ts", display="React + TypeScript"),
            Variant(name="react", display="React + JavaScript"),
        ),
    ),
)


def get_available_frameworks() -> list[Framework]:
    """Get all available frameworks, in prompt order.

    Returns:
        List of Framework instances.
    """
    return list(FRAMEWORKS)


def get_template_names() -> list[str]:
    """Get every known template identifier.

    Returns:
        Variant names across all frameworks, in catalog order.
    """
    return [variant.name for framework in FRAMEWORKS for variant in framework.variants]


def get_framework(framework_type: "FrameworkType | str") -> "Framework | None":
    """Get a specific framework.

    Args:
        framework_type: The framework type (enum or string).

    Returns:
        The Framework if found, None otherwise.
    """
    try:
        framework_type = FrameworkType(framework_type)
    except ValueError:
        return None
    return next((framework for framework in FRAMEWORKS if framework.type is framework_type), None)


def get_variant(name: str) -> "Variant | None":
    """Get a variant by its template identifier.

    Args:
        name: The template identifier, e.g. ``vue-ts``.

    Returns:
        The Variant if found, None otherwise.
    """
    for framework in FRAMEWORKS:
        for variant in framework.variants:
            if variant.name == name:
                return variant
    return None


def is_known_template(name: "str | None") -> bool:
    """Check whether ``name`` is one of the known template identifiers.

    Returns:
        True when a variant with that name exists.
    """
    if not name:
        return False
    return get_variant(name) is not None
