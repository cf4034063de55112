"""Project scaffolding module for create-template.

Supported templates:
- Vue 3 (TypeScript or JavaScript)
- React (TypeScript or JavaScript)
"""

from create_template.scaffolding.generator import generate_project
from create_template.scaffolding.templates import (
    Framework,
    FrameworkType,
    Variant,
    get_available_frameworks,
    get_template_names,
)

__all__ = [
    "Framework",
    "FrameworkType",
    "Variant",
    "generate_project",
    "get_available_frameworks",
    "get_template_names",
]
