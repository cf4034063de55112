"""Project scaffolding generator.

This module handles copying a template directory into a new project directory.
Files are copied byte for byte; the only transformation is the file rename map.
"""

import shutil
from pathlib import Path

from create_template.utils import logger

RENAME_FILES: dict[str, str] = {
    # npm drops .gitignore when publishing, so templates ship it under another name.
    "_gitignore": ".gitignore",
}


def get_output_name(name: str) -> str:
    """Get the destination name for a template entry.

    Args:
        name: The entry name inside the template directory.

    Returns:
        The renamed entry name, or ``name`` when no rename applies.
    """
    return RENAME_FILES.get(name, name)


def copy(src: Path, dest: Path) -> list[Path]:
    """Copy a file or a directory tree.

    Args:
        src: Source file or directory.
        dest: Destination path.

    Returns:
        List of written file paths.
    """
    if src.is_dir():
        return copy_dir(src, dest)
    shutil.copyfile(src, dest)
    logger.debug("Copied %s -> %s", src, dest)
    return [dest]


def copy_dir(src_dir: Path, dest_dir: Path) -> list[Path]:
    """Mirror ``src_dir`` into ``dest_dir``, applying the rename map to every entry.

    Args:
        src_dir: Source directory.
        dest_dir: Destination directory, created with its parents if missing.

    Returns:
        List of written file paths.
    """
    entries = sorted(src_dir.iterdir())
    dest_dir.mkdir(parents=True, exist_ok=True)

    generated_files: list[Path] = []
    for entry in entries:
        generated_files.extend(copy(entry, dest_dir / get_output_name(entry.name)))
    return generated_files


def generate_project(template_dir: Path, output_dir: Path) -> list[Path]:
    """Generate project files from a template directory.

    Args:
        template_dir: Directory containing the template files.
        output_dir: Directory to generate files in.

    Raises:
        FileNotFoundError: If the template directory does not exist.
        NotADirectoryError: If the template path is not a directory.

    Returns:
        List of generated file paths.
    """
    if not template_dir.exists():
        msg = f"Template directory not found: {template_dir}"
        raise FileNotFoundError(msg)
    if not template_dir.is_dir():
        msg = f"Template path is not a directory: {template_dir}"
        raise NotADirectoryError(msg)

    logger.debug("Generating project from %s into %s", template_dir, output_dir)
    return copy_dir(template_dir, output_dir)
