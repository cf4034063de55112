import os
from pathlib import Path

import pytest

from create_template.config import DEFAULT_PROJECT_NAME, CreateTemplateConfig, get_default_log_level
from create_template.utils import get_package_path, normalize_project_name


def test_default_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    config = CreateTemplateConfig()

    assert config.cwd == tmp_path.resolve()
    assert config.templates_dir == get_package_path("templates")
    assert config.default_project_name == DEFAULT_PROJECT_NAME == "project-name"
    assert config.log_level == "normal"


@pytest.mark.parametrize(("value", "expected"), [("quiet", "quiet"), ("VERBOSE", "verbose"), ("loud", "normal")])
def test_log_level_from_env(value: str, expected: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CREATE_TEMPLATE_LOG_LEVEL", value)
    assert get_default_log_level() == expected
    assert CreateTemplateConfig().log_level == expected


def test_explicit_log_level_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CREATE_TEMPLATE_LOG_LEVEL", "quiet")
    config = CreateTemplateConfig(log_level="verbose")
    assert config.is_verbose
    assert not config.is_quiet


def test_get_template_dir(tmp_path: Path) -> None:
    config = CreateTemplateConfig(templates_dir=tmp_path)
    assert config.get_template_dir("vue-ts") == tmp_path / "template-vue-ts"


def test_get_project_root(tmp_path: Path) -> None:
    config = CreateTemplateConfig(cwd=tmp_path)
    cwd = tmp_path.resolve()

    assert config.get_project_root("demo") == cwd / "demo"
    assert config.get_project_root(".") == cwd
    assert config.get_project_root("a/../b") == cwd / "b"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, ""), ("", ""), ("demo", "demo"), ("  demo  ", "demo"), ("demo/", "demo"), ("demo///", "demo"), (".", ".")],
)
def test_normalize_project_name(raw: "str | None", expected: str) -> None:
    assert normalize_project_name(raw) == expected


@pytest.mark.skipif(os.name == "nt", reason="backslash is a separator on Windows")
def test_normalize_project_name_keeps_backslash_on_posix() -> None:
    assert normalize_project_name("demo\\") == "demo\\"
    assert normalize_project_name("demo\\/") == "demo\\"
