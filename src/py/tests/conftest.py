from collections.abc import Generator, Sequence
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from create_template.config import CreateTemplateConfig
from create_template.prompts import Choice
from create_template.utils import get_package_path

# Environment variables that may affect test behavior - clear before each test
_CREATE_TEMPLATE_ENV_VARS = [
    "CREATE_TEMPLATE_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_create_template_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear create-template environment variables before each test for isolation."""
    for var in _CREATE_TEMPLATE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


class ScriptedPrompter:
    """Prompter that replays canned answers and records every question.

    An answer that is an exception (class or instance) is raised instead of returned.
    """

    def __init__(self, *answers: Any) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[str, str, Any]] = []

    def text(self, message: str, default: str) -> str:
        return self._answer("text", message, default)

    def select(self, message: str, choices: Sequence[Choice], default: str) -> str:
        assert default in [choice.value for choice in choices]
        return self._answer("select", message, [choice.value for choice in choices])

    def _answer(self, kind: str, message: str, detail: Any) -> Any:
        self.calls.append((kind, message, detail))
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException) or (isinstance(answer, type) and issubclass(answer, BaseException)):
            raise answer
        return answer


@pytest.fixture
def prompter_factory() -> type[ScriptedPrompter]:
    return ScriptedPrompter


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def templates_dir() -> Path:
    return get_package_path("templates")


@pytest.fixture
def config(tmp_path: Path, templates_dir: Path) -> CreateTemplateConfig:
    return CreateTemplateConfig(cwd=tmp_path, templates_dir=templates_dir, log_level="normal")


@pytest.fixture
def fake_template(tmp_path: Path) -> Path:
    """A small template tree with a nested placeholder and a binary file."""
    template = tmp_path / "templates" / "template-demo"
    (template / "src" / "nested").mkdir(parents=True)
    (template / "_gitignore").write_text("node_modules\n")
    (template / "package.json").write_text('{"name": "demo"}\n')
    (template / "src" / "main.ts").write_text("console.log('hi')\n")
    (template / "src" / "nested" / "_gitignore").write_text("*.log\n")
    (template / "src" / "nested" / "logo.bin").write_bytes(bytes(range(256)))
    return template
