"""
Pytest fixtures for modulus tests.

Template stores are built under tmp_path:
    <tmp>/store/<template_id>/<template_id>.meta.toml
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from modulus.app.prompts import PromptOutcome, PromptResult

# =============================================================================
# Fake Selector
# =============================================================================


class FakeSelector:
    """Scripted Selector: answers come from constructor arguments."""

    def __init__(
        self,
        template: PromptResult,
        destination: PromptResult = ".",
        variables: dict[str, PromptResult] | None = None,
    ) -> None:
        self.template = template
        self.destination = destination
        self.variables = variables or {}
        self.calls: list[tuple[str, object]] = []

    def choose_template(self, names: list[str]) -> PromptResult:
        self.calls.append(("template", list(names)))
        return self.template

    def ask_destination(self, default: str = ".") -> PromptResult:
        self.calls.append(("destination", default))
        return self.destination

    def ask_variable(self, variable: str, prompt: str) -> PromptResult:
        self.calls.append(("variable", (variable, prompt)))
        return self.variables.get(variable, PromptOutcome.CANCELLED)


@pytest.fixture
def make_selector() -> Callable[..., FakeSelector]:
    """FakeSelector factory."""
    return FakeSelector


# =============================================================================
# Template Store Fixtures
# =============================================================================


@pytest.fixture
def store_root(tmp_path: Path) -> Path:
    """Empty template store."""
    root = tmp_path / "store"
    root.mkdir()
    return root


@pytest.fixture
def make_template(store_root: Path) -> Callable[..., Path]:
    """
    Create a template directory in the store.

    Usage:
        make_template("t1", meta='name = "t1"', files={"a.txt": "hi"})
    """

    def _make(
        template_id: str,
        meta: str | None,
        files: dict[str, str | bytes] | None = None,
    ) -> Path:
        template_dir = store_root / template_id
        template_dir.mkdir(parents=True)

        if meta is not None:
            (template_dir / f"{template_id}.meta.toml").write_text(meta, encoding="utf-8")

        for rel_path, content in (files or {}).items():
            path = template_dir / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")

        return template_dir

    return _make


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    """Output directory (not created)."""
    return tmp_path / "out"
