"""Shared pytest configuration, marker assignment and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

CARD_HTML = (
    '<html><body><div class="card" style="color: red; margin:8px">'
    "<p>Hi</p></div></body></html>"
)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def write_html(tmp_path: Path) -> Callable[..., Path]:
    """Write an HTML document under ``tmp_path`` and return its path."""

    def _write(content: str, name: str = "page.html") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def card_html() -> str:
    """Document whose root element carries both class and inline style."""
    return CARD_HTML
