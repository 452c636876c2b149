"""Packaging metadata checks."""

from __future__ import annotations

import re
import tomllib
from pathlib import Path
from typing import Any

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _project() -> dict[str, Any]:
    with PYPROJECT.open("rb") as handle:
        return tomllib.load(handle)["project"]


def test_console_script_dependencies_are_installed_by_default() -> None:
    project = _project()
    assert project["scripts"]["html-to-react"] == "html_to_react.cli.cli:app"
    names = {
        re.split(r"[<>=!~\[; ]", requirement, maxsplit=1)[0].lower()
        for requirement in project["dependencies"]
    }
    assert {"typer", "beautifulsoup4", "pydantic"} <= names
