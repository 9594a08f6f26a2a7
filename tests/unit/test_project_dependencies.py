"""Sanity checks for project metadata."""

from __future__ import annotations

from pathlib import Path
import tomllib


def _load_pyproject() -> dict:
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    return tomllib.loads(pyproject.read_text(encoding="utf-8"))


def _load_project_dependencies() -> list[str]:
    data = _load_pyproject()
    return list(data["project"]["dependencies"])


def test_core_dependencies_are_declared() -> None:
    deps = _load_project_dependencies()
    for name in ("pydantic", "structlog", "typer", "rich"):
        assert any(dep.startswith(name) for dep in deps)


def test_qt_is_not_a_global_dependency() -> None:
    deps = _load_project_dependencies()
    assert not any(dep.lower().startswith("pyside6") for dep in deps)


def test_gui_extra_contains_qt() -> None:
    extras = _load_pyproject()["project"]["optional-dependencies"]["gui"]
    assert any(dep.startswith("PySide6") for dep in extras)


def test_markers_match_conftest_summary() -> None:
    markers = _load_pyproject()["tool"]["pytest"]["ini_options"]["markers"]
    names = {marker.split(":", 1)[0] for marker in markers}
    assert names == {"unit_table", "unit_common", "unit_gui", "unit_ui"}
