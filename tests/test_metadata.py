"""Package metadata and PEP 561 marker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

from sac import __init__conf__

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    """Load and parse pyproject.toml from the project root."""
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    pyproject = _load_pyproject()
    tool_table = cast(dict[str, Any], pyproject.get("tool", {}))
    hatch_table = cast(dict[str, Any], tool_table.get("hatch", {}))
    build_table = cast(dict[str, Any], hatch_table.get("build", {}))
    targets_table = cast(dict[str, Any], build_table.get("targets", {}))
    return cast(dict[str, Any], targets_table.get("wheel", {}))


def _get_package_dir() -> Path:
    """Locate the package directory based on pyproject.toml configuration."""
    for package_entry in cast(list[Any], _wheel_table().get("packages", [])):
        if isinstance(package_entry, str):
            candidate = PROJECT_ROOT / package_entry
            if candidate.is_dir():
                return candidate
    raise AssertionError("Unable to locate package directory")


@pytest.mark.os_agnostic
def test_when_print_info_runs_it_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    from sac import print_info

    print_info()

    captured = capsys.readouterr().out
    assert captured.startswith("Info for sac:")
    assert f"version       = {__init__conf__.version}" in captured


@pytest.mark.os_agnostic
def test_metadata_matches_pyproject() -> None:
    project = cast(dict[str, Any], _load_pyproject()["project"])

    assert __init__conf__.name == project["name"]
    assert __init__conf__.version == project["version"]
    assert __init__conf__.shell_command in project["scripts"]


@pytest.mark.os_agnostic
def test_py_typed_marker_exists() -> None:
    """Verify PEP 561 py.typed marker exists in the package source."""
    py_typed = _get_package_dir() / "py.typed"
    assert py_typed.is_file(), f"PEP 561 marker not found at {py_typed}"


@pytest.mark.os_agnostic
def test_wheel_includes_typing_marker_and_default_settings() -> None:
    includes = cast(list[str], _wheel_table().get("include", []))

    assert any("py.typed" in entry for entry in includes)
    assert any("defaultconfig.toml" in entry for entry in includes)
