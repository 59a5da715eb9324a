"""Integration tests for the json-toon pytest plugin.

These tests verify that the assert_toon_scene fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-toon to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from json_toon import Scene, ToonConfig


def test_fixture_accepts_text(assert_toon_scene: Any) -> None:
    scene = assert_toon_scene('{"name": "Ava"}')
    assert isinstance(scene, Scene)
    assert scene.title == "Ava"


def test_fixture_accepts_parsed_values(assert_toon_scene: Any) -> None:
    assert_toon_scene([1, 2], kinds=["array", "number", "number"])


def test_fixture_fails_on_kind_mismatch(assert_toon_scene: Any) -> None:
    with pytest.raises(AssertionError, match=r"Scene kinds differ"):
        assert_toon_scene({"a": 1}, kinds=["object", "string"])


def test_fixture_custom_config(assert_toon_scene: Any) -> None:
    scene = assert_toon_scene(list(range(30)), config=ToonConfig(max_nodes=4))
    assert scene.node_count == 4


def test_fixture_propagates_boundary_errors(assert_toon_scene: Any) -> None:
    with pytest.raises(ValueError):
        assert_toon_scene("42")


def test_plugin_discovery() -> None:
    """Verify assert_toon_scene appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_toon_scene" in result.stdout, (
        f"assert_toon_scene not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
