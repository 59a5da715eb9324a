"""Packaging correctness verification for json-toon.

Tests validate:
- Base install imports the public API
- py.typed marker is present in the wheel
- Pytest plugin and console script entry points are registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import shutil
import subprocess
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    """Verify the base install exposes the public API."""

    def test_import_json_toon(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import json_toon

        assert hasattr(json_toon, "visualize")
        assert hasattr(json_toon, "extract_nodes")
        assert hasattr(json_toon, "layout_nodes")
        assert hasattr(json_toon, "render_svg")

    def test_visualize_basic(self):  # type: ignore[no-untyped-def]
        from json_toon import visualize

        assert visualize("{}").node_count == 1


@pytest.mark.packaging
class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        if shutil.which("poetry") is None:
            pytest.skip("poetry is not installed")
        dist_dir = PROJECT_ROOT / "dist"
        # Use poetry build since that's the project's build system
        result = subprocess.run(
            ["poetry", "build", "-f", "wheel"],
            cwd=str(PROJECT_ROOT),
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """py.typed marker must be included in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            py_typed_files = [n for n in names if n.endswith("py.typed")]
            assert py_typed_files, f"py.typed not found in wheel. Contents: {names}"

    def test_no_pycache_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """__pycache__ directories must not be in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """All source modules must be present in the wheel."""
        expected_modules = [
            "json_toon/__init__.py",
            "json_toon/api.py",
            "json_toon/boundary.py",
            "json_toon/cli.py",
            "json_toon/config.py",
            "json_toon/errors.py",
            "json_toon/result.py",
            "json_toon/tree/__init__.py",
            "json_toon/tree/extractor.py",
            "json_toon/tree/nodes.py",
            "json_toon/layout/__init__.py",
            "json_toon/layout/hashing.py",
            "json_toon/layout/palette.py",
            "json_toon/layout/scene.py",
            "json_toon/render/__init__.py",
            "json_toon/render/svg.py",
            "json_toon/integrations/__init__.py",
            "json_toon/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), (
                    f"Module {module} not found in wheel"
                )

    def test_metadata_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """Wheel metadata must include correct package info."""
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if "METADATA" in n]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "json-toon" in metadata.lower() or "json_toon" in metadata.lower()
            assert "0.1.0" in metadata


class TestEntryPoints:
    """Verify the installed entry points."""

    def test_pytest_plugin_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for json-toon."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")
        toon_eps = [ep for ep in pytest11_eps if "json_toon" in str(ep.value)]
        assert toon_eps, (
            f"No pytest11 entry point found for json-toon. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_console_script_registered(self):  # type: ignore[no-untyped-def]
        from importlib.metadata import entry_points

        scripts = {ep.name: ep.value for ep in entry_points(group="console_scripts")}
        assert scripts.get("json-toon") == "json_toon.cli:main"


class TestPackageMetadata:
    """Verify package metadata completeness."""

    def test_version(self):  # type: ignore[no-untyped-def]
        import json_toon

        assert json_toon.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import json_toon

        expected = {
            "Connector",
            "JsonSyntaxError",
            "Node",
            "NodeKind",
            "PlacedNode",
            "Scene",
            "ToonConfig",
            "ToonError",
            "UnsupportedRootError",
            "extract_nodes",
            "format_json",
            "layout_nodes",
            "load_example",
            "render_svg",
            "visualize",
            "visualize_value",
        }
        actual = set(json_toon.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
