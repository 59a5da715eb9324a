"""pytest plugin for json-toon.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_toon import Scene, ToonConfig, visualize, visualize_value


@pytest.fixture(scope="session")
def assert_toon_scene() -> Any:
    """Fixture that returns a callable scene asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to visualize() which builds fresh extractor and layout objects).

    Usage in tests::

        def test_payload_renders(assert_toon_scene):
            scene = assert_toon_scene('{"user": {"name": "Ava"}}')
            assert scene.title == "Custom JSON"

        def test_shape(assert_toon_scene):
            assert_toon_scene([1, 2], kinds=["array", "number", "number"])

    Returns:
        A callable ``_assert(value, kinds=None, config=None) -> Scene`` that
        raises ``AssertionError`` when the scene exceeds the node cap, is not
        reproducible, or does not match the expected kind sequence.
    """

    def _assert(
        value: Any,
        kinds: list[str] | None = None,
        config: ToonConfig | None = None,
    ) -> Scene:
        """Build the scene for ``value`` twice and check it.

        Args:
            value:  Raw JSON text (str) or an already-parsed value.  Text goes
                    through parsing and the root-type guard.
            kinds:  Optional expected node kind sequence, e.g.
                    ``["object", "string"]``.
            config: Optional ToonConfig; defaults to ``ToonConfig()``.

        Raises:
            AssertionError: With the node count, cap, and kind sequence.
        """
        config = config if config is not None else ToonConfig()
        build = visualize if isinstance(value, str) else visualize_value
        first = build(value, config=config)
        second = build(value, config=config)
        actual_kinds = [str(node.kind) for node in first.nodes]

        if first.node_count > config.max_nodes:
            raise AssertionError(
                f"Scene exceeds node cap: nodes={first.node_count} > "
                f"max_nodes={config.max_nodes}"
            )
        if first != second:
            raise AssertionError(
                f"Scene is not reproducible across builds: nodes={first.node_count}"
            )
        if kinds is not None and actual_kinds != list(kinds):
            raise AssertionError(
                f"Scene kinds differ:\n"
                f"  actual:   {actual_kinds}\n"
                f"  expected: {list(kinds)}"
            )
        return first

    return _assert
