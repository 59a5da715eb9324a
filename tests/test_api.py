"""Unit tests for the public API functions: extract_nodes, layout_nodes,
visualize, visualize_value, load_example."""

from __future__ import annotations

import pytest

from json_toon import (
    JsonSyntaxError,
    NodeKind,
    Scene,
    ToonConfig,
    UnsupportedRootError,
    extract_nodes,
    layout_nodes,
    load_example,
    visualize,
    visualize_value,
)
from json_toon.boundary import EXAMPLE_JSON


class TestExtractNodes:
    def test_default_cap(self) -> None:
        value = {f"k{i}": list(range(20)) for i in range(10)}
        assert len(extract_nodes(value)) == 60

    def test_custom_cap(self) -> None:
        assert len(extract_nodes(list(range(30)), max_nodes=4)) == 4

    def test_scalar_root_allowed(self) -> None:
        assert extract_nodes(None)[0].kind == NodeKind.NULL

    def test_invalid_cap_raises(self) -> None:
        with pytest.raises(ValueError):
            extract_nodes({}, max_nodes=0)


class TestLayoutNodes:
    def test_same_length(self) -> None:
        nodes = extract_nodes({"a": 1, "b": [1, 2]})
        assert len(layout_nodes(nodes)) == len(nodes)

    def test_no_global_state_between_calls(self) -> None:
        nodes = extract_nodes({"a": 1})
        assert layout_nodes(nodes) == layout_nodes(nodes)


class TestVisualize:
    def test_example_scene(self) -> None:
        scene = visualize(EXAMPLE_JSON)
        assert isinstance(scene, Scene)
        assert scene.title == "Captain JSON"
        assert scene.node_count == 19
        assert len(scene.placed) == 19
        assert len(scene.connectors) == 18
        assert scene.status == "Ready. Rendered 19 nodes."

    def test_config_passthrough(self) -> None:
        scene = visualize(EXAMPLE_JSON, ToonConfig(max_nodes=5))
        assert scene.node_count == 5

    def test_syntax_error(self) -> None:
        with pytest.raises(JsonSyntaxError):
            visualize('{"a": 1,}')

    @pytest.mark.parametrize("text", ["42", '"hi"', "null", "true"])
    def test_scalar_roots_rejected(self, text: str) -> None:
        with pytest.raises(UnsupportedRootError):
            visualize(text)

    def test_array_root_default_title(self) -> None:
        scene = visualize("[1, 2, 3]")
        assert scene.title == "Custom JSON"
        assert [str(n.kind) for n in scene.nodes] == ["array", "number", "number", "number"]

    def test_repeated_calls_identical(self) -> None:
        assert visualize(EXAMPLE_JSON) == visualize(EXAMPLE_JSON)


class TestVisualizeValue:
    def test_explicit_title(self) -> None:
        assert visualize_value({"a": 1}, title="Mine").title == "Mine"

    def test_no_root_guard(self) -> None:
        scene = visualize_value("just text")
        assert scene.node_count == 1
        assert scene.connectors == []

    def test_empty_object(self) -> None:
        scene = visualize_value({})
        assert scene.node_count == 1
        assert scene.placed[0].kind == NodeKind.OBJECT


class TestLoadExample:
    def test_title_and_count(self) -> None:
        scene = load_example()
        assert scene.title == "Example JSON"
        assert scene.node_count == 19
