"""NodeBuilder and NodeState snapshots."""

import pytest

from indexdef.tree.node import NodeBuilder, NodeState, PropertyState
from indexdef.tree.types import PropertyType


def test_child_returns_same_builder_for_same_name():
    root = NodeBuilder()
    assert root.child("a") is root.child("a")
    assert root.child_node_names == ["a"]


def test_property_types_are_inferred():
    node = NodeBuilder()
    node.set_property("flag", True)
    node.set_property("count", 2)
    node.set_property("label", "x")
    node.set_property("paths", ["/a", "/b"])

    assert node.get_property("flag").type is PropertyType.BOOLEAN
    assert node.get_property("count").type is PropertyType.LONG
    assert node.get_property("label").type is PropertyType.STRING
    paths = node.get_property("paths")
    assert paths.type is PropertyType.STRINGS
    assert paths.value == ("/a", "/b")


def test_unsupported_value_raises_type_error():
    with pytest.raises(TypeError):
        NodeBuilder().set_property("bad", 1.5)


def test_set_properties_replaces_previous_values():
    node = NodeBuilder()
    node.set_properties("paths", ["/a", "/b"])
    node.set_properties("paths", ["/c"])
    assert node.get_property("paths").value == ("/c",)


def test_snapshot_is_independent_of_later_mutation():
    root = NodeBuilder()
    root.child("a").set_property("x", "1")
    first = root.get_node_state()

    root.child("a").set_property("x", "2")
    root.child("b")
    second = root.get_node_state()

    assert first.get_child_node("a").get_value("x") == "1"
    assert not first.has_child_node("b")
    assert second.get_child_node("a").get_value("x") == "2"
    assert second.has_child_node("b")


def test_snapshot_mappings_are_read_only():
    root = NodeBuilder()
    root.set_property("x", "1")
    state = root.get_node_state()
    with pytest.raises(TypeError):
        state.properties["y"] = PropertyState.create("y", "2")
    with pytest.raises(TypeError):
        state.children["c"] = NodeState()


def test_missing_lookups():
    state = NodeBuilder().get_node_state()
    assert state.get_property("x") is None
    assert state.get_value("x", "fallback") == "fallback"
    assert state.get_child_node("c") is None
    assert state.child_node_names == []


def test_to_dict_renders_names_and_arrays():
    root = NodeBuilder()
    root.set_property("jcr:primaryType", "nt:unstructured", PropertyType.NAME)
    root.set_properties("includedPaths", ["/content"])
    root.child("rules").set_property("enabled", True)

    assert root.get_node_state().to_dict() == {
        "jcr:primaryType": "nam:nt:unstructured",
        "includedPaths": ["/content"],
        "rules": {"enabled": True},
    }
