"""Tests for hook composition and the built-in hooks."""

from __future__ import annotations

import pytest

from json_type_schema.hooks import (
    FieldHook,
    apply_hooks,
    by_reference,
    property_order,
    reference,
    title,
)
from json_type_schema.node import SchemaNode


def _node(ref: str = "#/", **content: object) -> SchemaNode:
    return SchemaNode(ref=ref, content=dict(content))


class TestApplyHooks:
    def test_no_hooks_returns_same_node(self) -> None:
        node = _node(type="string")
        assert apply_hooks(node, ()) is node

    def test_applied_left_to_right(self) -> None:
        seen: list[str] = []

        def first(node: SchemaNode) -> SchemaNode:
            seen.append("first")
            node.set("type", "integer")
            return node

        def second(node: SchemaNode) -> SchemaNode:
            seen.append(f"second saw {node['type']}")
            return node

        apply_hooks(_node(type="number"), [first, second])
        assert seen == ["first", "second saw integer"]

    def test_replacement_node_is_threaded(self) -> None:
        replacement = _node(type="null")

        def swap(node: SchemaNode) -> SchemaNode:
            return replacement

        def check(node: SchemaNode) -> SchemaNode:
            assert node is replacement
            return node

        assert apply_hooks(_node(type="number"), [swap, check]) is replacement

    def test_first_failure_stops_the_fold(self) -> None:
        calls: list[str] = []

        def boom(node: SchemaNode) -> SchemaNode:
            raise RuntimeError("boom")

        def after(node: SchemaNode) -> SchemaNode:
            calls.append("after")
            return node

        with pytest.raises(RuntimeError, match="boom"):
            apply_hooks(_node(), [boom, after])
        assert calls == []


class TestBuiltins:
    def test_property_order_default_keyword(self) -> None:
        node = property_order(3)(_node())
        assert node.content == {"propertyOrder": 3}

    def test_property_order_custom_keyword(self) -> None:
        node = property_order(1, "x-order")(_node())
        assert node.content == {"x-order": 1}

    def test_reference_stamps_own_path(self) -> None:
        node = reference()(_node(ref="#/properties/name"))
        assert node["$id"] == "#/properties/name"

    def test_reference_custom_keyword(self) -> None:
        node = reference("x-ref")(_node(ref="#/items"))
        assert node.content == {"x-ref": "#/items"}

    def test_title(self) -> None:
        assert title("User")(_node())["title"] == "User"

    def test_title_overwrites(self) -> None:
        assert title("New")(_node(title="Old"))["title"] == "New"


class TestByReference:
    def test_applies_on_matching_ref(self) -> None:
        hook = by_reference("#/properties/a", title("A"))
        assert hook(_node(ref="#/properties/a"))["title"] == "A"

    def test_skips_other_refs(self) -> None:
        hook = by_reference("#/properties/a", title("A"))
        node = hook(_node(ref="#/properties/b"))
        assert "title" not in node

    def test_applies_all_scoped_hooks_in_order(self) -> None:
        hook = by_reference("#/", title("first"), title("second"), property_order(0))
        node = hook(_node())
        assert node.content == {"title": "second", "propertyOrder": 0}

    def test_no_scoped_hooks_is_identity(self) -> None:
        node = _node(type="string")
        assert by_reference("#/")(node) is node


class TestFieldHook:
    def test_stamps_index_on_own_ref(self) -> None:
        hook = FieldHook("#/properties/a", 2, "propertyOrder")
        assert hook(_node(ref="#/properties/a"))["propertyOrder"] == 2

    def test_ignores_deeper_nodes(self) -> None:
        hook = FieldHook("#/properties/a", 2, "propertyOrder")
        node = hook(_node(ref="#/properties/a/items"))
        assert "propertyOrder" not in node

    def test_without_keyword_is_identity(self) -> None:
        node = _node(ref="#/properties/a", type="number")
        assert FieldHook("#/properties/a", 0)(node).content == {"type": "number"}

    def test_carries_ref_and_index(self) -> None:
        hook = FieldHook("#/properties/a", 5)
        assert (hook.ref, hook.index) == ("#/properties/a", 5)
