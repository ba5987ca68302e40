"""Transformation hooks applied to every node after its base shape is set.

A hook is any callable ``(node) -> node``.  It may mutate the node it is
given and return it, or return a different node altogether.  A hook signals
failure by raising; the exception aborts the whole generation and reaches the
caller unchanged.

Hooks compose left-to-right: each receives the node returned by the previous
one.  The helpers below are ordinary hooks built from closures and need no
support from the engine.

Example::

    from json_type_schema import dumps
    from json_type_schema.hooks import by_reference, title

    dumps(User, by_reference("#/properties/name", title("Display name")))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TypeAlias

from json_type_schema.node import SchemaNode

__all__ = [
    "FieldHook",
    "Hook",
    "apply_hooks",
    "by_reference",
    "property_order",
    "reference",
    "title",
]

Hook: TypeAlias = Callable[[SchemaNode], SchemaNode]


def apply_hooks(node: SchemaNode, hooks: Iterable[Hook]) -> SchemaNode:
    """Fold ``hooks`` over ``node`` in order and return the final node."""
    for hook in hooks:
        node = hook(node)
    return node


def by_reference(ref: str, *hooks: Hook) -> Hook:
    """Scope ``hooks`` to the single node whose reference path is ``ref``.

    Every other node passes through untouched.
    """

    def _hook(node: SchemaNode) -> SchemaNode:
        if node.ref != ref:
            return node
        return apply_hooks(node, hooks)

    return _hook


def property_order(index: int, keyword: str = "propertyOrder") -> Hook:
    """Stamp a field's declaration index under ``keyword``."""

    def _hook(node: SchemaNode) -> SchemaNode:
        node.set(keyword, index)
        return node

    return _hook


def reference(keyword: str = "$id") -> Hook:
    """Stamp each node's own reference path under ``keyword``."""

    def _hook(node: SchemaNode) -> SchemaNode:
        node.set(keyword, node.ref)
        return node

    return _hook


def title(text: str) -> Hook:
    """Set a custom ``title``.  Usually combined with ``by_reference``."""

    def _hook(node: SchemaNode) -> SchemaNode:
        node.set("title", text)
        return node

    return _hook


@dataclass(frozen=True, slots=True)
class FieldHook:
    """Per-field hook the record component appends for one recursive call.

    Bound to the field node's reference path and its declaration index, so it
    only ever touches that field's own node even though it rides along into
    deeper recursion.

    Attributes:
        ref:           Reference path of the field node.
        index:         Declaration index of the field within its record.
        order_keyword: Keyword to stamp ``index`` under, or None to leave the
                       node unchanged.
    """

    ref: str
    index: int
    order_keyword: str | None = None

    def __call__(self, node: SchemaNode) -> SchemaNode:
        if self.order_keyword is None or node.ref != self.ref:
            return node
        return property_order(self.index, self.order_keyword)(node)
