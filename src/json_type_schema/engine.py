"""SchemaBuilder: the recursive type-to-schema traversal engine.

For every type hint the builder:
1. classifies it (raising ``UnsupportedTypeError`` for opaque kinds),
2. populates the node, recursing for arrays and records,
3. folds every active hook over the node,
4. returns the final node so the caller can embed its content.

Hooks supplied by the caller stay active for the whole traversal.  When
descending into a record field, one extra ``FieldHook`` bound to that field's
reference path and index is appended for that recursive call only; the
caller's hook sequence is never mutated.

Errors are never caught here.  A failure anywhere below the root aborts the
whole call chain and no partial schema is produced.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from cachetools import LRUCache

from json_type_schema.classifier import Kind, classify, element_type, unwrap
from json_type_schema.config import CollisionPolicy, GeneratorConfig
from json_type_schema.errors import FieldNameCollisionError, UnsupportedTypeError
from json_type_schema.fields import RecordField, record_fields
from json_type_schema.hooks import FieldHook, Hook, apply_hooks
from json_type_schema.node import SchemaNode

__all__ = ["SchemaBuilder"]

_PRIMITIVES = {
    Kind.NUMBER: "number",
    Kind.BOOLEAN: "boolean",
    Kind.STRING: "string",
    Kind.OBJECT: "object",
}


class SchemaBuilder:
    """Builds a SchemaNode tree from a type hint.

    Each builder memoises resolved record fields in its own ``LRUCache``, so
    a record type referenced from many places is only introspected once.
    Two builders never share state.

    Example::

        builder = SchemaBuilder()
        node = builder.build(list[int])
        node.content  # {"type": "array", "items": {"type": "number"}}
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self._config: GeneratorConfig = (
            config if config is not None else GeneratorConfig()
        )
        self._fields: LRUCache[Any, tuple[RecordField, ...]] = LRUCache(
            maxsize=self._config.max_cache_size
        )

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    def build(
        self,
        tp: Any,
        hooks: Iterable[Hook] = (),
        node: SchemaNode | None = None,
    ) -> SchemaNode:
        """Describe ``tp`` and return the final (post-hook) root node.

        Args:
            tp:    Type hint to describe.
            hooks: Hooks applied, in order, to every node of the tree.
            node:  Root node to populate.  Defaults to an empty node at
                   ``REF_ROOT``.

        Raises:
            UnsupportedTypeError: If ``tp`` or any nested type is opaque.
            FieldNameCollisionError: If record field names collide and the
                collision policy is ``ERROR``.
        """
        root = node if node is not None else SchemaNode()
        return self._build(root, tp, tuple(hooks))

    def _build(self, node: SchemaNode, tp: Any, hooks: tuple[Hook, ...]) -> SchemaNode:
        tp = unwrap(tp)
        kind = classify(tp)

        if kind is Kind.UNSUPPORTED:
            raise UnsupportedTypeError(tp)
        if kind is Kind.ARRAY:
            self._build_array(node, element_type(tp), hooks)
        elif kind is Kind.RECORD:
            self._build_record(node, tp, hooks)
        else:
            node.set("type", _PRIMITIVES[kind])

        return apply_hooks(node, hooks)

    def _build_array(
        self, parent: SchemaNode, elem: Any, hooks: tuple[Hook, ...]
    ) -> None:
        """Describe the element type under ``items`` of ``parent``."""
        child = self._build(parent.child("items"), elem, hooks)

        parent.set("type", "array")
        parent.set("items", child.content)

    def _build_record(
        self, parent: SchemaNode, tp: type, hooks: tuple[Hook, ...]
    ) -> None:
        """Describe every field of ``tp`` as a required property."""
        required: list[str] = []
        properties: dict[str, Any] = {}

        for f in self._record_fields(tp):
            if (
                f.name in properties
                and self._config.collision_policy is CollisionPolicy.ERROR
            ):
                raise FieldNameCollisionError(tp, f.name)

            required.append(f.name)
            child = parent.child("properties", f.name)
            field_hook = FieldHook(child.ref, f.index, self._config.order_keyword)
            child = self._build(child, f.type, (*hooks, field_hook))
            properties[f.name] = child.content

        parent.set("type", "object")
        parent.set("title", tp.__name__)
        parent.set("required", required)
        parent.set("properties", properties)

    def _record_fields(self, tp: type) -> tuple[RecordField, ...]:
        cached = self._fields.get(tp)
        if cached is None:
            cached = record_fields(tp, self._config.name_key)
            self._fields[tp] = cached
        return cached
