"""Record field resolution: declaration order plus external names.

Supported records are dataclasses, ``typing.NamedTuple`` classes and
``TypedDict`` classes.  Annotations are resolved with
``typing.get_type_hints(include_extras=True)`` so string annotations
(``from __future__ import annotations``) and ``Annotated`` metadata both work.

External name precedence, highest first:
1. An explicit name: ``schema_field(name=...)`` (dataclass field metadata)
   or an ``Annotated[T, FieldName("...")]`` marker.
2. The field type's ``__name__`` for fields marked ``schema_field(embedded=True)``.
3. The declared attribute name.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import (
    Annotated,
    Any,
    NotRequired,
    Required,
    get_args,
    get_origin,
    get_type_hints,
)

from json_type_schema.classifier import unwrap

__all__ = ["EMBEDDED_KEY", "FieldName", "RecordField", "record_fields", "schema_field"]

EMBEDDED_KEY = "json_type_schema.embedded"


@dataclass(frozen=True, slots=True)
class FieldName:
    """``Annotated`` marker carrying an explicit external field name.

    Example::

        class Row(TypedDict):
            name: Annotated[str, FieldName("full_name")]
    """

    name: str


@dataclass(frozen=True, slots=True)
class RecordField:
    """One resolved record field.

    Attributes:
        name:     External name used in ``required`` and ``properties``.
        attr:     Declared attribute name.
        type:     Resolved type hint (wrappers intact).
        index:    Position in declaration order.
        embedded: True when the field was marked as embedded.
    """

    name: str
    attr: str
    type: Any
    index: int
    embedded: bool = False


def schema_field(
    *,
    name: str | None = None,
    embedded: bool = False,
    name_key: str = "json",
    metadata: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> Any:
    """``dataclasses.field`` wrapper recording schema naming metadata.

    ``name_key`` must match ``GeneratorConfig.name_key`` when a custom key
    is configured.  Remaining keyword arguments go to ``dataclasses.field``.
    """
    merged = dict(metadata or {})
    if name is not None:
        merged[name_key] = name
    if embedded:
        merged[EMBEDDED_KEY] = True
    return dataclasses.field(metadata=merged, **kwargs)


def record_fields(tp: type, name_key: str = "json") -> tuple[RecordField, ...]:
    """Return the fields of record type ``tp`` in declaration order."""
    hints = get_type_hints(tp, include_extras=True)

    declared: list[tuple[str, Any, Mapping[str, Any]]]
    if dataclasses.is_dataclass(tp):
        declared = [
            (f.name, hints.get(f.name, f.type), f.metadata)
            for f in dataclasses.fields(tp)
        ]
    elif issubclass(tp, tuple):
        names: tuple[str, ...] = tp._fields  # type: ignore[attr-defined]
        declared = [(attr, hints.get(attr, Any), {}) for attr in names]
    else:
        declared = [(attr, hint, {}) for attr, hint in hints.items()]

    resolved = []
    for index, (attr, hint, metadata) in enumerate(declared):
        embedded = bool(metadata.get(EMBEDDED_KEY, False))
        name = attr
        if embedded:
            name = getattr(unwrap(hint, aliases=False), "__name__", attr)
        explicit = metadata.get(name_key)
        if explicit is None:
            explicit = _annotated_name(hint)
        if explicit is not None:
            name = explicit
        resolved.append(
            RecordField(name=name, attr=attr, type=hint, index=index, embedded=embedded)
        )
    return tuple(resolved)


def _annotated_name(hint: Any) -> str | None:
    while get_origin(hint) in (Required, NotRequired):
        hint = get_args(hint)[0]
    if get_origin(hint) is not Annotated:
        return None
    for marker in hint.__metadata__:
        if isinstance(marker, FieldName):
            return marker.name
    return None
