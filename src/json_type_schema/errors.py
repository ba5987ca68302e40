"""Exception taxonomy for schema generation.

Every failure is terminal for the in-flight ``generate()`` call: the first
component that detects a problem raises, and the exception travels up through
every level of recursion unchanged. Exceptions raised by user hooks are not
wrapped; they reach the caller verbatim.
"""

from __future__ import annotations

from typing import Any, get_origin

__all__ = ["FieldNameCollisionError", "SchemaError", "UnsupportedTypeError"]


class SchemaError(Exception):
    """Base class for errors raised by the traversal engine itself."""


class UnsupportedTypeError(SchemaError, TypeError):
    """Raised when a type has no JSON Schema representation.

    Attributes:
        type: The offending type hint, exactly as the classifier saw it.
    """

    def __init__(self, tp: Any) -> None:
        self.type = tp
        super().__init__(f"json_type_schema: unsupported type: {_type_name(tp)}")


class FieldNameCollisionError(SchemaError, ValueError):
    """Raised when two fields of one record resolve to the same external name.

    Attributes:
        record: The record type being described.
        name:   The external name claimed by more than one field.
    """

    def __init__(self, record: Any, name: str) -> None:
        self.record = record
        self.name = name
        super().__init__(
            f"json_type_schema: fields of {_type_name(record)} collide on name {name!r}"
        )


def _type_name(tp: Any) -> str:
    # Plain classes read better by qualified name; generic aliases by repr.
    if isinstance(tp, type) and get_origin(tp) is None:
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)
