"""JSONSchemaProvider Protocol: the self-describing escape hatch.

Any value whose type implements ``json_schema(sink, *hooks)`` describes
itself.  ``generate()`` hands the sink and the caller's hooks straight to it
and never runs the traversal engine.  No inheritance is required.

Example::

    class Opaque:
        def json_schema(self, sink, *hooks):
            sink.write('{"type": "string"}\\n')

    assert isinstance(Opaque(), JSONSchemaProvider)  # True
"""

from __future__ import annotations

import inspect
from typing import IO, TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_type_schema.hooks import Hook

__all__ = ["JSONSchemaProvider", "as_provider"]


@runtime_checkable
class JSONSchemaProvider(Protocol):
    """Structural protocol for values that produce their own schema.

    ``json_schema`` must write exactly one JSON document to ``sink`` or
    raise.  The hooks are the ones the caller passed to ``generate()``.
    """

    def json_schema(self, sink: IO[str], *hooks: Hook) -> None: ...


def as_provider(value: Any) -> JSONSchemaProvider | None:
    """Return ``value`` if it can describe itself, else None.

    Classes only qualify through a classmethod: an instance method looked
    up on the class is unbound and cannot be called without an instance.
    """
    if not isinstance(value, JSONSchemaProvider):
        return None
    if isinstance(value, type) and not inspect.ismethod(value.json_schema):
        return None
    return value
