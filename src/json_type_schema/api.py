"""Public API functions for json-type-schema.

This module provides the three user-facing functions: generate, dumps and
schema_of.  Each call creates a fresh SchemaBuilder to guarantee zero global
state mutation between calls, so independent values can be described from
several threads at once.

The document is built completely before anything is encoded: on failure
nothing is written to the sink.
"""

from __future__ import annotations

import io
import json
import logging
from typing import IO, Any, get_origin

import numpy as np
import numpy.typing as npt

from json_type_schema.config import GeneratorConfig
from json_type_schema.engine import SchemaBuilder
from json_type_schema.hooks import Hook
from json_type_schema.protocols import as_provider

__all__ = ["dumps", "generate", "schema_of", "type_of"]

logger = logging.getLogger(__name__)


def type_of(value: Any) -> Any:
    """Return the type hint describing ``value``.

    Type hints (classes, parameterized generics, ``Any``) describe
    themselves.  numpy arrays are described by their dtype.  Any other value
    is described by ``type(value)``.
    """
    if isinstance(value, type) or get_origin(value) is not None or value is Any:
        return value
    if isinstance(value, np.ndarray):
        return npt.NDArray[value.dtype.type]
    return type(value)


def schema_of(
    value: Any,
    *hooks: Hook,
    config: GeneratorConfig | None = None,
) -> dict[str, Any]:
    """Return the JSON Schema for ``value`` as a dict.

    Args:
        value:  A type hint, or an instance whose type is described.
        hooks:  Transformation hooks applied to every node, in order.
        config: Generation options.  Defaults to ``GeneratorConfig()``.

    Returns:
        The root node's keyword mapping.  Self-describing values are parsed
        back from the document they write.

    Raises:
        UnsupportedTypeError: If any reachable type has no representation.
        FieldNameCollisionError: If record field names collide under
            ``CollisionPolicy.ERROR``.
    """
    if as_provider(value) is not None:
        return json.loads(dumps(value, *hooks, config=config))
    return SchemaBuilder(config).build(type_of(value), hooks).content


def generate(
    sink: IO[str],
    value: Any,
    *hooks: Hook,
    config: GeneratorConfig | None = None,
) -> None:
    """Write the JSON Schema for ``value`` to ``sink``.

    Writes a single JSON document followed by a newline.  When ``value``
    implements ``JSONSchemaProvider`` it is asked to write its own document
    and receives ``hooks`` unapplied.

    Args:
        sink:   Text stream to write to.
        value:  A type hint, or an instance whose type is described.
        hooks:  Transformation hooks applied to every node, in order.
        config: Generation options.  Defaults to ``GeneratorConfig()``.
    """
    provider = as_provider(value)
    if provider is not None:
        logger.debug("delegating schema generation to %r", provider)
        provider.json_schema(sink, *hooks)
        return

    config = config if config is not None else GeneratorConfig()
    document = SchemaBuilder(config).build(type_of(value), hooks).content
    sink.write(json.dumps(document, indent=config.indent, sort_keys=config.sort_keys))
    sink.write("\n")


def dumps(
    value: Any,
    *hooks: Hook,
    config: GeneratorConfig | None = None,
) -> str:
    """Return the document ``generate()`` would write, as a string."""
    sink = io.StringIO()
    generate(sink, value, *hooks, config=config)
    return sink.getvalue()
