"""JSON type schema - JSON Schema documents generated from Python type hints."""

from __future__ import annotations

from json_type_schema.api import dumps, generate, schema_of, type_of
from json_type_schema.classifier import Kind, classify
from json_type_schema.config import CollisionPolicy, GeneratorConfig
from json_type_schema.engine import SchemaBuilder
from json_type_schema.errors import (
    FieldNameCollisionError,
    SchemaError,
    UnsupportedTypeError,
)
from json_type_schema.fields import FieldName, schema_field
from json_type_schema.hooks import Hook
from json_type_schema.node import REF_ROOT, SchemaNode
from json_type_schema.protocols import JSONSchemaProvider

__version__: str = "0.1.0"
__all__: list[str] = [
    "REF_ROOT",
    "CollisionPolicy",
    "FieldName",
    "FieldNameCollisionError",
    "GeneratorConfig",
    "Hook",
    "JSONSchemaProvider",
    "Kind",
    "SchemaBuilder",
    "SchemaError",
    "SchemaNode",
    "UnsupportedTypeError",
    "classify",
    "dumps",
    "generate",
    "schema_field",
    "schema_of",
    "type_of",
]
