"""Kind StrEnum and the static classifier mapping type hints to schema shapes.

The classifier only looks at the type hint itself: no instance is ever
inspected, and nothing is cached between calls.

Dispatch order matters:
- Parameterized generics (``list[int]``, ``dict[str, X]``) are handled before
  plain classes, because ``isinstance(list[int], type)`` is True.
- bool MUST be checked before int: ``bool`` subclasses ``int``.
- complex MUST be rejected before the numeric check: numpy complex scalars
  subclass Python ``complex`` but also look numeric.
"""

from __future__ import annotations

import collections
import collections.abc as cabc
import dataclasses
import types
from enum import StrEnum, auto
from typing import (
    Annotated,
    Any,
    NewType,
    NotRequired,
    Required,
    TypeAliasType,
    Union,
    get_args,
    get_origin,
    is_typeddict,
)

import numpy as np

__all__ = [
    "Kind",
    "classify",
    "container_base",
    "element_type",
    "is_record",
    "key_type",
    "unwrap",
]

_NONE_TYPE = type(None)

_MAP_ORIGINS = frozenset(
    {
        dict,
        cabc.Mapping,
        cabc.MutableMapping,
        collections.OrderedDict,
        collections.defaultdict,
        collections.Counter,
    }
)

_ARRAY_ORIGINS = frozenset(
    {
        list,
        set,
        frozenset,
        collections.deque,
        cabc.Sequence,
        cabc.MutableSequence,
        cabc.Set,
        cabc.MutableSet,
        cabc.Collection,
    }
)


class Kind(StrEnum):
    """The closed set of structural kinds a type hint can classify as.

    StrEnum values are the lowercased member names:
    - NUMBER      -> "number"      : any integer or floating point type
    - BOOLEAN     -> "boolean"     : bool
    - STRING      -> "string"      : str
    - OBJECT      -> "object"      : free-form mapping with string keys
    - ARRAY       -> "array"       : homogeneous collection
    - RECORD      -> "record"      : dataclass, NamedTuple or TypedDict
    - UNSUPPORTED -> "unsupported" : no JSON Schema representation
    """

    NUMBER = auto()
    BOOLEAN = auto()
    STRING = auto()
    OBJECT = auto()
    ARRAY = auto()
    RECORD = auto()
    UNSUPPORTED = auto()


def unwrap(tp: Any, *, optional: bool = True, aliases: bool = True) -> Any:
    """Strip indirection wrappers and return the underlying type hint.

    Removes ``Annotated[...]`` and ``Required[...]``/``NotRequired[...]``.
    With ``aliases``, follows ``NewType`` and ``type X = ...`` aliases to the
    type they name.  With ``optional``, removes optionals with exactly one
    non-None member (``T | None``).  Other unions are returned as-is and
    later classify as unsupported.
    """
    while True:
        origin = get_origin(tp)
        if origin in (Annotated, Required, NotRequired):
            tp = get_args(tp)[0]
            continue
        if aliases and isinstance(tp, NewType):
            tp = tp.__supertype__
            continue
        if aliases and isinstance(tp, TypeAliasType):
            tp = tp.__value__
            continue
        if optional and (origin is Union or origin is types.UnionType):
            args = get_args(tp)
            members = [arg for arg in args if arg is not _NONE_TYPE]
            if len(members) == 1 and len(args) == 2:
                tp = members[0]
                continue
        return tp


def is_record(tp: Any) -> bool:
    """Return True for dataclass, NamedTuple and TypedDict classes."""
    if not isinstance(tp, type) or get_origin(tp) is not None:
        return False
    if dataclasses.is_dataclass(tp) or is_typeddict(tp):
        return True
    return issubclass(tp, tuple) and hasattr(tp, "_fields")


def container_base(tp: Any) -> Any:
    """Return the parameterized mapping or collection base of a class, or None.

    ``class Headers(dict[str, str])`` yields ``dict[str, str]``; the first
    match in MRO order wins.
    """
    if not isinstance(tp, type) or get_origin(tp) is not None:
        return None
    for klass in tp.__mro__:
        for base in klass.__dict__.get("__orig_bases__", ()):
            origin = get_origin(base)
            if origin in _MAP_ORIGINS or origin in _ARRAY_ORIGINS or origin is tuple:
                return base
    return None


def key_type(tp: Any) -> Any:
    """Return the key type of a mapping hint, or None when it has none.

    Optional keys are left wrapped: a nullable key is not a string key.
    """
    base = container_base(tp)
    if base is not None:
        return key_type(base)
    args = get_args(tp)
    if not args:
        return None
    return unwrap(args[0], optional=False)


def element_type(tp: Any) -> Any:
    """Return the element type of an array-like hint, or None.

    None means the hint is not array-like or its element type cannot be
    determined (bare containers, heterogeneous tuples, empty tuples).
    """
    if isinstance(tp, type) and get_origin(tp) is None:
        if issubclass(tp, (bytes, bytearray)):
            return int
        base = container_base(tp)
        return element_type(base) if base is not None else None

    origin = get_origin(tp)
    args = get_args(tp)
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        if args and all(arg == args[0] for arg in args):
            return args[0]
        return None
    if origin is np.ndarray:
        if len(args) != 2:
            return None
        dtype_args = get_args(args[1])
        return dtype_args[0] if dtype_args else None
    if origin in _ARRAY_ORIGINS and len(args) == 1:
        return args[0]
    return None


def classify(tp: Any) -> Kind:
    """Classify a type hint into its structural Kind.

    Args:
        tp: Any type hint.  Indirection wrappers and aliases are stripped
            first.

    Returns:
        The Kind describing which schema shape ``tp`` produces.
    """
    tp = unwrap(tp)

    if tp is Any or tp is object:
        return Kind.UNSUPPORTED

    origin = get_origin(tp)
    if origin is not None:
        if origin in _MAP_ORIGINS:
            key = key_type(tp)
            if isinstance(key, type) and issubclass(key, str):
                return Kind.OBJECT
            return Kind.UNSUPPORTED
        if element_type(tp) is not None:
            return Kind.ARRAY
        return Kind.UNSUPPORTED

    if not isinstance(tp, type):
        return Kind.UNSUPPORTED
    if issubclass(tp, (bool, np.bool_)):
        return Kind.BOOLEAN
    if issubclass(tp, (complex, np.complexfloating)):
        return Kind.UNSUPPORTED
    if issubclass(tp, (int, float, np.integer, np.floating)):
        return Kind.NUMBER
    if issubclass(tp, str):
        return Kind.STRING
    if is_record(tp):
        return Kind.RECORD
    base = container_base(tp)
    if base is not None:
        return classify(base)
    if element_type(tp) is not None:
        return Kind.ARRAY
    return Kind.UNSUPPORTED
