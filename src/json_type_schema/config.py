"""GeneratorConfig and CollisionPolicy for schema generation.

GeneratorConfig is a frozen (immutable) dataclass holding the knobs that
shape traversal and encoding.  CollisionPolicy selects what happens when two
record fields resolve to the same external name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class CollisionPolicy(StrEnum):
    """How to treat record fields that resolve to the same external name.

    - ERROR:     Raise ``FieldNameCollisionError`` (default).
    - OVERWRITE: The later field replaces the earlier one in ``properties``
                 while both names stay in ``required``.
    """

    ERROR = auto()
    OVERWRITE = auto()


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Immutable configuration for schema generation.

    Attributes:
        name_key: Key looked up in ``dataclasses.field`` metadata for an
            explicit external field name.  Default ``"json"``.
        order_keyword: When set, every record field's node gets its
            declaration index stamped under this keyword (for example
            ``"propertyOrder"``).  Default None (no stamping).
        collision_policy: What to do when field names collide.
        indent: Indentation passed to the JSON encoder.  None emits a
            compact single-line document.
        sort_keys: Sort keywords in the encoded output.  Default False.
        max_cache_size: Maximum number of record types whose resolved
            fields a single builder memoises.
    """

    name_key: str = "json"
    order_keyword: str | None = None
    collision_policy: CollisionPolicy = CollisionPolicy.ERROR
    indent: int | None = None
    sort_keys: bool = False
    max_cache_size: int = 128

    def __post_init__(self) -> None:
        if not self.name_key:
            msg = "name_key must be a non-empty string"
            raise ValueError(msg)
        if self.order_keyword is not None and not self.order_keyword:
            msg = "order_keyword must be None or a non-empty string"
            raise ValueError(msg)
        if self.indent is not None and self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if self.max_cache_size < 1:
            msg = f"max_cache_size must be >= 1, got {self.max_cache_size}"
            raise ValueError(msg)
