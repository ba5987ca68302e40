"""SchemaNode: the mutable schema fragment the traversal engine builds.

Each node owns an ordered keyword -> value mapping plus the reference path
locating it in the eventual document.  Children are created with
``child()``, which derives the path by plain string concatenation; a node
never holds a reference to its parent.

Reference paths:
- Root is ``REF_ROOT`` ("#/")
- Descending into an array element appends "items"
- Descending into a record field appends "properties/{name}"
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = ["REF_ROOT", "SchemaNode"]

REF_ROOT = "#/"


@dataclass(slots=True)
class SchemaNode:
    """A schema fragment under construction.

    Attributes:
        ref:     Reference path of this node, e.g. "#/properties/Name".
        content: Keyword -> JSON value mapping.  Keywords may be overwritten
                 but are never removed.
    """

    ref: str = REF_ROOT
    content: dict[str, Any] = field(default_factory=dict)

    def set(self, keyword: str, value: Any) -> None:
        """Set (or overwrite) a schema keyword."""
        self.content[keyword] = value

    def get(self, keyword: str, default: Any = None) -> Any:
        return self.content.get(keyword, default)

    def child(self, *segments: str) -> SchemaNode:
        """Return a fresh, empty node located below this one."""
        return SchemaNode(ref="/".join([self.ref.rstrip("/"), *segments]))

    def __getitem__(self, keyword: str) -> Any:
        return self.content[keyword]

    def __contains__(self, keyword: object) -> bool:
        return keyword in self.content

    def __iter__(self) -> Iterator[str]:
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)
