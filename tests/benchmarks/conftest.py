"""Deterministic record-type generators for performance benchmarks.

All generators build fixed, reproducible dataclass types with
``dataclasses.make_dataclass``.  Three tiers: 10-field flat, 100-field
nested, and a 50-level deep chain.
"""

from __future__ import annotations

from dataclasses import make_dataclass
from typing import Any

import pytest

_LEAF_TYPES: tuple[Any, ...] = (int, str, float, bool, list[int], dict[str, str])


def generate_flat_record(num_fields: int, prefix: str = "Flat") -> type:
    """Build a dataclass with ``num_fields`` primitive/collection fields."""
    fields = [
        (f"field_{i}", _LEAF_TYPES[i % len(_LEAF_TYPES)]) for i in range(num_fields)
    ]
    return make_dataclass(f"{prefix}{num_fields}", fields)


def generate_nested_record(sections: int, leaves: int) -> type:
    """Build a record of ``sections`` sub-records, each with ``leaves`` fields.

    Every section is its own type; the outer record also holds a list of
    the first section so array traversal is included.
    """
    section_types = [
        generate_flat_record(leaves, prefix=f"Section{i}_") for i in range(sections)
    ]
    fields: list[tuple[str, Any]] = [
        (f"section_{i}", tp) for i, tp in enumerate(section_types)
    ]
    fields.append(("history", list[section_types[0]]))  # type: ignore[valid-type]
    return make_dataclass("Nested", fields)


def generate_deep_chain(depth: int) -> type:
    """Build ``depth`` records, each holding the previous one as a field."""
    current: type = make_dataclass("Level0", [("value", int)])
    for level in range(1, depth):
        current = make_dataclass(
            f"Level{level}", [("value", int), ("child", current)]
        )
    return current


@pytest.fixture
def record_10_flat() -> type:
    return generate_flat_record(10)


@pytest.fixture
def record_100_nested() -> type:
    """10 sections x 10 leaf fields = 100 leaves."""
    return generate_nested_record(10, 10)


@pytest.fixture
def record_50_deep() -> type:
    return generate_deep_chain(50)
