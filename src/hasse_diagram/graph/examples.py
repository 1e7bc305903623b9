"""
Bundled example posets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from hasse_diagram.graph.builders import format_poset, poset_from_pairs
from hasse_diagram.graph.ir import Element, Poset, Relation


@dataclass(frozen=True)
class ExamplePoset:
    name: str
    elements: Tuple[Element, ...]
    relations: Tuple[Relation, ...]

    def to_poset(self) -> Poset:
        return poset_from_pairs(self.elements, self.relations)


EXAMPLE_POSETS: Tuple[ExamplePoset, ...] = (
    ExamplePoset(
        name="Simple Poset",
        elements=("a", "b", "c", "d", "e"),
        relations=(("a", "b"), ("a", "c"), ("b", "d"), ("c", "d"), ("c", "e")),
    ),
    ExamplePoset(
        name="Power Set of {a,b}",
        elements=("∅", "{a}", "{b}", "{a,b}"),
        relations=(("∅", "{a}"), ("∅", "{b}"), ("{a}", "{a,b}"), ("{b}", "{a,b}")),
    ),
    ExamplePoset(
        name="Divisibility Poset",
        elements=("1", "2", "3", "4", "6", "12"),
        relations=(
            ("1", "2"),
            ("1", "3"),
            ("2", "4"),
            ("2", "6"),
            ("3", "6"),
            ("4", "12"),
            ("6", "12"),
        ),
    ),
)


def load_example(index: int) -> Tuple[str, str]:
    """
    Element and relation text for the example at `index` (0-based).

    Elements containing a comma, such as "{a,b}", do not survive
    `parse_input`; use `ExamplePoset.to_poset` for those.
    """
    if not 0 <= index < len(EXAMPLE_POSETS):
        raise IndexError(
            f"Example index {index} out of range; {len(EXAMPLE_POSETS)} examples available."
        )
    return format_poset(EXAMPLE_POSETS[index].to_poset())
