"""
Check whether a poset contains the elements and declared relations of another.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from hasse_diagram.graph.examples import EXAMPLE_POSETS, ExamplePoset
from hasse_diagram.graph.ir import Poset


@dataclass(frozen=True)
class SupersetResult:
    name: str
    is_superset: bool


def is_superset(poset: Poset, other: Poset) -> bool:
    """
    True when every element of `other` is in `poset` and every declared
    relation of `other` is declared in `poset`.

    Relations are compared as declared, not through their closures.
    """
    elements = set(poset.elements)
    relations = set(poset.relations)
    return all(e in elements for e in other.elements) and all(
        r in relations for r in other.relations
    )


def superset_report(
    poset: Poset, examples: Iterable[ExamplePoset] = EXAMPLE_POSETS
) -> List[SupersetResult]:
    return [
        SupersetResult(name=f"Example {idx}", is_superset=is_superset(poset, ex.to_poset()))
        for idx, ex in enumerate(examples, start=1)
    ]


def format_superset_report(results: Iterable[SupersetResult]) -> str:
    return "\n".join(f"{r.name}: {'Yes' if r.is_superset else 'No'}" for r in results)
