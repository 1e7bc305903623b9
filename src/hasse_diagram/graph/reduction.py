"""
Transitive reduction (covering relations) and level assignment.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from hasse_diagram.errors import CyclicPosetError
from hasse_diagram.graph.closure import compute_transitive_closure
from hasse_diagram.graph.ir import (
    ClosureSet,
    Diagram,
    Edge,
    Element,
    Node,
    Poset,
    Relation,
    topological_order,
)
from hasse_diagram.utils.logging import logger


def covering_relations(poset: Poset, closure: Optional[ClosureSet] = None) -> List[Relation]:
    """
    Keep each declared relation (a, b) unless some third element c sits
    between them in the closure.

    Only declared pairs are examined; repeated declarations collapse to the
    first one.
    """
    if closure is None:
        closure = compute_transitive_closure(poset)

    covering: List[Relation] = []
    seen = set()
    for a, b in poset.relations:
        if (a, b) in seen:
            continue
        seen.add((a, b))
        redundant = any(
            c != a and c != b and (a, c) in closure and (c, b) in closure
            for c in poset.elements
        )
        if not redundant:
            covering.append((a, b))
    return covering


def assign_levels(elements: Sequence[Element], edges: Sequence[Relation]) -> Dict[Element, int]:
    """
    level(e) = 0 without an incoming edge, else 1 + max level of its sources.

    Levels are filled in topological order, so each one is computed exactly
    once and read back from the memo by its successors.

    Raises:
        CyclicPosetError: if `edges` contain a cycle (self-loops included).
    """
    unique = list(dict.fromkeys(elements))
    preds: Dict[Element, List[Element]] = {e: [] for e in unique}
    for a, b in edges:
        preds[b].append(a)

    levels: Dict[Element, int] = {}
    for element in topological_order(unique, list(edges)):
        levels[element] = max((levels[p] + 1 for p in preds[element]), default=0)
    return levels


def compute_hasse_diagram(poset: Poset) -> Diagram:
    """
    Reduce a poset to its Hasse diagram.

    Returns:
        One `Node` per element (element order, with its level) and one `Edge`
        per covering relation.

    Raises:
        CyclicPosetError: if the declared relations contain a cycle.
    """
    closure = compute_transitive_closure(poset)
    on_cycle = [e for e in dict.fromkeys(poset.elements) if (e, e) in closure]
    if on_cycle:
        raise CyclicPosetError(on_cycle)
    covering = covering_relations(poset, closure)
    levels = assign_levels(poset.elements, covering)

    diagram = Diagram(
        nodes=[Node(id=e, level=levels[e]) for e in poset.elements],
        edges=[Edge(source=a, target=b) for a, b in covering],
    )
    logger.debug(
        "reduction: %d declared relations -> %d covering edges, %d levels",
        len(poset.relations),
        len(diagram.edges),
        diagram.max_level + 1,
    )
    return diagram
