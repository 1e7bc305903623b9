"""
Transitive closure of a declared relation.
"""

from __future__ import annotations

from typing import Dict, Iterable, Set

from hasse_diagram.graph.ir import ClosureSet, Element, Poset, Relation
from hasse_diagram.utils.logging import logger


def _adjacency(poset: Poset) -> Dict[Element, Set[Element]]:
    adj: Dict[Element, Set[Element]] = {e: set() for e in poset.elements}
    for a, b in poset.relations:
        adj[a].add(b)
    return adj


def compute_transitive_closure(poset: Poset) -> ClosureSet:
    """
    Warshall's algorithm over the element set.

    With `k` as the outermost loop a single pass is enough: after iteration
    `k`, `adj[i]` holds every `j` reachable through intermediates drawn from
    the first `k` elements.

    Returns:
        Every pair (a, b) with a below b, possibly transitively. Cyclic input
        yields reflexive pairs such as (a, a).
    """
    adj = _adjacency(poset)
    elements = list(adj)

    for k in elements:
        below_k = adj[k]
        for i in elements:
            if k in adj[i]:
                adj[i] |= below_k

    closure = frozenset((i, j) for i in elements for j in adj[i])
    logger.debug(
        "closure: %d elements, %d relations -> %d pairs",
        len(elements),
        len(poset.relations),
        len(closure),
    )
    return closure


def is_transitive(pairs: Iterable[Relation]) -> bool:
    pair_set = set(pairs)
    succ: Dict[Element, Set[Element]] = {}
    for a, b in pair_set:
        succ.setdefault(a, set()).add(b)
    return all(
        (a, c) in pair_set for a, b in pair_set for c in succ.get(b, ())
    )
