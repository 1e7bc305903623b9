from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from hasse_diagram.errors import CyclicPosetError, UnknownElementError

Element = str
Relation = Tuple[Element, Element]
ClosureSet = FrozenSet[Relation]


@dataclass
class Poset:
    """
    Finite set of elements plus user-declared "a is below b" relations.

    Relations need not be minimal, transitive or even consistent with a
    partial order.
    """

    elements: List[Element] = field(default_factory=list)
    relations: List[Relation] = field(default_factory=list)

    def validate(self) -> None:
        known = set(self.elements)
        for a, b in self.relations:
            missing = [e for e in (a, b) if e not in known]
            if missing:
                raise UnknownElementError(f"{a} < {b}", missing)

    def __len__(self) -> int:
        return len(self.elements)


@dataclass
class Node:
    """One poset element placed on the diagram."""

    id: Element
    level: int = 0
    x: Optional[float] = None
    y: Optional[float] = None

    def __post_init__(self) -> None:
        if self.level < 0:
            raise ValueError(f"Node `{self.id}` has negative level.")

    @property
    def is_placed(self) -> bool:
        return self.x is not None and self.y is not None

    def copy(self) -> "Node":
        return Node(id=self.id, level=self.level, x=self.x, y=self.y)


@dataclass(frozen=True)
class Edge:
    source: Element
    target: Element


@dataclass
class Diagram:
    """
    Hasse diagram: one node per element and one edge per covering relation.
    """
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    def predecessors(self, node_id: Element) -> List[Element]:
        return [e.source for e in self.edges if e.target == node_id]

    def successors(self, node_id: Element) -> List[Element]:
        return [e.target for e in self.edges if e.source == node_id]

    @property
    def max_level(self) -> int:
        """Highest level present, or -1 for an empty diagram."""
        return max((n.level for n in self.nodes), default=-1)

    def levels(self) -> Dict[int, List[Node]]:
        """Nodes grouped by level, every level 0..max_level present, input order kept."""
        grouped: Dict[int, List[Node]] = {lvl: [] for lvl in range(self.max_level + 1)}
        for node in self.nodes:
            grouped[node.level].append(node)
        return grouped

    def topological_sort(self) -> List[Element]:
        """
        Kahn topo-sort over the edges.

        Returns:
            Element ids in an order where every edge source precedes its target.

        Raises:
            CyclicPosetError: if the edges contain a cycle.
        """
        ids = list(dict.fromkeys(n.id for n in self.nodes))
        return topological_order(ids, [(e.source, e.target) for e in self.edges])

    def copy(self) -> "Diagram":
        return Diagram(nodes=[n.copy() for n in self.nodes], edges=list(self.edges))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [
                {"id": n.id, "level": n.level, "x": n.x, "y": n.y} for n in self.nodes
            ],
            "edges": [{"source": e.source, "target": e.target} for e in self.edges],
        }


def topological_order(elements: List[Element], pairs: List[Relation]) -> List[Element]:
    """
    Standard Kahn topo-sort of `elements` under the given pairs.

    Ties are broken by element order so the result is deterministic.
    """
    position = {name: idx for idx, name in enumerate(elements)}
    indeg: Dict[Element, int] = {name: 0 for name in elements}
    succ: Dict[Element, List[Element]] = {name: [] for name in elements}

    for a, b in pairs:
        indeg[b] += 1
        succ[a].append(b)

    ready = deque(name for name in elements if indeg[name] == 0)
    order: List[Element] = []

    while ready:
        current = ready.popleft()
        order.append(current)
        for child in sorted(succ[current], key=position.__getitem__):
            indeg[child] -= 1
            if indeg[child] == 0:
                ready.append(child)

    if len(order) != len(elements):
        stuck = [name for name in elements if indeg[name] > 0]
        raise CyclicPosetError(stuck)

    return order
