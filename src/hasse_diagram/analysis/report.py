from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from hasse_diagram.graph.ir import Diagram, Element


@dataclass(frozen=True)
class DiagramReport:
    num_nodes: int
    num_edges: int
    height: int
    level_widths: Dict[int, int]
    minimal: List[Element]
    maximal: List[Element]
    linear_extension: List[Element]

    @property
    def width(self) -> int:
        """Largest number of nodes on one level."""
        return max(self.level_widths.values(), default=0)


def analyze_diagram(diagram: Diagram) -> DiagramReport:
    ids = list(dict.fromkeys(n.id for n in diagram.nodes))

    return DiagramReport(
        num_nodes=len(diagram.nodes),
        num_edges=len(diagram.edges),
        height=diagram.max_level + 1,
        level_widths={lvl: len(nodes) for lvl, nodes in diagram.levels().items()},
        minimal=[i for i in ids if not diagram.predecessors(i)],
        maximal=[i for i in ids if not diagram.successors(i)],
        linear_extension=diagram.topological_sort(),
    )
