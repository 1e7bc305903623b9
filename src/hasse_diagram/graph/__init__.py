"""
Poset data model and the poset-to-diagram pipeline.

- `Poset`, `Node`, `Edge`, `Diagram` (see `ir.py`)
- Builders from element/relation text and divisibility input
- Transitive closure and transitive reduction with level assignment.
"""

from .ir import ClosureSet, Diagram, Edge, Element, Node, Poset, Relation
from . import builders
from . import closure
from . import examples
from . import reduction

__all__ = [
    "ClosureSet",
    "Diagram",
    "Edge",
    "Element",
    "Node",
    "Poset",
    "Relation",
    "builders",
    "closure",
    "examples",
    "reduction",
]
