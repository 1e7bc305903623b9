"""
hasse-diagram

Transitive closure, transitive reduction and layout of finite posets.
"""

from .errors import (
    CyclicPosetError,
    EmptyInputError,
    FormatError,
    InvalidNumberError,
    PosetError,
    PosetInputError,
    TooManyElementsError,
    UnknownElementError,
)
from .graph.ir import Diagram, Edge, Node, Poset
from .graph.builders import format_poset, generate_divisibility_poset, parse_input
from .graph.closure import compute_transitive_closure
from .graph.reduction import compute_hasse_diagram
from .layout.engine import compute_layout

__all__ = [
    "Diagram",
    "Edge",
    "Node",
    "Poset",
    "compute_hasse_diagram",
    "compute_layout",
    "compute_transitive_closure",
    "format_poset",
    "generate_divisibility_poset",
    "parse_input",
    "CyclicPosetError",
    "EmptyInputError",
    "FormatError",
    "InvalidNumberError",
    "PosetError",
    "PosetInputError",
    "TooManyElementsError",
    "UnknownElementError",
]
