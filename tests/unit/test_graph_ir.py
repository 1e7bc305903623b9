from __future__ import annotations

import pytest

from hasse_diagram.errors import CyclicPosetError, UnknownElementError
from hasse_diagram.graph.ir import Diagram, Edge, Node, Poset, topological_order


def _diamond() -> Diagram:
    return Diagram(
        nodes=[Node("a", 0), Node("b", 1), Node("c", 1), Node("d", 2)],
        edges=[Edge("a", "b"), Edge("a", "c"), Edge("b", "d"), Edge("c", "d")],
    )


def test_diagram_levels_and_neighbours() -> None:
    diagram = _diamond()

    assert diagram.max_level == 2
    assert [[n.id for n in nodes] for nodes in diagram.levels().values()] == [["a"], ["b", "c"], ["d"]]
    assert diagram.predecessors("d") == ["b", "c"]
    assert diagram.successors("a") == ["b", "c"]


def test_diagram_topological_sort_follows_edges() -> None:
    order = _diamond().topological_sort()
    assert order == ["a", "b", "c", "d"]


def test_topological_order_detects_cycle() -> None:
    with pytest.raises(CyclicPosetError) as excinfo:
        topological_order(["a", "b", "c"], [("a", "b"), ("b", "c"), ("c", "b")])
    assert set(excinfo.value.elements) == {"b", "c"}


def test_empty_diagram_has_no_levels() -> None:
    diagram = Diagram()
    assert diagram.max_level == -1
    assert diagram.levels() == {}
    assert diagram.topological_sort() == []


def test_node_rejects_negative_level() -> None:
    with pytest.raises(ValueError):
        Node("neg", level=-1)


def test_poset_validate_reports_unknown_endpoint() -> None:
    poset = Poset(elements=["a", "b"], relations=[("a", "z")])
    with pytest.raises(UnknownElementError) as excinfo:
        poset.validate()
    assert excinfo.value.missing == ("z",)


def test_to_dict_round_trips_through_json_types() -> None:
    diagram = Diagram(nodes=[Node("a", 0, x=0.0, y=0.0)], edges=[])
    assert diagram.to_dict() == {
        "nodes": [{"id": "a", "level": 0, "x": 0.0, "y": 0.0}],
        "edges": [],
    }


def test_copy_is_independent() -> None:
    diagram = _diamond()
    clone = diagram.copy()
    clone.nodes[0].x = 5.0
    assert diagram.nodes[0].x is None
