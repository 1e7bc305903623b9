from __future__ import annotations

import math

import numpy as np
import pytest

from hasse_diagram.graph.builders import generate_divisibility_poset
from hasse_diagram.graph.ir import Diagram, Edge, Node
from hasse_diagram.graph.reduction import compute_hasse_diagram
from hasse_diagram.layout import bounding_box, compute_layout, group_by_level
from hasse_diagram.utils.config import LayoutConfig


def _flat(n: int) -> Diagram:
    return Diagram(nodes=[Node(f"n{i}") for i in range(n)])


def test_single_level_is_centred_on_zero() -> None:
    diagram = compute_layout(_flat(3), "hierarchical", 80)
    assert [n.x for n in diagram.nodes] == [-100.0, 0.0, 100.0]
    assert [n.y for n in diagram.nodes] == [0.0, 0.0, 0.0]


def test_hierarchical_rows_follow_levels() -> None:
    diagram = compute_layout(compute_hasse_diagram(generate_divisibility_poset("1,2,3,4,6,12")), "hierarchical", 80)
    coords = {n.id: (n.x, n.y) for n in diagram.nodes}
    assert coords == {
        "1": (0.0, 0.0),
        "2": (-50.0, 80.0),
        "3": (50.0, 80.0),
        "4": (-50.0, 160.0),
        "6": (50.0, 160.0),
        "12": (0.0, 240.0),
    }


@pytest.mark.parametrize("n", [1, 2, 5])
def test_hierarchical_formula(n: int) -> None:
    diagram = compute_layout(_flat(n), "hierarchical", 40)
    assert [n_.x for n_ in diagram.nodes] == [-50.0 * n + 50.0 + 100.0 * i for i in range(n)]


def test_circular_layout_four_nodes() -> None:
    diagram = compute_layout(_flat(4), "circular")
    expected_angles = [0.0, math.pi / 2, math.pi, 3 * math.pi / 2]
    xs = [n.x for n in diagram.nodes]
    ys = [n.y for n in diagram.nodes]
    np.testing.assert_allclose(xs, [150 * math.cos(a) for a in expected_angles], atol=1e-9)
    np.testing.assert_allclose(ys, [150 * math.sin(a) for a in expected_angles], atol=1e-9)


def test_circular_radius_grows_with_node_count() -> None:
    diagram = compute_layout(_flat(10), "circular")
    radii = [math.hypot(n.x, n.y) for n in diagram.nodes]
    np.testing.assert_allclose(radii, [200.0] * 10)


def test_empty_diagram_layout() -> None:
    for layout_type in ("hierarchical", "circular"):
        diagram = compute_layout(Diagram(), layout_type, 80)
        assert diagram.nodes == []
        assert diagram.edges == []
    assert bounding_box(Diagram()) is None


def test_layout_does_not_mutate_input() -> None:
    source = Diagram(nodes=[Node("a"), Node("b", 1)], edges=[Edge("a", "b")])
    placed = compute_layout(source, "hierarchical", 80)
    assert all(n.x is None and n.y is None for n in source.nodes)
    assert all(n.is_placed for n in placed.nodes)
    assert placed.edges == source.edges


def test_duplicate_ids_are_placed_independently() -> None:
    diagram = compute_layout(Diagram(nodes=[Node("a"), Node("a")]), "hierarchical", 80)
    assert [n.x for n in diagram.nodes] == [-50.0, 50.0]


def test_unknown_layout_type_is_rejected() -> None:
    with pytest.raises(ValueError):
        compute_layout(_flat(2), "spiral")


def test_layout_config_supplies_defaults() -> None:
    cfg = LayoutConfig(horizontal_pitch=40.0, level_height=10.0)
    diagram = Diagram(nodes=[Node("a"), Node("b"), Node("c", 1)])
    placed = compute_layout(diagram, layout_config=cfg)
    assert [(n.x, n.y) for n in placed.nodes] == [(-20.0, 0.0), (20.0, 0.0), (0.0, 10.0)]


def test_group_by_level_keeps_empty_levels() -> None:
    nodes = [Node("a", 0), Node("b", 2)]
    assert group_by_level(nodes) == {0: [0], 1: [], 2: [1]}


def test_bounding_box_spans_placed_nodes() -> None:
    placed = compute_layout(_flat(3), "hierarchical", 80)
    assert bounding_box(placed) == (-100.0, 0.0, 100.0, 0.0)
