"""
Coordinate assignment for Hasse diagrams.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from hasse_diagram.graph.ir import Diagram, Node
from hasse_diagram.utils.config import LAYOUT_TYPES, LayoutConfig, config
from hasse_diagram.utils.logging import logger

LayoutFn = Callable[[List[Node], LayoutConfig], List[Tuple[float, float]]]


def group_by_level(nodes: List[Node]) -> Dict[int, List[int]]:
    """Node positions grouped by level 0..max_level, input order kept within a level."""
    max_level = max((n.level for n in nodes), default=-1)
    grouped: Dict[int, List[int]] = {lvl: [] for lvl in range(max_level + 1)}
    for idx, node in enumerate(nodes):
        grouped[node.level].append(idx)
    return grouped


def hierarchical_positions(nodes: List[Node], cfg: LayoutConfig) -> List[Tuple[float, float]]:
    """
    Rows by level, centred on x=0.

    With pitch p, the i-th of n nodes on a level sits at
    ``x = -n*p/2 + p/2 + i*p`` and ``y = level * level_height``.
    """
    pitch = cfg.horizontal_pitch
    positions: List[Tuple[float, float]] = [(0.0, 0.0)] * len(nodes)
    for level, indices in group_by_level(nodes).items():
        start_x = -len(indices) * pitch / 2 + pitch / 2
        y = float(level * cfg.level_height)
        for i, idx in enumerate(indices):
            positions[idx] = (float(start_x + i * pitch), y)
    return positions


def circular_positions(nodes: List[Node], cfg: LayoutConfig) -> List[Tuple[float, float]]:
    """Evenly spaced on one circle in node order; levels are ignored."""
    count = len(nodes)
    if count == 0:
        return []
    radius = max(count * cfg.radius_per_node, cfg.min_radius)
    angles = np.arange(count) * (2 * np.pi / count)
    xs = radius * np.cos(angles)
    ys = radius * np.sin(angles)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


_LAYOUTS: Dict[str, LayoutFn] = {
    "hierarchical": hierarchical_positions,
    "circular": circular_positions,
}


def compute_layout(
    diagram: Diagram,
    layout_type: Optional[str] = None,
    level_height: Optional[float] = None,
    *,
    layout_config: Optional[LayoutConfig] = None,
) -> Diagram:
    """
    Return a copy of `diagram` with every node's x/y filled in.

    Args:
        diagram: Output of `compute_hasse_diagram`; left unchanged.
        layout_type: ``"hierarchical"`` or ``"circular"``. Overrides the config.
        level_height: Vertical distance between levels. Overrides the config.
        layout_config: Base settings; defaults to ``config.layout``.
    """
    cfg = layout_config if layout_config is not None else config.layout
    overrides = {}
    if layout_type is not None:
        if layout_type not in LAYOUT_TYPES:
            raise ValueError(
                f"Unknown layout type `{layout_type}`; expected one of {LAYOUT_TYPES}."
            )
        overrides["layout_type"] = layout_type
    if level_height is not None:
        overrides["level_height"] = float(level_height)
    if overrides:
        cfg = replace(cfg, **overrides)

    positions = _LAYOUTS[cfg.layout_type](diagram.nodes, cfg)
    placed = diagram.copy()
    for node, (x, y) in zip(placed.nodes, positions):
        node.x = x
        node.y = y
    logger.debug("layout %s: placed %d nodes", cfg.layout_type, len(placed.nodes))
    return placed


def bounding_box(diagram: Diagram) -> Optional[Tuple[float, float, float, float]]:
    """(min_x, min_y, max_x, max_y) over placed nodes, or None if none are placed."""
    placed = [(n.x, n.y) for n in diagram.nodes if n.is_placed]
    if not placed:
        return None
    xs = [p[0] for p in placed]
    ys = [p[1] for p in placed]
    return min(xs), min(ys), max(xs), max(ys)
