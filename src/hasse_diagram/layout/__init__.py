"""
Layout strategies that assign 2D coordinates to diagram nodes.
"""

from .engine import (
    bounding_box,
    circular_positions,
    compute_layout,
    group_by_level,
    hierarchical_positions,
)

__all__ = [
    "bounding_box",
    "circular_positions",
    "compute_layout",
    "group_by_level",
    "hierarchical_positions",
]
