"""
Global configuration for layout defaults and input limits.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from .logging import logger

LAYOUT_TYPES = ("hierarchical", "circular")


@dataclass
class LayoutConfig:
    layout_type: str = "hierarchical"
    level_height: float = 80.0
    horizontal_pitch: float = 100.0
    min_radius: float = 150.0
    radius_per_node: float = 20.0
    # Rendering only; layout math ignores it.
    node_size: float = 30.0

    def __post_init__(self) -> None:
        if self.layout_type not in LAYOUT_TYPES:
            raise ValueError(
                f"Unknown layout type `{self.layout_type}`; expected one of {LAYOUT_TYPES}."
            )
        if self.horizontal_pitch <= 0:
            raise ValueError("horizontal_pitch must be positive.")


def _max_elements_from_env() -> Optional[int]:
    raw = os.getenv("HASSE_MAX_ELEMENTS")
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring HASSE_MAX_ELEMENTS=%r: not an integer", raw)
        return None
    return value if value > 0 else None


@dataclass
class HasseConfig:
    debug: bool = False
    max_elements: Optional[int] = field(default_factory=_max_elements_from_env)
    layout: LayoutConfig = field(default_factory=LayoutConfig)


config = HasseConfig()
