"""Configuration for the random graph builder."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from wgraph.types.base import Cost, DirectMode


@dataclass
class BuilderConfig:
    """Parameters for `wgraph.builder.GraphBuilder`."""

    num_nodes: int = 10
    num_edges: int = 15

    # Coordinate dimension and the uniform range each coordinate is drawn from
    dimension: int = 2
    coord_min: float = -100.0
    coord_max: float = 101.0

    # Lay a random walk over every node before filling random edges
    connected: bool = True
    direct_mode: DirectMode = DirectMode.ALL_BIDIRECTIONAL

    weighted_nodes: bool = False
    weighted_edges: bool = True

    # Integer limits give integer costs, float limits give float costs
    min_edge_cost: Cost = 0
    max_edge_cost: Cost = 100
    min_node_cost: Cost = 0
    max_node_cost: Cost = 100

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.direct_mode, str):
            self.direct_mode = DirectMode.from_string(self.direct_mode)
        self.validate()

    def validate(self) -> None:
        """Check value ranges.

        Raises:
            ValueError: On negative counts or inverted limits.
        """
        if self.num_nodes < 0 or self.num_edges < 0:
            raise ValueError("num_nodes and num_edges must be non-negative")
        if self.dimension < 0:
            raise ValueError("dimension must be non-negative")
        for low, high, name in (
            (self.min_edge_cost, self.max_edge_cost, "edge cost"),
            (self.min_node_cost, self.max_node_cost, "node cost"),
            (self.coord_min, self.coord_max, "coordinate"),
        ):
            if low > high:
                raise ValueError(f"Invalid {name} limits: {low} > {high}")

    @property
    def edge_cost_limits(self) -> Tuple[Cost, Cost]:
        return self.min_edge_cost, self.max_edge_cost

    @property
    def node_cost_limits(self) -> Tuple[Cost, Cost]:
        return self.min_node_cost, self.max_node_cost

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> BuilderConfig:
        """Create a config from a mapping, rejecting unknown keys.

        Raises:
            ValueError: If a key is not a config field.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in data if k not in known)
        if unknown:
            raise ValueError(
                f"Unknown builder config keys: {', '.join(unknown)}. "
                f"Valid keys are: {', '.join(sorted(known))}"
            )
        return cls(**data)


def load_builder_config(path: Union[str, Path]) -> BuilderConfig:
    """Load a `BuilderConfig` from a YAML mapping.

    An empty file yields the defaults. A ``builder`` top-level key, when
    present, is used as the mapping.

    Raises:
        ValueError: If the document is not a mapping or has unknown keys.
    """
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if data is None:
        return BuilderConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Builder config in {path} must be a mapping")
    if "builder" in data:
        data = data["builder"] or {}
        if not isinstance(data, dict):
            raise ValueError(f"'builder' section in {path} must be a mapping")
    return BuilderConfig.from_dict(data)


# Global configuration instance
BUILDER_CONFIG = BuilderConfig()
