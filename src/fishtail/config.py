"""Centralized configuration for fishtail."""

from __future__ import annotations

from dataclasses import dataclass

# (background, border) pairs assigned to subgraphs in declaration order.
DEFAULT_PALETTE: tuple[tuple[str, str], ...] = (
    ("#7c2d12", "#f97316"),  # orange
    ("#1e3a5f", "#60a5fa"),  # blue
    ("#14532d", "#4ade80"),  # green
    ("#4c1d95", "#c084fc"),  # purple
    ("#831843", "#f472b6"),  # pink
    ("#713f12", "#fbbf24"),  # yellow
)

UNASSIGNED: tuple[str, str] = ("#1f2937", "#6b7280")


@dataclass
class ViewerConfig:
    """Configuration for building viewer data."""

    palette: tuple[tuple[str, str], ...] = DEFAULT_PALETTE
    unassigned: tuple[str, str] = UNASSIGNED
    include_cycles: bool = True
    include_groups: bool = True

    def subgraph_colors(self, index: int) -> tuple[str, str]:
        return self.palette[index % len(self.palette)]
