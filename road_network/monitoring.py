from __future__ import annotations

import logging

from .config import ObservabilityConfig
from .domain.errors import ConfigurationError
from .graph.builder import RoadGraph

logger = logging.getLogger("road_network")


def configure_logging(config: ObservabilityConfig) -> None:
    """Apply level and format from the observability config."""
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="level",
        )
    logging.basicConfig(level=level, format=config.format)


def log_graph_stats(graph: RoadGraph, prefix: str = "") -> None:
    """Logs node, arc and way counts of a graph."""
    logger.info(
        f"{prefix}graph: nodes={len(graph.nodes)} arcs={graph.edge_count} "
        f"ways={len(graph.raw_ways)}"
    )
