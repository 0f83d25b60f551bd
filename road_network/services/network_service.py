"""Road network service - Main orchestrator.

Reads raw OSM data, classifies ways, builds the graph and optionally
reduces it to its largest connected component.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from ..domain.classification import classify_ways
from ..graph.builder import RoadGraph, build_graph
from ..graph.connectivity import OracleFactory, reduce_to_largest_component
from ..ports.osm import OsmSourcePort


@dataclass
class RoadNetworkService:
    """Builds routable road graphs from OSM files.

    Attributes:
        source: Decodes the input file
        oracle_factory: Builds traversal oracles for the reduction
        reduce: Whether to keep only the largest connected component
    """

    source: OsmSourcePort
    oracle_factory: Optional[OracleFactory] = None
    reduce: bool = True

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def build(
        self,
        path: Union[str, Path],
        reduce: Optional[bool] = None,
    ) -> RoadGraph:
        """Build the road graph for an OSM file.

        Args:
            path: OSM input file.
            reduce: Override the service's ``reduce`` setting.

        Returns:
            The road graph, reduced if requested.

        Raises:
            OsmReadError: If the file cannot be read. Nothing is built.
        """
        points, raw_ways = self.source.read(path)
        ways = classify_ways(raw_ways)

        self._logger.info(
            "Building road graph",
            extra={
                "path": str(path),
                "points": len(points),
                "ways": len(ways),
                "dropped_ways": len(raw_ways) - len(ways),
            },
        )

        graph = build_graph(points, ways)

        if self.reduce if reduce is None else reduce:
            graph = reduce_to_largest_component(graph, self.oracle_factory)

        self._logger.info(
            "Road graph ready",
            extra={"nodes": len(graph.nodes), "arcs": graph.edge_count},
        )
        return graph
