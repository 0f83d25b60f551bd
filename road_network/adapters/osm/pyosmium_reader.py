"""pyosmium OSM reader adapter.

Decodes an OSM exchange file into fixed-point points and raw way
records. Way classification happens in the core, so every way carrying
the road tag key is kept here whatever its value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Union

import osmium

from ...config import GraphConfig, get_config
from ...domain.errors import OsmReadError
from ...domain.models import Point, RawWay
from ...ports.osm import OsmData


class OsmRoadHandler(osmium.SimpleHandler):
    """Osmium handler collecting nodes and road-tagged ways."""

    def __init__(self, road_tag: str = "highway") -> None:
        super().__init__()
        self.road_tag = road_tag
        self.points: Dict[int, Point] = {}
        self.ways: List[RawWay] = []

    def node(self, n) -> None:
        if not n.location.valid():
            return
        self.points[n.id] = Point.from_degrees(n.id, n.location.lat, n.location.lon)

    def way(self, w) -> None:
        highway = w.tags.get(self.road_tag)
        if highway is None:
            return
        self.ways.append(
            RawWay(id=w.id, highway=highway, refs=tuple(n.ref for n in w.nodes))
        )


@dataclass
class PyosmiumOsmReader:
    """OSM source backed by pyosmium.

    This adapter implements OsmSourcePort.

    Attributes:
        config: Graph configuration (data dir, road tag key)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def read(self, path: Union[str, Path]) -> OsmData:
        """Read points and road-tagged ways from ``path``.

        Raises:
            OsmReadError: If the file is missing or cannot be decoded.
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise OsmReadError(
                f"OSM file not found: {file_path}",
                file_path=str(file_path),
            )

        self._logger.debug("Reading OSM file", extra={"path": str(file_path)})

        handler = OsmRoadHandler(road_tag=self.config.road_tag)
        try:
            handler.apply_file(str(file_path))
        except (OSError, RuntimeError) as e:
            raise OsmReadError(
                f"Failed to decode OSM file {file_path}",
                file_path=str(file_path),
                cause=e,
            )

        self._logger.info(
            "OSM file read",
            extra={"points": len(handler.points), "ways": len(handler.ways)},
        )
        return handler.points, handler.ways

    def read_default(self) -> OsmData:
        """Read the file configured as ``pbf_path``."""
        return self.read(self.config.pbf_path)
