"""OSM ports - Abstractions for reading raw map data."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Protocol, Tuple, Union

from ..domain.models import Point, RawWay

# Point id -> Point, and the unclassified ways.
OsmData = Tuple[Dict[int, Point], List[RawWay]]


class OsmSourcePort(Protocol):
    """Port for decoding an OSM exchange file.

    Implementation: adapters/osm/pyosmium_reader.py

    Decoding either succeeds completely or raises OsmReadError.
    """

    def read(self, path: Union[str, Path]) -> OsmData:
        """Read all points and road-tagged ways from a file.

        Args:
            path: Path to an .osm.pbf (or .osm) file.

        Returns:
            Points keyed by id and the raw way records.

        Raises:
            OsmReadError: If the file cannot be opened or decoded.
        """
        ...
