"""OSM adapters - Implementations of OsmSourcePort.

Available implementations:
- PyosmiumOsmReader: Reads .osm.pbf / .osm files with pyosmium
"""

from .pyosmium_reader import OsmRoadHandler, PyosmiumOsmReader

__all__ = ["OsmRoadHandler", "PyosmiumOsmReader"]
