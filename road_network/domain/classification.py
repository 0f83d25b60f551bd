"""Road classification: highway tag to free-flow speed."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from .models import RawWay, Way

logger = logging.getLogger(__name__)

# km/h
SPEED_TABLE: Mapping[str, int] = {
    "motorway": 110,
    "trunk": 110,
    "primary": 70,
    "secondary": 60,
    "tertiary": 50,
    "motorway_link": 50,
    "trunk_link": 50,
    "primary_link": 50,
    "secondary_link": 50,
    "road": 40,
    "unclassified": 40,
    "residential": 30,
    "unsurfaced": 30,
    "living_street": 10,
    "service": 5,
}


def speed_for(highway: Optional[str]) -> Optional[int]:
    """Return the speed in km/h for a road type, or None if unrecognized."""
    if highway is None:
        return None
    return SPEED_TABLE.get(highway)


def classify_ways(raw_ways: Iterable[RawWay]) -> List[Way]:
    """Assign speeds to raw ways, dropping those with no recognized type."""
    ways: List[Way] = []
    dropped: Dict[str, int] = {}

    for raw in raw_ways:
        speed = speed_for(raw.highway)
        if speed is None:
            key = raw.highway or "<missing>"
            dropped[key] = dropped.get(key, 0) + 1
            continue
        ways.append(Way(id=raw.id, speed=speed, refs=tuple(raw.refs)))

    if dropped:
        logger.debug(
            "Dropped unclassified ways",
            extra={"dropped": sum(dropped.values()), "by_type": dropped},
        )
    return ways
