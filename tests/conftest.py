"""Shared fixtures for road network tests."""

from pathlib import Path
from typing import Dict, Iterable

import pytest

from road_network.config import reset_config
from road_network.domain.models import Point, Way

# 0.001 degree of latitude in fixed-point units (~111 m).
STEP = 10_000

SAMPLE_OSM = """<?xml version='1.0' encoding='UTF-8'?>
<osm version="0.6" generator="tests">
  <node id="1" version="1" lat="0.0" lon="0.0"/>
  <node id="2" version="1" lat="0.01" lon="0.0"/>
  <node id="3" version="1" lat="0.02" lon="0.0"/>
  <node id="4" version="1" lat="1.0" lon="1.0"/>
  <way id="10" version="1">
    <nd ref="1"/>
    <nd ref="2"/>
    <tag k="highway" v="residential"/>
  </way>
  <way id="11" version="1">
    <nd ref="2"/>
    <nd ref="3"/>
    <tag k="highway" v="footway"/>
  </way>
  <way id="12" version="1">
    <nd ref="3"/>
    <nd ref="4"/>
    <tag k="name" v="Untagged"/>
  </way>
</osm>
"""


def line_points(ids: Iterable[int], lon: int = 0) -> Dict[int, Point]:
    """Points stacked north along one meridian, STEP apart."""
    return {
        node_id: Point(id=node_id, lat=i * STEP, lon=lon)
        for i, node_id in enumerate(ids)
    }


def chain_way(way_id: int, ids: Iterable[int], speed: int = 30) -> Way:
    return Way(id=way_id, speed=speed, refs=tuple(ids))


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_osm_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.osm"
    path.write_text(SAMPLE_OSM, encoding="utf-8")
    return path


TWO_COMPONENT_OSM = """<?xml version='1.0' encoding='UTF-8'?>
<osm version="0.6" generator="tests">
  <node id="1" version="1" lat="0.0" lon="0.0"/>
  <node id="2" version="1" lat="0.01" lon="0.0"/>
  <node id="3" version="1" lat="0.02" lon="0.0"/>
  <node id="4" version="1" lat="1.0" lon="1.0"/>
  <node id="5" version="1" lat="1.01" lon="1.0"/>
  <way id="10" version="1">
    <nd ref="1"/>
    <nd ref="2"/>
    <nd ref="3"/>
    <tag k="highway" v="residential"/>
  </way>
  <way id="11" version="1">
    <nd ref="4"/>
    <nd ref="5"/>
    <tag k="highway" v="primary"/>
  </way>
</osm>
"""


@pytest.fixture
def two_component_osm_file(tmp_path: Path) -> Path:
    path = tmp_path / "two_components.osm"
    path.write_text(TWO_COMPONENT_OSM, encoding="utf-8")
    return path
