"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- RN_GRAPH_DATA_DIR=/path/to/data
- RN_GRAPH_PBF_FILE=region.osm.pbf
- RN_GRAPH_REDUCE_TO_LARGEST_COMPONENT=false
- RN_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph input and construction configuration.

    Environment variables prefixed with RN_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RN_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    pbf_file: str = "map.osm.pbf"
    road_tag: str = "highway"
    reduce_to_largest_component: bool = True

    @property
    def pbf_path(self) -> Path:
        """Full path to the OSM input file."""
        return self.data_dir / self.pbf_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RN_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RN_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.pbf_path)

    Environment variables prefixed with RN_.
    """

    model_config = SettingsConfigDict(env_prefix="RN_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
