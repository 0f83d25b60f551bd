"""Typed domain errors for the road network builder.

Skipped segments and unclassified ways are not errors; these types cover
the fatal paths (unreadable input, bad configuration) and misuse of the
traversal oracle.

All errors inherit from RoadNetworkError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoadNetworkError(Exception):
    """Base error for the road network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class OsmReadError(RoadNetworkError):
    """The OSM input file could not be opened or decoded.

    Attributes:
        file_path: Path to the input file
    """

    file_path: Optional[str] = None


@dataclass
class NodeNotFoundError(RoadNetworkError):
    """A node id is not present in the graph.

    Attributes:
        node_id: The id that was looked up
    """

    node_id: Optional[int] = None


@dataclass
class ConfigurationError(RoadNetworkError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
