"""Application services orchestrating the ports."""

from .network_service import RoadNetworkService

__all__ = ["RoadNetworkService"]
