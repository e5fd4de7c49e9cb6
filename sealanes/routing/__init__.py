"""Path search, route assembly and orchestration."""

from .assembler import assemble_route, measure_length
from .pathfinder import NetworkPathFinder, PathSearch
from .router import SeaRouter

__all__ = [
    # Path search
    "PathSearch",
    "NetworkPathFinder",
    # Assembly
    "assemble_route",
    "measure_length",
    # Orchestration
    "SeaRouter",
]
