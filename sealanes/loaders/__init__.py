"""Lane network loaders for sealanes."""

from .network_loader import list_network_layers, load_network, network_from_geojson

__all__ = [
    "load_network",
    "network_from_geojson",
    "list_network_layers",
]
