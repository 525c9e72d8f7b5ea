"""
mapwidget: one provider independent map description, many map providers.

- model: Coordinate / Marker / MapDescription and the JSON loader
- renderer: provider renderers (google, bing) and the registry
- preview: server side PNG snapshots
"""
from .model import Coordinate, Marker, MapType, MapDescription, MapLoader
from .renderer import (
    MapRenderer,
    GoogleMapRenderer,
    BingMapRenderer,
    RendererRegistry,
    UnknownProviderError,
    default_registry,
    render_page,
)

__version__ = "0.1.0"

__all__ = [
    "Coordinate",
    "Marker",
    "MapType",
    "MapDescription",
    "MapLoader",
    "MapRenderer",
    "GoogleMapRenderer",
    "BingMapRenderer",
    "RendererRegistry",
    "UnknownProviderError",
    "default_registry",
    "render_page",
]
