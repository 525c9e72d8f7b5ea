"""
Renderer layer: turns a MapDescription into embeddable markup.

- MapRenderer: contract every provider renderer satisfies
- GoogleMapRenderer / BingMapRenderer: provider implementations
- RendererRegistry: provider key -> renderer
"""
from .base import MapRenderer
from .bing import BingMapRenderer
from .google import GoogleMapRenderer
from .page import render_page
from .registry import RendererRegistry, UnknownProviderError, default_registry

__all__ = [
    "MapRenderer",
    "BingMapRenderer",
    "GoogleMapRenderer",
    "RendererRegistry",
    "UnknownProviderError",
    "default_registry",
    "render_page",
]
