"""
Preview layer: server side PNG snapshots of a MapDescription.

- compute_viewport: extent and zoom the browser would end up showing
- TileOverlay: optional web tile background (contextily)
- PreviewRenderer: matplotlib drawing
"""
from .overlay import TileOverlay
from .renderer import PreviewRenderer
from .viewport import Viewport, compute_viewport, pixel_size

__all__ = ["TileOverlay", "PreviewRenderer", "Viewport", "compute_viewport", "pixel_size"]
