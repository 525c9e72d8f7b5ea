# viewport.py
"""Server side viewport for previews.

Mirrors what the browser does with the rendered script: auto zoom fits
the padded marker bounds, otherwise the view is centred on ``center``
(origin when absent) at ``zoom``.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import numpy as np

from mapwidget.model.models import Coordinate, MapDescription
from .projection import WebMercatorProjection, WORLD_HALF_M

INITIAL_RES = 156543.03392804097  # m/px at z=0 (3857, 256px)
DEFAULT_SIZE_PX = (640, 480)
MAX_ZOOM = 22
MIN_SPAN_M = 1000.0


@dataclass(frozen=True)
class Viewport:
    xmin: float
    ymin: float
    xmax: float
    ymax: float
    zoom: int

    def center(self) -> Tuple[float, float]:
        return ((self.xmin + self.xmax) * 0.5, (self.ymin + self.ymax) * 0.5)

    def width_px_at(self, zoom: int) -> float:
        return (self.xmax - self.xmin) / (INITIAL_RES / (2 ** zoom))


def pixel_size(m: MapDescription) -> Tuple[int, int]:
    """Unit-less or px dimensions -> pixels; anything relative falls back to the default."""
    dims = []
    for value in (m.width, m.height):
        value = value[:-2] if value.endswith("px") else value
        dims.append(int(value) if value.isdigit() and int(value) > 0 else None)
    if None in dims:
        return DEFAULT_SIZE_PX
    return dims[0], dims[1]


def fit_zoom(span_x: float, span_y: float, size_px: Tuple[int, int]) -> int:
    m_per_px = max(span_x / size_px[0], span_y / size_px[1], 1e-9)
    zoom = int(np.floor(np.log2(INITIAL_RES / m_per_px)))
    return int(np.clip(zoom, 0, MAX_ZOOM))


def compute_viewport(
    m: MapDescription,
    proj: WebMercatorProjection | None = None,
    padding: float = 0.1,
) -> Viewport:
    proj = proj or WebMercatorProjection()
    size = pixel_size(m)

    if m.auto_zoom:
        if not m.markers:
            # empty bounds: whole world
            return Viewport(-WORLD_HALF_M, -WORLD_HALF_M, WORLD_HALF_M, WORLD_HALF_M, 0)
        pts = np.array([proj.project(c) for c in m.coordinates()], dtype=float)
        lo, hi = pts.min(axis=0), pts.max(axis=0)
        span = np.maximum((hi - lo) * (1.0 + 2 * padding), MIN_SPAN_M)
        # keep the container aspect ratio
        aspect = size[0] / size[1]
        span = np.array([max(span[0], span[1] * aspect), max(span[1], span[0] / aspect)])
        cx, cy = (lo + hi) * 0.5
        zoom = fit_zoom(span[0], span[1], size)
    else:
        cx, cy = proj.project(m.center or Coordinate(0.0, 0.0))
        zoom = int(np.clip(m.zoom, 0, MAX_ZOOM))
        res = INITIAL_RES / (2 ** zoom)
        span = np.array([size[0] * res, size[1] * res])

    half = np.minimum(span * 0.5, WORLD_HALF_M)
    return Viewport(
        xmin=float(cx - half[0]), ymin=float(cy - half[1]),
        xmax=float(cx + half[0]), ymax=float(cy + half[1]),
        zoom=zoom,
    )
