# renderer.py
import logging
from typing import BinaryIO
import pathlib
import matplotlib.pyplot as plt

from mapwidget.model.models import MapDescription
from .overlay import TileOverlay
from .projection import WebMercatorProjection
from .viewport import Viewport, compute_viewport, pixel_size

logger = logging.getLogger(__name__)

DPI = 100


class PreviewRenderer:
    """Static PNG snapshot of a MapDescription (markers over optional web tiles)."""

    def __init__(self, overlay: TileOverlay | None = None):
        self.ov = overlay
        self.proj = WebMercatorProjection()

    def render(self, m: MapDescription, out: str | pathlib.Path | BinaryIO) -> Viewport:
        vp = compute_viewport(m, self.proj)
        w_px, h_px = pixel_size(m)
        logger.debug("preview %s extent=%s zoom=%d", m.var_name, vp, vp.zoom)

        fig, ax = plt.subplots(figsize=(w_px / DPI, h_px / DPI), dpi=DPI)
        try:
            if self.ov:
                img, extent_wm, _ = self.ov.fetch(vp)
                ax.imshow(img, extent=extent_wm, origin="upper", interpolation="bilinear", zorder=0)

            for marker in m.markers:
                x, y = self.proj.project(marker.coordinate)
                ax.plot(x, y, marker="o", markersize=8, mec="black", mfc="red", zorder=6)
                label = marker.metadata.get("label") if isinstance(marker.metadata, dict) else None
                if label:
                    ax.annotate(label, (x, y),
                                xytext=(5, 8), textcoords="offset points",
                                fontsize=10,
                                bbox=dict(boxstyle="round,pad=0.25",
                                          fc="white", ec="gray", alpha=0.85),
                                zorder=7)

            ax.set_xlim(vp.xmin, vp.xmax)
            ax.set_ylim(vp.ymin, vp.ymax)
            ax.set_axis_off()
            fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
            fig.savefig(out, format="png", dpi=DPI)
        finally:
            plt.close(fig)
        return vp
