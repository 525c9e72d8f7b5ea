# overlay.py
from dataclasses import dataclass
import contextily as ctx

from .viewport import Viewport


@dataclass(frozen=True)
class TileOverlay:
    """Web tile background for previews, fetched with contextily."""
    tiles: str = "OpenStreetMap.Mapnik"
    max_px: int = 4096

    def _resolve(self):
        if self.tiles.startswith(("http://", "https://")):
            return self.tiles
        prov = ctx.providers
        for p in self.tiles.split("."):
            if p: prov = getattr(prov, p)
        return prov

    def cap_zoom(self, vp: Viewport, zoom: int) -> int:
        w_px = vp.width_px_at(zoom)
        while w_px > self.max_px and zoom > 0:
            zoom -= 1; w_px /= 2
        return zoom

    def fetch(self, vp: Viewport):
        provider = self._resolve()
        zmax = getattr(provider, "max_zoom", 19)
        z = self.cap_zoom(vp, min(vp.zoom, zmax))
        img, extent_wm = ctx.bounds2img(vp.xmin, vp.ymin, vp.xmax, vp.ymax, source=provider, zoom=z, ll=False)
        return img, extent_wm, z
