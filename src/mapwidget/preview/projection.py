# projection.py
from dataclasses import dataclass
from typing import Tuple

from mapwidget.model.models import Coordinate

# half the EPSG:3857 world width in metres
WORLD_HALF_M = 20037508.342789244


@dataclass(frozen=True)
class WebMercatorProjection:
    """EPSG:4326 <-> EPSG:3857"""
    def __post_init__(self):
        from pyproj import Transformer
        object.__setattr__(self, "_to_merc",
            Transformer.from_crs("EPSG:4326", "EPSG:3857", always_xy=True))
        object.__setattr__(self, "_to_geo",
            Transformer.from_crs("EPSG:3857", "EPSG:4326", always_xy=True))

    def lonlat_to_xy(self, lon: float, lat: float) -> Tuple[float, float]:
        return self._to_merc.transform(lon, lat)

    def xy_to_lonlat(self, x: float, y: float) -> Tuple[float, float]:
        return self._to_geo.transform(x, y)

    def project(self, c: Coordinate) -> Tuple[float, float]:
        return self.lonlat_to_xy(c.lng, c.lat)
