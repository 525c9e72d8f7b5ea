from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple, Union


# --- geometry ---------------------------------------------------------

@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float


@dataclass(frozen=True)
class Marker:
    coordinate: Coordinate
    metadata: Any = None

    @classmethod
    def at(cls, lat: float, lng: float, metadata: Any = None) -> "Marker":
        return cls(Coordinate(float(lat), float(lng)), metadata)


# --- map --------------------------------------------------------------

class MapType(str, Enum):
    ROAD = "road"
    SATELLITE = "satellite"
    HYBRID = "hybrid"
    TERRAIN = "terrain"


@dataclass(frozen=True)
class MapDescription:
    """Provider independent description of one map on a page.

    ``var_name`` is the base of every script name derived for this map
    (``<var_name>Markers``, ``<var_name>Bounds``, ``<var_name>Pins``), so it
    has to be unique on the page. ``zoom`` and ``center`` are ignored
    when ``auto_zoom`` is set.
    """
    container_id: str
    var_name: str
    width: str = "400"
    height: str = "300"
    zoom: int = 5
    center: Optional[Coordinate] = None
    map_type: Union[MapType, str] = MapType.ROAD
    auto_zoom: bool = False
    markers: Tuple[Marker, ...] = ()
    map_options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # frozen: normalize containers so callers cannot mutate them afterwards
        object.__setattr__(self, "width", str(self.width))
        object.__setattr__(self, "height", str(self.height))
        object.__setattr__(self, "markers", tuple(self.markers))
        object.__setattr__(self, "map_options", MappingProxyType(dict(self.map_options)))

    def with_markers(self, markers: Iterable[Marker]) -> "MapDescription":
        return replace(self, markers=tuple(self.markers) + tuple(markers))

    def coordinates(self) -> list[Coordinate]:
        return [m.coordinate for m in self.markers]


__all__ = [
    "Coordinate",
    "Marker",
    "MapType",
    "MapDescription",
]
