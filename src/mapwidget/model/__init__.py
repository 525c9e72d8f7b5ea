from .models import Coordinate, Marker, MapType, MapDescription
from .loader import MapLoader

__all__ = ["Coordinate", "Marker", "MapType", "MapDescription", "MapLoader"]
