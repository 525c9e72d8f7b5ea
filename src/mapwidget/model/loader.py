from __future__ import annotations
import pathlib, json, warnings
from typing import Any, List, Mapping

from jsonschema import validate

from .models import Coordinate, Marker, MapType, MapDescription

SCHEMA_DIR = pathlib.Path(__file__).parent.parent / "schemas"


def load_schema(name: str, schema_dir: str | pathlib.Path | None = None) -> dict:
    path = pathlib.Path(schema_dir or SCHEMA_DIR) / name
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class MapLoader:
    """Builds MapDescription objects from JSON documents."""

    def __init__(
        self,
        validate_schema: bool = True,
        schema_dir: str | pathlib.Path | None = None,
        default_width: str = "400",
        default_height: str = "300",
    ):
        self.validate_schema = validate_schema
        # used when a map document leaves width/height out
        self.default_width = default_width
        self.default_height = default_height
        self.schema_dir = pathlib.Path(schema_dir) if schema_dir is not None else SCHEMA_DIR

    def _load_json(self, path: str | pathlib.Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _validate(self, instance: Any, schema_name: str) -> None:
        if self.validate_schema:
            validate(instance=instance, schema=load_schema(schema_name, self.schema_dir))

    # --- public API ---------------------------------------------------

    def load_map(self, path: str | pathlib.Path) -> MapDescription:
        """map.json -> MapDescription"""
        return self.map_from_dict(self._load_json(path))

    def load_maps(self, paths: List[str | pathlib.Path]) -> List[MapDescription]:
        maps = [self.load_map(p) for p in paths]
        for attr in ("var_name", "container_id"):
            seen: set[str] = set()
            for m in maps:
                value = getattr(m, attr)
                if value in seen:
                    warnings.warn(f"Duplicate {attr} {value} on one page")
                seen.add(value)
        return maps

    def map_from_dict(self, data: Mapping[str, Any]) -> MapDescription:
        self._validate(data, "map_description.schema.json")

        center = data.get("center")
        return MapDescription(
            container_id=data["container_id"],
            var_name=data["var_name"],
            width=_dimension(data.get("width", self.default_width)),
            height=_dimension(data.get("height", self.default_height)),
            zoom=int(data.get("zoom", 5)),
            center=Coordinate(float(center["lat"]), float(center["lng"])) if center else None,
            map_type=_map_type(data.get("map_type", MapType.ROAD.value)),
            auto_zoom=bool(data.get("auto_zoom", False)),
            markers=tuple(_marker(m) for m in data.get("markers", [])),
            map_options=data.get("map_options", {}),
        )


def _dimension(value: Any) -> str:
    # 400 and 400.0 both mean "400"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def _map_type(value: str) -> MapType | str:
    try:
        return MapType(value.lower())
    except ValueError:
        warnings.warn(f"Unknown map_type {value}, rendered as road")
        return value


def _marker(item: Mapping[str, Any]) -> Marker:
    extra = {k: v for k, v in item.items() if k not in ("lat", "lng")}
    return Marker.at(item["lat"], item["lng"], extra or None)
