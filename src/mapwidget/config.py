# config.py
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any
import json

from jsonschema import validate

from mapwidget.model.loader import MapLoader, load_schema
from mapwidget.renderer import MapRenderer, RendererRegistry, default_registry


class ConfigError(ValueError):
    pass


@dataclass
class RendererConfig:
    provider: str = "google"
    options: dict[str, Any] = field(default_factory=dict)
    api_key: str | None = None
    default_width: str = "400"
    default_height: str = "300"
    preview_tiles: str = "OpenStreetMap.Mapnik"
    preview_overlay: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "RendererConfig":
        unknown = sorted(set(data) - {f.name for f in fields(cls)})
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    def renderer_options(self) -> dict[str, Any]:
        # --api-key is shorthand for the provider's own key option
        opts = dict(self.options)
        if self.api_key:
            opts[f"{self.provider.lower()}_api_key"] = self.api_key
        return opts

    def build_renderer(self, registry: RendererRegistry | None = None) -> MapRenderer:
        opts = self.renderer_options()
        validate(instance=opts, schema=load_schema("renderer_options.schema.json"))
        return (registry or default_registry()).create(self.provider, opts)

    def build_loader(self, validate_schema: bool = True) -> MapLoader:
        return MapLoader(
            validate_schema=validate_schema,
            default_width=str(self.default_width),
            default_height=str(self.default_height),
        )


def load_json(path: str | None) -> dict:
    if not path: return {}
    p = Path(path)
    if not p.exists(): raise FileNotFoundError(path)
    with p.open("r", encoding="utf-8") as f: return json.load(f)
