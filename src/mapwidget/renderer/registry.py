# registry.py
from typing import Any, Callable, Dict, Mapping

from .base import MapRenderer
from .bing import BingMapRenderer
from .google import GoogleMapRenderer

RendererFactory = Callable[[Mapping[str, Any]], MapRenderer]


class UnknownProviderError(KeyError):
    pass


class RendererRegistry:
    """Provider key -> renderer factory."""

    def __init__(self):
        self._factories: Dict[str, RendererFactory] = {}

    def register(self, key: str, factory: RendererFactory) -> None:
        self._factories[key.lower()] = factory

    def create(self, key: str, options: Mapping[str, Any] | None = None) -> MapRenderer:
        try:
            factory = self._factories[key.lower()]
        except KeyError:
            raise UnknownProviderError(
                f"Unknown map provider {key!r} (known: {', '.join(self.keys())})"
            ) from None
        return factory(options or {})

    def keys(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, key: str) -> bool:
        return key.lower() in self._factories


def default_registry() -> RendererRegistry:
    registry = RendererRegistry()
    registry.register("google", GoogleMapRenderer)
    registry.register("bing", BingMapRenderer)
    return registry
