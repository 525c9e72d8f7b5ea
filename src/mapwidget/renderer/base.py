# base.py
from types import MappingProxyType
from typing import Any, Mapping, Protocol, runtime_checkable

from mapwidget.model.models import MapDescription


@runtime_checkable
class MapRenderer(Protocol):
    """Contract shared by all provider renderers.

    Both operations are pure string construction: no I/O, no mutation of
    the description, and no exception for any well formed description.
    """
    def render_javascript_includes(self) -> str: ...
    def render(self, m: MapDescription) -> str: ...


def freeze_options(options: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(options or {}))
