# page.py
from html import escape
from typing import Iterable

from mapwidget.model.models import MapDescription
from .base import MapRenderer


def render_page(renderer: MapRenderer, maps: Iterable[MapDescription], title: str = "Map") -> str:
    """Standalone HTML document: provider includes once, then every map in order."""
    body = "\n".join(renderer.render(m) for m in maps)
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n"
        f"{renderer.render_javascript_includes()}\n"
        "</head>\n"
        "<body>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )
