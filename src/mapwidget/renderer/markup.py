# markup.py
"""Formatting shared by every provider renderer."""
import json
import string
from typing import Any

from mapwidget.model.models import Coordinate, MapDescription

OPEN_SCRIPT = '<script type="text/javascript">'
CLOSE_SCRIPT = "</script>"


def infer_unit(dimension: str) -> str:
    """'400' -> '400px', '50%' -> '50%'"""
    dimension = str(dimension)
    if dimension and dimension[-1] in string.digits:
        return dimension + "px"
    return dimension


def render_container(m: MapDescription, positioned: bool = False) -> str:
    # positioned: reserve a positioning context for absolutely placed children
    style = "position: relative; " if positioned else ""
    return '<div id="%s" style="%swidth: %s; height: %s;"></div>' % (
        m.container_id, style, infer_unit(m.width), infer_unit(m.height)
    )


def wrap_script(statements: list[str]) -> str:
    return OPEN_SCRIPT + "".join(statements) + CLOSE_SCRIPT


def derived_name(m: MapDescription, suffix: str) -> str:
    return m.var_name + suffix


def js_number(value: float) -> str:
    return repr(float(value))


def js_latlng(c: Coordinate) -> str:
    return "%s, %s" % (js_number(c.lat), js_number(c.lng))


def js_literal(value: Any) -> str:
    # "</" inside an inline script would close the block early
    return json.dumps(value).replace("</", "<\\/")


def element_lookup(m: MapDescription) -> str:
    return "document.getElementById(%s)" % js_literal(m.container_id)
