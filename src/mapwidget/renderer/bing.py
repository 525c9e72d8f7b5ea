# bing.py
import logging
from typing import Any, Mapping

from mapwidget.model.models import MapDescription, MapType
from . import markup
from .base import freeze_options

logger = logging.getLogger(__name__)

SCRIPTS = (
    '<script charset="UTF-8" type="text/javascript" '
    'src="http://ecn.dev.virtualearth.net/mapcontrol/mapcontrol.ashx?v=7.0"></script>',
)

MAP_TYPES = {
    MapType.SATELLITE: "Microsoft.Maps.MapTypeId.aerial",
    MapType.HYBRID: "Microsoft.Maps.MapTypeId.aerial",
}


def transform_map_type(map_type: Any) -> str:
    try:
        return MAP_TYPES.get(map_type, "Microsoft.Maps.MapTypeId.road")
    except TypeError:  # unhashable
        return "Microsoft.Maps.MapTypeId.road"


class BingMapRenderer:
    """Bing Maps AJAX control 7.0.

    Pins for auto zoom are collected in a separate ``<var>Pins`` array of
    locations, since the control fits a view to a LocationRect built from
    locations, not from pushpins. Recognized options: ``bing_api_key``.
    """

    def __init__(self, options: Mapping[str, Any] | None = None):
        self.options = freeze_options(options)

    def render_javascript_includes(self) -> str:
        return "".join(SCRIPTS)

    def render(self, m: MapDescription) -> str:
        logger.debug("bing render %s (%d markers, auto_zoom=%s)", m.var_name, len(m.markers), m.auto_zoom)
        statements = [self.map_var(m)]
        if m.auto_zoom:
            statements.append(self.pins_var(m))
        statements.extend(self.markers(m))
        if m.auto_zoom:
            statements.append(self.view_from_pins(m))
        else:
            statements.append(self.set_zoom(m))
            if m.center is not None:
                statements.append(self.set_center(m))
        return markup.render_container(m, positioned=True) + markup.wrap_script(statements)

    # --- statements ---------------------------------------------------

    def map_var(self, m: MapDescription) -> str:
        return "var %s = new Microsoft.Maps.Map(%s, { credentials: %s, mapTypeId: %s });" % (
            m.var_name,
            markup.element_lookup(m),
            markup.js_literal(str(self.options.get("bing_api_key", ""))),
            transform_map_type(m.map_type),
        )

    def pins_var(self, m: MapDescription) -> str:
        return "var %s = [];" % markup.derived_name(m, "Pins")

    def markers(self, m: MapDescription) -> list[str]:
        out = []
        for marker in m.markers:
            location = "new Microsoft.Maps.Location(%s)" % markup.js_latlng(marker.coordinate)
            out.append("%s.entities.push(new Microsoft.Maps.Pushpin(%s));" % (m.var_name, location))
            if m.auto_zoom:
                out.append("%s.push(%s);" % (markup.derived_name(m, "Pins"), location))
        return out

    def view_from_pins(self, m: MapDescription) -> str:
        return "%s.setView({ bounds: Microsoft.Maps.LocationRect.fromLocations(%s) });" % (
            m.var_name, markup.derived_name(m, "Pins")
        )

    def set_zoom(self, m: MapDescription) -> str:
        return "%s.setView({ zoom: %d });" % (m.var_name, m.zoom)

    def set_center(self, m: MapDescription) -> str:
        return "%s.setView({ center: new Microsoft.Maps.Location(%s) });" % (
            m.var_name, markup.js_latlng(m.center)
        )
