# google.py
import logging
from typing import Any, Mapping
from urllib.parse import urlencode

from mapwidget.model.models import MapDescription, MapType
from . import markup
from .base import freeze_options

logger = logging.getLogger(__name__)

SCRIPT_URL = "http://maps.google.com/maps/api/js"

# viewport and map type come from the description, never from map_options
RESERVED_OPTIONS = ("zoom", "center", "mapTypeId")

MAP_TYPES = {
    MapType.SATELLITE: "satellite",
    MapType.HYBRID: "hybrid",
    MapType.TERRAIN: "terrain",
}


def transform_map_type(map_type: Any) -> str:
    try:
        return MAP_TYPES.get(map_type, "roadmap")
    except TypeError:  # unhashable
        return "roadmap"


class GoogleMapRenderer:
    """Google Maps JavaScript API v3.

    Recognized options: ``google_api_key``.
    """

    def __init__(self, options: Mapping[str, Any] | None = None):
        self.options = freeze_options(options)

    def render_javascript_includes(self) -> str:
        query = {"sensor": "false"}
        if self.options.get("google_api_key"):
            query["key"] = self.options["google_api_key"]
        return '<script type="text/javascript" src="%s?%s"></script>' % (SCRIPT_URL, urlencode(query))

    def render(self, m: MapDescription) -> str:
        logger.debug("google render %s (%d markers, auto_zoom=%s)", m.var_name, len(m.markers), m.auto_zoom)
        statements = [self.map_var(m)]
        if m.auto_zoom:
            statements.append(self.bounds_var(m))
        statements.extend(self.markers(m))
        if m.auto_zoom:
            statements.append(self.fit_to_bounds(m))
        else:
            statements.append(self.set_zoom(m))
            if m.center is not None:
                statements.append(self.set_center(m))
        return markup.render_container(m) + markup.wrap_script(statements)

    # --- statements ---------------------------------------------------

    def map_var(self, m: MapDescription) -> str:
        options = {"mapTypeId": transform_map_type(m.map_type)}
        options.update((k, v) for k, v in m.map_options.items() if k not in RESERVED_OPTIONS)
        return "var %s = new google.maps.Map(%s, %s);" % (
            m.var_name, markup.element_lookup(m), markup.js_literal(options)
        )

    def bounds_var(self, m: MapDescription) -> str:
        return "var %s = new google.maps.LatLngBounds();" % markup.derived_name(m, "Bounds")

    def markers(self, m: MapDescription) -> list[str]:
        markers_var = markup.derived_name(m, "Markers")
        out = ["var %s = [];" % markers_var]
        for marker in m.markers:
            latlng = "new google.maps.LatLng(%s)" % markup.js_latlng(marker.coordinate)
            out.append("%s.push(new google.maps.Marker({ position: %s, map: %s }));" % (
                markers_var, latlng, m.var_name
            ))
            if m.auto_zoom:
                out.append("%s.extend(%s);" % (markup.derived_name(m, "Bounds"), latlng))
        return out

    def fit_to_bounds(self, m: MapDescription) -> str:
        return "%s.fitBounds(%s);" % (m.var_name, markup.derived_name(m, "Bounds"))

    def set_zoom(self, m: MapDescription) -> str:
        return "%s.setZoom(%d);" % (m.var_name, m.zoom)

    def set_center(self, m: MapDescription) -> str:
        return "%s.setCenter(new google.maps.LatLng(%s));" % (m.var_name, markup.js_latlng(m.center))
