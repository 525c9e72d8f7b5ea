"""Tests for the helpers shared by all renderers."""

import pytest

from mapwidget.model.models import Coordinate, MapDescription
from mapwidget.renderer import markup


@pytest.mark.parametrize("value,expected", [
    ("400", "400px"),
    ("50%", "50%"),
    ("50vh", "50vh"),
    ("12.5", "12.5px"),
    ("300px", "300px"),
    ("", ""),
])
def test_infer_unit(value, expected):
    assert markup.infer_unit(value) == expected


def test_container_plain_and_positioned():
    m = MapDescription(container_id="c", var_name="v", width="400", height="100%")
    assert markup.render_container(m) == '<div id="c" style="width: 400px; height: 100%;"></div>'
    assert markup.render_container(m, positioned=True) == (
        '<div id="c" style="position: relative; width: 400px; height: 100%;"></div>'
    )


def test_wrap_script():
    assert markup.wrap_script(["a;", "b;"]) == '<script type="text/javascript">a;b;</script>'
    assert markup.wrap_script([]) == '<script type="text/javascript"></script>'


def test_derived_names():
    m = MapDescription(container_id="c", var_name="shops")
    assert markup.derived_name(m, "Markers") == "shopsMarkers"
    assert markup.derived_name(m, "Bounds") == "shopsBounds"
    assert markup.derived_name(m, "Pins") == "shopsPins"


def test_js_latlng():
    assert markup.js_latlng(Coordinate(40.7, -74)) == "40.7, -74.0"


def test_element_lookup_quotes_id():
    m = MapDescription(container_id='we"ird', var_name="v")
    assert markup.element_lookup(m) == 'document.getElementById("we\\"ird")'


def test_js_literal_cannot_close_script():
    assert markup.js_literal("a</script>b") == '"a<\\/script>b"'
    m = MapDescription(container_id="x</script><script>", var_name="v")
    assert "</script>" not in markup.element_lookup(m)
