"""Tests for server side previews. No tiles are fetched."""

import io
from dataclasses import replace

import numpy as np
import pytest

from mapwidget.model.models import Marker, MapDescription
from mapwidget.preview import PreviewRenderer, TileOverlay, Viewport, compute_viewport, pixel_size
from mapwidget.preview import overlay as overlay_module
from mapwidget.preview.projection import WebMercatorProjection, WORLD_HALF_M
from mapwidget.preview.viewport import DEFAULT_SIZE_PX, MIN_SPAN_M

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.fixture(scope="module")
def proj():
    return WebMercatorProjection()


@pytest.mark.parametrize("width,height,expected", [
    ("400", "300", (400, 300)),
    ("400px", "300px", (400, 300)),
    ("100%", "300", DEFAULT_SIZE_PX),
    ("0", "300", DEFAULT_SIZE_PX),
])
def test_pixel_size(width, height, expected):
    m = MapDescription(container_id="c", var_name="v", width=width, height=height)
    assert pixel_size(m) == expected


def test_fixed_viewport_whole_world_at_zoom_zero():
    m = MapDescription(container_id="c", var_name="v", width="256", height="256", zoom=0)
    vp = compute_viewport(m)
    assert vp.zoom == 0
    assert vp.xmin == pytest.approx(-WORLD_HALF_M)
    assert vp.xmax == pytest.approx(WORLD_HALF_M)


def test_fixed_viewport_centred(fixed_map, proj):
    vp = compute_viewport(fixed_map, proj)
    cx, cy = proj.lonlat_to_xy(-74.0, 40.7)
    assert vp.center() == pytest.approx((cx, cy))
    assert vp.zoom == 5
    assert vp.width_px_at(5) == pytest.approx(400)


def test_fixed_viewport_without_center_uses_origin(fixed_map):
    vp = compute_viewport(replace(fixed_map, center=None))
    assert vp.center() == pytest.approx((0.0, 0.0), abs=1e-6)


def test_auto_viewport_contains_markers(auto_map, proj):
    vp = compute_viewport(auto_map, proj)
    for c in auto_map.coordinates():
        x, y = proj.project(c)
        assert vp.xmin < x < vp.xmax
        assert vp.ymin < y < vp.ymax
    assert 0 <= vp.zoom <= 22
    ratio = (vp.xmax - vp.xmin) / (vp.ymax - vp.ymin)
    assert ratio == pytest.approx(400 / 300)


def test_auto_viewport_single_marker(empty_auto_map):
    vp = compute_viewport(empty_auto_map.with_markers([Marker.at(35.68, 139.76)]))
    assert vp.xmax - vp.xmin >= MIN_SPAN_M
    assert vp.zoom > 10


def test_auto_viewport_without_markers_is_world(empty_auto_map):
    vp = compute_viewport(empty_auto_map)
    assert vp == Viewport(-WORLD_HALF_M, -WORLD_HALF_M, WORLD_HALF_M, WORLD_HALF_M, 0)


def test_cap_zoom():
    vp = Viewport(-WORLD_HALF_M, -WORLD_HALF_M, WORLD_HALF_M, WORLD_HALF_M, 0)
    assert TileOverlay(max_px=4096).cap_zoom(vp, 10) == 4
    assert TileOverlay(max_px=4096).cap_zoom(vp, 2) == 2


def test_preview_png(auto_map):
    buf = io.BytesIO()
    vp = PreviewRenderer().render(auto_map.with_markers([Marker.at(20, 30, {"label": "C"})]), buf)
    assert buf.getvalue().startswith(PNG_SIGNATURE)
    assert isinstance(vp, Viewport)


def test_preview_with_overlay(fixed_map, tmp_path, monkeypatch):
    calls = []

    def fake_bounds2img(xmin, ymin, xmax, ymax, source=None, zoom=None, ll=None):
        calls.append((xmin, ymin, xmax, ymax, zoom))
        return np.zeros((8, 8, 3), dtype=np.uint8), (xmin, xmax, ymin, ymax)

    monkeypatch.setattr(overlay_module.ctx, "bounds2img", fake_bounds2img)
    out = tmp_path / "map.png"
    PreviewRenderer(TileOverlay()).render(fixed_map, out)
    assert out.read_bytes().startswith(PNG_SIGNATURE)
    assert len(calls) == 1
    assert calls[0][4] == 5
