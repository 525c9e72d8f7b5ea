"""Shared fixtures for mapwidget tests."""

import matplotlib
import pytest

matplotlib.use("Agg")

from mapwidget.model.models import Coordinate, Marker, MapDescription
from mapwidget.renderer import BingMapRenderer, GoogleMapRenderer


@pytest.fixture
def fixed_map() -> MapDescription:
    """Fixed viewport, centre set, no markers."""
    return MapDescription(
        container_id="map1",
        var_name="mapA",
        width="400",
        height="300",
        zoom=5,
        center=Coordinate(40.7, -74.0),
    )


@pytest.fixture
def auto_map() -> MapDescription:
    """Auto zoom over two markers."""
    return MapDescription(
        container_id="map1",
        var_name="mapA",
        width="400",
        height="300",
        auto_zoom=True,
        markers=(Marker.at(10, 20), Marker.at(30, 40)),
    )


@pytest.fixture
def empty_auto_map() -> MapDescription:
    return MapDescription(container_id="map1", var_name="mapA", auto_zoom=True)


@pytest.fixture
def google() -> GoogleMapRenderer:
    return GoogleMapRenderer({"google_api_key": "gkey"})


@pytest.fixture
def bing() -> BingMapRenderer:
    return BingMapRenderer({"bing_api_key": "bkey"})
