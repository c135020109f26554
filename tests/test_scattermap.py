import json

import pandas as pd
import pytest

from frameplot.figure import build_marker
from frameplot.scattermap import ScatterMap
from frameplot.scatterplot import ScatterPlot


@pytest.fixture
def cities():
    return pd.DataFrame(
        {
            "city": ["Paris", "Berlin", "Paris", "Madrid"],
            "latitude": [48.856613, 52.52, 48.86, 40.4168],
            "longitude": [2.352222, 13.405, 2.35, -3.7038],
        }
    )


def test_single_trace(cities):
    plot = ScatterMap(cities, "latitude", "longitude")
    assert len(plot.traces) == 1
    trace = plot.traces[0]
    assert trace["type"] == "scattermapbox"
    assert trace["lat"] == list(cities["latitude"])
    assert trace["lon"] == list(cities["longitude"])
    reference = ScatterPlot(cities, "latitude", "longitude").traces[0]
    assert trace["mode"] == reference["mode"]
    assert "name" not in trace


def test_default_map_settings(cities):
    plot = ScatterMap(cities, "latitude", "longitude")
    assert plot.layout["mapbox"]["style"] == "open-street-map"
    assert plot.layout["mapbox"]["zoom"] == 0
    assert "center" not in plot.layout["mapbox"]
    assert plot.layout["margin"] == {"b": 0}


def test_center_and_zoom(cities):
    plot = ScatterMap(
        cities, "latitude", "longitude", center=[48.856613, 2.352222], zoom=4
    )
    assert plot.layout["mapbox"]["center"] == {"lat": 48.856613, "lon": 2.352222}
    assert plot.layout["mapbox"]["zoom"] == 4


def test_center_needs_two_values(cities):
    with pytest.raises(ValueError):
        ScatterMap(cities, "latitude", "longitude", center=[1.0, 2.0, 3.0])


def test_groups_and_markers(cities):
    colors = [(0, 0, 255), (255, 0, 0), (0, 255, 0)]
    plot = ScatterMap(
        cities, "latitude", "longitude", group="city", opacity=0.5, size=12, colors=colors
    )
    names = [trace["name"] for trace in plot.traces]
    assert names == sorted(set(cities["city"]))
    assert sum(len(trace["lat"]) for trace in plot.traces) == len(cities)
    for index, trace in enumerate(plot.traces):
        assert trace["marker"] == build_marker(index, 0.5, 12, None, colors, None, None)
        expected = cities[cities["city"] == trace["name"]]
        assert trace["lon"] == list(expected["longitude"])


def test_legend_and_titles(cities):
    plot = ScatterMap(
        cities,
        "latitude",
        "longitude",
        plot_title="Scatter Map",
        legend_title="cities",
        legend={"x": 0.9},
    )
    assert plot.layout["title"] == {"text": "Scatter Map"}
    assert plot.layout["legend"] == {"x": 0.9, "title": {"text": "cities"}}


def test_json_round_trip(cities):
    plot = ScatterMap(cities, "latitude", "longitude", group="city", zoom=3)
    assert json.loads(plot.to_json()) == plot.to_dict()


def test_missing_column_raises(cities):
    with pytest.raises(KeyError):
        ScatterMap(cities, "lat", "longitude")