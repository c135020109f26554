import json

import pandas as pd
import pytest

from frameplot.surfaceplot import SurfacePlot, unique_ordered


@pytest.fixture
def grid():
    return pd.DataFrame(
        {
            "x": [0.0, 0.0, 0.0, 1.0, 1.0, 1.0],
            "y": [5.0, 6.0, 7.0, 5.0, 6.0, 7.0],
            "z": [1.0, 2.0, 3.0, 4.0, 5.0, 6.0],
        }
    )


def _surface(data, **options):
    return SurfacePlot(data, "x", "y", "z", **options).traces[0]


@pytest.mark.parametrize(
    ("values", "expected"),
    [([3.0, None, 1.0, 3.0, 2.0, 1.0], [3.0, 1.0, 2.0]), ([None, None], [])],
)
def test_unique_ordered(values, expected):
    assert unique_ordered(values) == expected


def test_grid_shape(grid):
    trace = _surface(grid)
    assert trace["type"] == "surface"
    assert trace["x"] == [0.0, 1.0]
    assert trace["y"] == [5.0, 6.0, 7.0]
    assert trace["z"] == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    assert [value for row in trace["z"] for value in row] == list(grid["z"])


def test_default_lighting_is_empty(grid):
    trace = _surface(grid)
    assert trace["lighting"] == {}
    assert "lightposition" not in trace
    assert "opacity" not in trace


def test_lighting_and_position(grid):
    trace = _surface(grid, lighting={"ambient": 0.5, "specular": 0.2, "position": (1, 2, 3)})
    assert trace["lighting"] == {"ambient": 0.5, "specular": 0.2}
    assert trace["lightposition"] == {"x": 1, "y": 2, "z": 3}


@pytest.mark.parametrize("lighting", [{"glow": 1.0}, {"position": (1, 2)}])
def test_bad_lighting(grid, lighting):
    with pytest.raises(ValueError):
        _surface(grid, lighting=lighting)


def test_scale_settings(grid):
    trace = _surface(
        grid,
        color_bar={"borderwidth": 1},
        color_scale="Cividis",
        reverse_scale=True,
        show_scale=False,
        opacity=0.5,
    )
    assert trace["colorbar"] == {"borderwidth": 1}
    assert trace["colorscale"] == "Cividis"
    assert trace["reversescale"] is True
    assert trace["showscale"] is False
    assert trace["opacity"] == 0.5


def test_empty_y_column_raises():
    with pytest.raises(ValueError):
        _surface(pd.DataFrame({"x": [1.0], "y": [None], "z": [1.0]}))


def test_missing_column(grid):
    with pytest.raises(KeyError):
        SurfacePlot(grid, "x", "y", "w")


def test_title_and_json_round_trip(grid):
    figure = SurfacePlot(grid, "x", "y", "z", plot_title="Surface Plot")
    assert figure.layout == {"title": {"text": "Surface Plot"}}
    assert json.loads(figure.to_json()) == figure.to_dict()