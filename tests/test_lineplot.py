import math

import pandas as pd
import pytest

from frameplot.lineplot import LinePlot


@pytest.fixture
def waves():
    xs = [i * 0.5 for i in range(10)]
    return pd.DataFrame(
        {"x": xs, "sine": [math.sin(v) for v in xs], "cosine": [math.cos(v) for v in xs]}
    )


def test_main_and_additional_lines(waves):
    plot = LinePlot(waves, "x", "sine", additional_lines=["cosine"])
    assert [trace["name"] for trace in plot.traces] == ["sine", "cosine"]
    for trace in plot.traces:
        assert trace["x"] == list(waves["x"])
        assert trace["y"] == list(waves[trace["name"]])


def test_mode_follows_with_shape(waves):
    assert LinePlot(waves, "x", "sine", with_shape=True).traces[0]["mode"] == "lines+markers"
    assert LinePlot(waves, "x", "sine", with_shape=False).traces[0]["mode"] == "lines"
    assert "mode" not in LinePlot(waves, "x", "sine").traces[0]


def test_styles_and_colors_per_line(waves):
    colors = [(255, 0, 0), (0, 255, 0)]
    styles = ["solid", "dot"]
    plot = LinePlot(
        waves,
        "x",
        "sine",
        additional_lines=["cosine"],
        colors=colors,
        lines=styles,
        width=3.0,
    )
    for index, trace in enumerate(plot.traces):
        assert trace["line"] == {"width": 3.0, "dash": styles[index]}
        assert trace["marker"]["color"] == "rgb({}, {}, {})".format(*colors[index])
    assert plot.traces[0]["marker"]["color"] == "rgb(255, 0, 0)"


def test_single_style_applies_to_all(waves):
    plot = LinePlot(waves, "x", "sine", additional_lines=["cosine"], line="dash")
    assert {trace["line"]["dash"] for trace in plot.traces} == {"dash"}


def test_invalid_line_style(waves):
    with pytest.raises(ValueError):
        LinePlot(waves, "x", "sine", line="zigzag")


def test_secondary_axis_layout(waves):
    plot = LinePlot(
        waves,
        "x",
        "sine",
        y2_title="second",
        y2_axis={"side": "right"},
        legend_title="series",
    )
    assert plot.layout["yaxis2"]["side"] == "right"
    assert plot.layout["yaxis2"]["title"] == {"text": "second"}
    assert plot.layout["legend"]["title"] == {"text": "series"}


def test_unknown_additional_line(waves):
    with pytest.raises(KeyError):
        LinePlot(waves, "x", "sine", additional_lines=["tangent"])