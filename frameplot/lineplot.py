"""Line plots of one or more numeric series against a numeric x column."""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd

from frameplot.figure import Figure, build_layout, build_line, build_marker, numeric_column
from frameplot.scatterplot import _with_name


def _trace(
    data: pd.DataFrame,
    x: str,
    y: str,
    with_shape: Optional[bool],
    marker: dict[str, Any],
    line: dict[str, Any],
) -> dict[str, Any]:
    trace: dict[str, Any] = {
        "type": "scatter",
        "x": numeric_column(data, x),
        "y": numeric_column(data, y),
    }
    if with_shape is not None:
        trace["mode"] = "lines+markers" if with_shape else "lines"
    trace["marker"] = marker
    trace["line"] = line
    return _with_name(trace, y)


class LinePlot(Figure):
    """A line plot with the main series first and any additional series after it."""

    def __init__(self, data, x, y, *, additional_lines=None, size=None, color=None,
                 colors=None, with_shape=None, shape=None, shapes=None, width=None,
                 line=None, lines=None, plot_title=None, x_title=None, y_title=None,
                 y2_title=None, legend_title=None, x_axis=None, y_axis=None,
                 y2_axis=None, legend=None):
        layout = build_layout(
            plot_title, x_title, y_title, y2_title, None,
            legend_title, x_axis, y_axis, y2_axis, None, legend,
        )
        traces = [
            _trace(
                data,
                x,
                series,
                with_shape,
                build_marker(index, None, size, color, colors, shape, shapes),
                build_line(index, width, line, lines),
            )
            for index, series in enumerate([y, *(additional_lines or [])])
        ]
        super().__init__(traces=traces, layout=layout)