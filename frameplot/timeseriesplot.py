"""Time series plots of one or more numeric series against a time column."""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd

from frameplot.figure import (
    Figure,
    build_layout,
    build_line,
    build_marker,
    numeric_column,
    string_column,
)


def _trace(
    data: pd.DataFrame,
    x: str,
    y: str,
    name: Optional[str],
    with_shape: Optional[bool],
    marker: dict[str, Any],
    line: dict[str, Any],
    axis: Optional[str],
) -> dict[str, Any]:
    trace: dict[str, Any] = {
        "type": "scatter",
        "x": string_column(data, x),
        "y": numeric_column(data, y),
    }
    if with_shape is not None:
        trace["mode"] = "lines+markers" if with_shape else "lines"
    trace["marker"] = marker
    trace["line"] = line
    if name is not None:
        trace["name"] = name
    if axis:
        trace["yaxis"] = axis
    return trace


class TimeSeriesPlot(Figure):
    """A time series plot; additional series go on the second y axis when one is given."""

    def __init__(
        self,
        data,
        x,
        y,
        *,
        additional_series=None,
        size=None,
        color=None,
        colors=None,
        with_shape=None,
        shape=None,
        shapes=None,
        width=None,
        line=None,
        lines=None,
        plot_title=None,
        x_title=None,
        y_title=None,
        y_title2=None,
        legend_title=None,
        x_axis=None,
        y_axis=None,
        y_axis2=None,
        legend=None,
    ):
        layout = build_layout(
            plot_title,
            x_title,
            y_title,
            y_title2,
            None,
            legend_title,
            x_axis,
            y_axis,
            y_axis2,
            None,
            legend,
        )

        secondary_axis = "y2" if y_axis2 is not None else None
        series_names = [y, *(additional_series or [])]
        traces = [
            _trace(
                data,
                x,
                series,
                series,
                with_shape,
                build_marker(index, None, size, color, colors, shape, shapes),
                build_line(index, width, line, lines),
                secondary_axis if index > 0 else None,
            )
            for index, series in enumerate(series_names)
        ]

        super().__init__(traces=traces, layout=layout)