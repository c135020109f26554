"""Box plots of a numeric column split by a category column."""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd

from frameplot.figure import (
    Figure,
    Orientation,
    build_marker,
    numeric_column,
    string_column,
)
from frameplot.scatterplot import _grouped_traces, _titled_layout, _with_name


def _trace(
    data: pd.DataFrame,
    labels: str,
    values: str,
    orientation: Optional[Orientation],
    name: Optional[str],
    box_points: Optional[bool],
    point_offset: Optional[float],
    jitter: Optional[float],
    marker: dict[str, Any],
) -> dict[str, Any]:
    categories = string_column(data, labels)
    numbers = numeric_column(data, values)
    orientation = orientation or Orientation.VERTICAL

    if orientation is Orientation.VERTICAL:
        x, y = categories, numbers
    else:
        x, y = numbers, categories

    trace: dict[str, Any] = {"type": "box", "x": x, "y": y, "orientation": orientation.to_plotly()}
    if box_points is not None:
        trace["boxpoints"] = "all" if box_points else False
    if point_offset is not None:
        trace["pointpos"] = point_offset
    if jitter is not None:
        trace["jitter"] = jitter
    trace["marker"] = marker
    return _with_name(trace, name)


class BoxPlot(Figure):
    """A box plot with one trace per group, or a single trace without a group."""

    def __init__(self, data, labels, values, *, orientation=None, group=None,
                 box_points=None, point_offset=None, jitter=None, opacity=None,
                 color=None, colors=None, plot_title=None, x_title=None, y_title=None,
                 legend_title=None, x_axis=None, y_axis=None, legend=None):
        layout = _titled_layout(plot_title, x_title, y_title, legend_title, x_axis, y_axis, legend)
        layout["boxmode"] = "group"
        traces = _grouped_traces(
            data,
            group,
            lambda subset, name, marker: _trace(
                subset, labels, values, orientation, name,
                box_points, point_offset, jitter, marker,
            ),
            lambda index: build_marker(index, opacity, None, color, colors, None, None),
        )
        super().__init__(traces=traces, layout=layout)