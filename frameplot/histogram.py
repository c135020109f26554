"""Histograms of a numeric column, optionally split by a group column."""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd

from frameplot.figure import Figure, build_marker, numeric_column
from frameplot.scatterplot import _grouped_traces, _titled_layout, _with_name


def _trace(
    data: pd.DataFrame, x: str, name: Optional[str], marker: dict[str, Any]
) -> dict[str, Any]:
    trace: dict[str, Any] = {
        "type": "histogram",
        "x": numeric_column(data, x),
        "histfunc": "count",
        "marker": marker,
    }
    return _with_name(trace, name)


class Histogram(Figure):
    """A histogram with overlaid traces, one per group when a group is given."""

    def __init__(self, data, x, *, group=None, opacity=None, color=None, colors=None,
                 plot_title=None, x_title=None, y_title=None, legend_title=None,
                 x_axis=None, y_axis=None, legend=None):
        layout = _titled_layout(plot_title, x_title, y_title, legend_title, x_axis, y_axis, legend)
        layout["barmode"] = "overlay"
        traces = _grouped_traces(
            data,
            group,
            lambda subset, name, marker: _trace(subset, x, name, marker),
            lambda index: build_marker(index, opacity, None, color, colors, None, None),
        )
        super().__init__(traces=traces, layout=layout)