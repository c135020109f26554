"""Scatter plots of two numeric columns, optionally split by a group column."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Optional

import pandas as pd

from frameplot.figure import (
    Figure,
    build_layout,
    build_marker,
    filter_by_group,
    numeric_column,
    unique_groups,
)

Trace = dict[str, Any]
TraceMaker = Callable[[pd.DataFrame, Optional[str], Trace], Trace]
MarkerMaker = Callable[[int], Trace]


def _with_name(trace: Trace, name: Optional[str]) -> Trace:
    """Attach ``name`` to ``trace`` when one is given."""
    if name is not None:
        trace["name"] = name
    return trace


def _titled_layout(plot_title, x_title, y_title, legend_title, x_axis, y_axis, legend) -> Trace:
    """A layout with a single y axis and no z axis."""
    return build_layout(
        plot_title, x_title, y_title, None, None, legend_title, x_axis, y_axis, None, None, legend
    )


def _marker_trace(
    kind: str, data: pd.DataFrame, columns: Mapping[str, str], name: Optional[str], marker: Trace
) -> Trace:
    """A marker-only trace whose axes are read from numeric columns."""
    trace: Trace = {"type": kind}
    trace.update({axis: numeric_column(data, column) for axis, column in columns.items()})
    trace["mode"] = "markers"
    trace["marker"] = marker
    return _with_name(trace, name)


def _grouped_traces(
    data: pd.DataFrame, group: Optional[str], make_trace: TraceMaker, make_marker: MarkerMaker
) -> list[Trace]:
    """One trace for the whole frame, or one per value of the ``group`` column."""
    if group is None:
        return [make_trace(data, None, make_marker(0))]
    return [
        make_trace(filter_by_group(data, group, name), name, make_marker(index))
        for index, name in enumerate(unique_groups(data, group))
    ]


class ScatterPlot(Figure):
    """A scatter plot with one trace per group, or a single trace without a group."""

    def __init__(self, data, x, y, *, group=None, opacity=None, size=None, color=None,
                 colors=None, shape=None, shapes=None, plot_title=None, x_title=None,
                 y_title=None, legend_title=None, x_axis=None, y_axis=None, legend=None):
        layout = _titled_layout(plot_title, x_title, y_title, legend_title, x_axis, y_axis, legend)
        traces = _grouped_traces(
            data,
            group,
            lambda subset, name, marker: _marker_trace(
                "scatter", subset, {"x": x, "y": y}, name, marker
            ),
            lambda index: build_marker(index, opacity, size, color, colors, shape, shapes),
        )
        super().__init__(traces=traces, layout=layout)