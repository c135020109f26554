"""Three-dimensional scatter plots, optionally split by a group column."""

from __future__ import annotations

from frameplot.figure import Figure, build_layout, build_marker
from frameplot.scatterplot import _grouped_traces, _marker_trace


class Scatter3dPlot(Figure):
    """A 3-D scatter plot with one trace per group, or a single trace without a group."""

    def __init__(self, data, x, y, z, *, group=None, opacity=None, size=None, color=None,
                 colors=None, shape=None, shapes=None, plot_title=None):
        layout = build_layout(plot_title, *(None,) * 10)
        columns = {"x": x, "y": y, "z": z}
        traces = _grouped_traces(
            data,
            group,
            lambda subset, name, marker: _marker_trace("scatter3d", subset, columns, name, marker),
            lambda index: build_marker(index, opacity, size, color, colors, shape, shapes),
        )
        super().__init__(traces=traces, layout=layout)