"""Pie charts counting the occurrences of each label in a column."""

from __future__ import annotations

from typing import Any

from frameplot.figure import Figure, build_layout, string_column


class PieChart(Figure):
    """A pie chart whose slices are the labels of one column."""

    def __init__(self, data, labels, *, hole=None, pull=None, rotation=None, plot_title=None):
        trace: dict[str, Any] = {
            "type": "pie",
            "labels": [label for label in string_column(data, labels) if label is not None],
        }
        options = {"hole": hole, "pull": pull, "rotation": rotation}
        trace.update({key: value for key, value in options.items() if value is not None})
        super().__init__(traces=[trace], layout=build_layout(plot_title, *(None,) * 10))