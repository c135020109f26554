"""Contour plots of a numeric surface given as x, y and z columns."""

from __future__ import annotations

from typing import Any

from frameplot.figure import Figure, numeric_column
from frameplot.heatmap import _apply_scale_settings, _axes_layout, _enum_value

_COLORINGS = frozenset({"fill", "heatmap", "lines", "none"})


def _coloring(value: Any) -> str:
    value = _enum_value(value)
    if value not in _COLORINGS:
        raise ValueError(f"unknown contour coloring {value!r}")
    return value


class ContourPlot(Figure):
    """A contour plot drawing the level curves of the ``z`` column."""

    def __init__(self, data, x, y, z, *, color_bar=None, color_scale=None,
                 reverse_scale=None, show_scale=None, show_lines=None, coloring=None,
                 plot_title=None, x_title=None, y_title=None, x_axis=None, y_axis=None):
        layout = _axes_layout(plot_title, x_title, y_title, x_axis, y_axis)
        trace: dict[str, Any] = {"type": "contour"}
        trace.update({axis: numeric_column(data, column) for axis, column in zip("xyz", (x, y, z))})
        _apply_scale_settings(trace, color_bar, color_scale, reverse_scale, show_scale)

        contours: dict[str, Any] = {}
        if coloring is not None:
            contours["coloring"] = _coloring(coloring)
        if show_lines is not None:
            contours["showlines"] = show_lines
        trace["contours"] = contours
        super().__init__(traces=[trace], layout=layout)