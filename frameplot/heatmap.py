"""Heat maps of a numeric column over two category columns."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from frameplot.figure import Figure, numeric_column, string_column
from frameplot.scatterplot import _titled_layout


def _enum_value(value: Any) -> Any:
    """The value behind an enum member, or ``value`` itself."""
    return value.value if isinstance(value, Enum) else value


def _color_scale(value: Any) -> str:
    value = _enum_value(value)
    if not isinstance(value, str) or not value:
        raise ValueError(f"a colour scale must be a palette name, not {value!r}")
    return value


def _color_bar(value: Any) -> dict[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(f"a colour bar must be a mapping, not {type(value).__name__}")
    return copy.deepcopy(dict(value))


def _apply_scale_settings(
    trace: dict[str, Any],
    color_bar: Optional[Mapping[str, Any]],
    color_scale: Any,
    reverse_scale: Optional[bool],
    show_scale: Optional[bool],
) -> None:
    if color_bar is not None:
        trace["colorbar"] = _color_bar(color_bar)
    if color_scale is not None:
        trace["colorscale"] = _color_scale(color_scale)
    if reverse_scale is not None:
        trace["reversescale"] = reverse_scale
    if show_scale is not None:
        trace["showscale"] = show_scale


def _axes_layout(plot_title, x_title, y_title, x_axis, y_axis) -> dict[str, Any]:
    """A layout with titled x and y axes and no legend."""
    return _titled_layout(plot_title, x_title, y_title, None, x_axis, y_axis, None)


class HeatMap(Figure):
    """A heat map whose cell colours come from the ``z`` column."""

    def __init__(self, data, x, y, z, *, auto_color_scale=None, color_bar=None,
                 color_scale=None, reverse_scale=None, show_scale=None, plot_title=None,
                 x_title=None, y_title=None, x_axis=None, y_axis=None):
        layout = _axes_layout(plot_title, x_title, y_title, x_axis, y_axis)
        trace: dict[str, Any] = {
            "type": "heatmap",
            "x": string_column(data, x),
            "y": string_column(data, y),
            "z": numeric_column(data, z),
        }
        if auto_color_scale is not None:
            trace["autocolorscale"] = auto_color_scale
        _apply_scale_settings(trace, color_bar, color_scale, reverse_scale, show_scale)
        super().__init__(traces=[trace], layout=layout)