"""Figure model and the helpers shared by every plot type."""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, TypeVar, Union

import pandas as pd
from pandas.api.types import is_numeric_dtype

Rgb = tuple[int, int, int]
Text = Union[str, Mapping[str, Any]]

LINE_STYLES = frozenset(
    {"solid", "dot", "dash", "longdash", "dashdot", "longdashdot"}
)

_T = TypeVar("_T")


class Orientation(Enum):
    """Direction in which a plot is drawn."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    def to_plotly(self) -> str:
        """Return the orientation code used in the figure description."""
        return "v" if self is Orientation.VERTICAL else "h"


@dataclass
class Figure:
    """A set of traces together with the layout they are drawn in."""

    traces: list[dict[str, Any]] = field(default_factory=list)
    layout: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the figure as a plain, independent dictionary."""
        return {
            "data": copy.deepcopy(self.traces),
            "layout": copy.deepcopy(self.layout),
        }

    def to_json(self) -> str:
        """Return the figure serialised as JSON."""
        return json.dumps(self.to_dict())


def _column(data: pd.DataFrame, column: str) -> pd.Series:
    if column not in data.columns:
        raise KeyError(f"column {column!r} not found")
    return data[column]


def numeric_column(data: pd.DataFrame, column: str) -> list[Optional[float]]:
    """Return a column as floats, with missing values as None."""
    series = _column(data, column)
    if not is_numeric_dtype(series):
        series = pd.to_numeric(series)
    return [None if pd.isna(value) else float(value) for value in series]


def string_column(data: pd.DataFrame, column: str) -> list[Optional[str]]:
    """Return a column as strings, with missing values as None."""
    return [None if pd.isna(value) else str(value) for value in _column(data, column)]


def unique_groups(data: pd.DataFrame, column: str) -> list[str]:
    """Return the distinct non-missing values of a column as sorted strings."""
    return sorted({value for value in string_column(data, column) if value is not None})


def filter_by_group(data: pd.DataFrame, column: str, value: str) -> pd.DataFrame:
    """Return the rows whose value in ``column`` reads as ``value``."""
    mask = _column(data, column).map(lambda item: not pd.isna(item) and str(item) == value)
    return data[mask.astype(bool)]


def _title(text: Text) -> dict[str, Any]:
    if isinstance(text, str):
        return {"text": text}
    if isinstance(text, Mapping):
        if "text" not in text:
            raise ValueError("a title mapping needs a 'text' entry")
        return dict(text)
    raise TypeError(f"a title must be a string or a mapping, not {type(text).__name__}")


def _section(settings: Optional[Mapping[str, Any]], title: Optional[Text]) -> dict[str, Any]:
    section = copy.deepcopy(dict(settings)) if settings else {}
    if title is not None:
        section["title"] = _title(title)
    return section


def build_layout(
    plot_title,
    x_title,
    y_title,
    y2_title,
    z_title,
    legend_title,
    x_axis,
    y_axis,
    y2_axis,
    z_axis,
    legend,
) -> dict[str, Any]:
    """Assemble the layout from titles and axis and legend settings."""
    layout: dict[str, Any] = {}
    if plot_title is not None:
        layout["title"] = _title(plot_title)

    if xaxis := _section(x_axis, x_title):
        layout["xaxis"] = xaxis
    if yaxis := _section(y_axis, y_title):
        layout["yaxis"] = yaxis
    if yaxis2 := _section(y2_axis, y2_title):
        yaxis2.setdefault("overlaying", "y")
        layout["yaxis2"] = yaxis2
    if zaxis := _section(z_axis, z_title):
        layout["scene"] = {"zaxis": zaxis}
    if legend_section := _section(legend, legend_title):
        layout["legend"] = legend_section
    return layout


def _rgb(color: Sequence[int]) -> str:
    channels = tuple(color)
    if len(channels) != 3:
        raise ValueError(f"a colour needs three channels, got {len(channels)}")
    for channel in channels:
        if not isinstance(channel, int) or isinstance(channel, bool) or not 0 <= channel <= 255:
            raise ValueError(f"colour channel {channel!r} is not an integer in 0..255")
    return "rgb({}, {}, {})".format(*channels)


def _pick(index: int, single: Optional[_T], many: Optional[Sequence[_T]]) -> Optional[_T]:
    if many is not None and index < len(many):
        return many[index]
    return single


def build_marker(index, opacity, size, color, colors, shape, shapes) -> dict[str, Any]:
    """Build the marker of the trace at ``index``; per-trace lists win over single values."""
    marker: dict[str, Any] = {}
    if opacity is not None:
        marker["opacity"] = opacity
    if size is not None:
        marker["size"] = size
    chosen_color = _pick(index, color, colors)
    if chosen_color is not None:
        marker["color"] = _rgb(chosen_color)
    chosen_shape = _pick(index, shape, shapes)
    if chosen_shape is not None:
        marker["symbol"] = str(chosen_shape)
    return marker


def build_line(index, width, style, styles) -> dict[str, Any]:
    """Build the line of the trace at ``index``; per-trace styles win over a single one."""
    line: dict[str, Any] = {}
    if width is not None:
        line["width"] = width
    chosen_style = _pick(index, style, styles)
    if chosen_style is not None:
        if chosen_style not in LINE_STYLES:
            raise ValueError(f"unknown line style {chosen_style!r}")
        line["dash"] = chosen_style
    return line