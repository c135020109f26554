"""Sankey diagrams of flows between labelled nodes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Optional

import pandas as pd

from frameplot.figure import (
    Figure,
    Orientation,
    _rgb,
    build_layout,
    numeric_column,
    string_column,
)

_ARRANGEMENTS = frozenset({"snap", "perpendicular", "freeform", "fixed"})


def _arrangement(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if value not in _ARRANGEMENTS:
        raise ValueError(f"unknown node arrangement {value!r}")
    return value


def _orientation(value: Any) -> str:
    if isinstance(value, Orientation):
        return value.to_plotly()
    try:
        return Orientation(value).to_plotly()
    except ValueError:
        raise ValueError(f"unknown orientation {value!r}") from None


def build_label_index(
    sources: Sequence[Optional[str]], targets: Sequence[Optional[str]]
) -> tuple[list[str], dict[str, int]]:
    """Number every distinct label, sources first, in order of first appearance."""
    label_to_idx: dict[str, int] = {}
    for label in (*sources, *targets):
        if label is not None and label not in label_to_idx:
            label_to_idx[label] = len(label_to_idx)
    return list(label_to_idx), label_to_idx


def column_to_indices(
    column: Sequence[Optional[str]], label_to_idx: Mapping[str, int]
) -> list[int]:
    """Replace each non-missing label by its node index."""
    indices = []
    for label in column:
        if label is None:
            continue
        if label not in label_to_idx:
            raise KeyError(f"label {label!r} has no node index")
        indices.append(label_to_idx[label])
    return indices


def _trace(
    data: pd.DataFrame,
    sources: str,
    targets: str,
    values: str,
    orientation,
    arrangement,
    pad: Optional[int],
    thickness: Optional[int],
    node_color,
    node_colors,
    link_color,
    link_colors,
) -> dict[str, Any]:
    source_labels = string_column(data, sources)
    target_labels = string_column(data, targets)
    flow_values = numeric_column(data, values)

    labels, label_to_idx = build_label_index(source_labels, target_labels)

    node: dict[str, Any] = {"label": labels}
    if pad is not None:
        node["pad"] = pad
    if thickness is not None:
        node["thickness"] = thickness
    if node_color is not None:
        node["color"] = _rgb(node_color)
    if node_colors is not None:
        node["color"] = [_rgb(color) for color in node_colors]

    link: dict[str, Any] = {
        "source": column_to_indices(source_labels, label_to_idx),
        "target": column_to_indices(target_labels, label_to_idx),
        "value": flow_values,
    }
    if link_color is not None:
        link["color"] = _rgb(link_color)
    if link_colors is not None:
        link["color"] = [_rgb(color) for color in link_colors]

    trace: dict[str, Any] = {"type": "sankey", "node": node, "link": link}
    if orientation is not None:
        trace["orientation"] = _orientation(orientation)
    if arrangement is not None:
        trace["arrangement"] = _arrangement(arrangement)
    return trace


class SankeyDiagram(Figure):
    """A Sankey diagram whose links run from ``sources`` to ``targets``."""

    def __init__(
        self,
        data,
        sources,
        targets,
        values,
        *,
        orientation=None,
        arrangement=None,
        pad=None,
        thickness=None,
        node_color=None,
        node_colors=None,
        link_color=None,
        link_colors=None,
        plot_title=None,
    ):
        layout = build_layout(
            plot_title, None, None, None, None, None, None, None, None, None, None
        )
        traces = [
            _trace(
                data,
                sources,
                targets,
                values,
                orientation,
                arrangement,
                pad,
                thickness,
                node_color,
                node_colors,
                link_color,
                link_colors,
            )
        ]
        super().__init__(traces=traces, layout=layout)