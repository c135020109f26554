"""Scatter plots of latitude and longitude points on a street map."""

from __future__ import annotations

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


def _mapbox(center, zoom) -> dict[str, Any]:
    mapbox: dict[str, Any] = {"style": "open-street-map", "zoom": 0}
    if center is not None:
        point = list(center)
        if len(point) != 2:
            raise ValueError(
                f"a map centre needs a latitude and a longitude, got {len(point)} values"
            )
        mapbox["center"] = {"lat": point[0], "lon": point[1]}
    if zoom is not None:
        mapbox["zoom"] = zoom
    return mapbox


def _trace(
    data: pd.DataFrame,
    latitude: str,
    longitude: str,
    name: Optional[str],
    marker: dict[str, Any],
) -> dict[str, Any]:
    trace: dict[str, Any] = {
        "type": "scattermapbox",
        "lat": numeric_column(data, latitude),
        "lon": numeric_column(data, longitude),
        "mode": "markers",
        "marker": marker,
    }
    if name is not None:
        trace["name"] = name
    return trace


class ScatterMap(Figure):
    """Points placed on a map, one trace per group when a group is given."""

    def __init__(
        self,
        data,
        latitude,
        longitude,
        *,
        center=None,
        zoom=None,
        group=None,
        opacity=None,
        size=None,
        color=None,
        colors=None,
        shape=None,
        shapes=None,
        plot_title=None,
        legend_title=None,
        legend=None,
    ):
        layout = build_layout(
            plot_title, None, None, None, None, legend_title, None, None, None, None, legend
        )
        layout["margin"] = {"b": 0}
        layout["mapbox"] = _mapbox(center, zoom)

        if group is None:
            marker = build_marker(0, opacity, size, color, colors, shape, shapes)
            traces = [_trace(data, latitude, longitude, None, marker)]
        else:
            traces = [
                _trace(
                    filter_by_group(data, group, name),
                    latitude,
                    longitude,
                    name,
                    build_marker(index, opacity, size, color, colors, shape, shapes),
                )
                for index, name in enumerate(unique_groups(data, group))
            ]

        super().__init__(traces=traces, layout=layout)