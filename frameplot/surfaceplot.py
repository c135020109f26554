"""Three-dimensional surface plots built from x, y and z columns."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

import pandas as pd

from frameplot.figure import Figure, build_layout, numeric_column
from frameplot.heatmap import _apply_scale_settings

_LIGHTING_KEYS = frozenset({"ambient", "diffuse", "fresnel", "roughness", "specular"})


def unique_ordered(values: Iterable[Optional[float]]) -> list[float]:
    """Return the distinct non-missing values in order of first appearance."""
    return list(dict.fromkeys(value for value in values if value is not None))


def _check_lighting(lighting: Optional[Mapping[str, Any]]) -> None:
    if lighting is None:
        return
    if not isinstance(lighting, Mapping):
        raise TypeError(f"lighting must be a mapping, not {type(lighting).__name__}")
    unknown = set(lighting) - _LIGHTING_KEYS - {"position"}
    if unknown:
        raise ValueError(f"unknown lighting settings: {', '.join(sorted(unknown))}")


def _lighting(lighting: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    if lighting is None:
        return {}
    return {key: lighting[key] for key in sorted(_LIGHTING_KEYS) if lighting.get(key) is not None}


def _light_position(lighting: Optional[Mapping[str, Any]]) -> Optional[dict[str, float]]:
    if lighting is None or lighting.get("position") is None:
        return None
    position = list(lighting["position"])
    if len(position) != 3:
        raise ValueError(f"a light position needs three coordinates, got {len(position)}")
    return dict(zip(("x", "y", "z"), position))


def _trace(
    data: pd.DataFrame,
    x: str,
    y: str,
    z: str,
    color_bar,
    color_scale,
    reverse_scale: Optional[bool],
    show_scale: Optional[bool],
    lighting: Optional[Mapping[str, Any]],
    opacity: Optional[float],
) -> dict[str, Any]:
    xs = unique_ordered(numeric_column(data, x))
    ys = unique_ordered(numeric_column(data, y))
    heights = numeric_column(data, z)
    if not ys:
        raise ValueError(f"column {y!r} holds no values to lay out the surface grid")
    width = len(ys)
    grid = [heights[start:start + width] for start in range(0, len(heights), width)]

    _check_lighting(lighting)
    trace: dict[str, Any] = {"type": "surface", "z": grid, "x": xs, "y": ys}
    _apply_scale_settings(trace, color_bar, color_scale, reverse_scale, show_scale)
    position = _light_position(lighting)
    if position is not None:
        trace["lightposition"] = position
    trace["lighting"] = _lighting(lighting)
    if opacity is not None:
        trace["opacity"] = opacity
    return trace


class SurfacePlot(Figure):
    """A surface whose grid has a row per distinct x and a column per distinct y."""

    def __init__(
        self,
        data,
        x,
        y,
        z,
        *,
        color_bar=None,
        color_scale=None,
        reverse_scale=None,
        show_scale=None,
        lighting=None,
        opacity=None,
        plot_title=None,
    ):
        layout = build_layout(
            plot_title, None, None, None, None, None, None, None, None, None, None
        )
        traces = [
            _trace(
                data,
                x,
                y,
                z,
                color_bar,
                color_scale,
                reverse_scale,
                show_scale,
                lighting,
                opacity,
            )
        ]
        super().__init__(traces=traces, layout=layout)