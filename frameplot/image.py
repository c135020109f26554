"""Plots that show a raster image read from a file."""

from __future__ import annotations

from typing import Any

from PIL import Image as PILImage

from frameplot.figure import Figure, build_layout


def _trace(path) -> dict[str, Any]:
    with PILImage.open(path) as source:
        picture = source.convert("RGB")
    width, height = picture.size
    pixels = list(picture.getdata())
    rows = [
        [list(pixel) for pixel in pixels[start:start + width]]
        for start in range(0, width * height, width)
    ]
    return {"type": "image", "z": rows, "colormodel": "rgb"}


class Image(Figure):
    """A plot holding one image, its pixels given as RGB triples row by row."""

    def __init__(
        self,
        path,
        *,
        plot_title=None,
        x_title=None,
        y_title=None,
        x_axis=None,
        y_axis=None,
    ):
        layout = build_layout(
            plot_title,
            x_title,
            y_title,
            None,
            None,
            None,
            x_axis,
            y_axis,
            None,
            None,
            None,
        )
        super().__init__(traces=[_trace(path)], layout=layout)