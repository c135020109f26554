# frameplot

frameplot turns columns of a pandas `DataFrame` into Plotly figure
specifications. Each plot class reads the columns you name, splits the data
into groups when asked, applies styling, and produces a figure that can be
turned into a plain dictionary or into JSON. Any Plotly front end can then
render it.

## Installation

```
pip install frameplot
```

## Plot types

| Class            | Module                     | Shows                                              |
|------------------|----------------------------|----------------------------------------------------|
| `ScatterPlot`    | `frameplot.scatterplot`    | points, optionally grouped by a column             |
| `LinePlot`       | `frameplot.lineplot`       | one or more numeric series against a numeric `x`   |
| `TimeSeriesPlot` | `frameplot.timeseriesplot` | series against a time column, optional second y    |
| `BoxPlot`        | `frameplot.boxplot`        | value distributions per label                      |
| `Histogram`      | `frameplot.histogram`      | counts of a numeric column, overlaid per group     |
| `PieChart`       | `frameplot.piechart`       | share of each label                                |
| `HeatMap`        | `frameplot.heatmap`        | a value per `x`/`y` cell                           |
| `ContourPlot`    | `frameplot.contourplot`    | level curves of `z` over `x`/`y`                   |
| `SurfacePlot`    | `frameplot.surfaceplot`    | a 3-D surface from gridded `x`, `y`, `z`           |
| `Scatter3dPlot`  | `frameplot.scatter3dplot`  | points in three dimensions                         |
| `ScatterMap`     | `frameplot.scattermap`     | latitude/longitude points on a street map          |
| `SankeyDiagram`  | `frameplot.sankeydiagram`  | flows between named nodes                          |
| `Image`          | `frameplot.image`          | an image file, as rows of RGB pixels               |

Every plot is a `frameplot.figure.Figure`, a dataclass holding `traces` and
`layout`. `to_dict()` returns an independent copy shaped as
`{"data": [...], "layout": {...}}`, and `to_json()` returns the same as a
JSON string.

## Example

```python
import pandas as pd

from frameplot.scatterplot import ScatterPlot

penguins = pd.DataFrame(
    {
        "species": ["Adelie", "Gentoo", "Adelie", "Chinstrap"],
        "body_mass_g": [3750, 5400, 3800, 3700],
        "flipper_length_mm": [181, 230, 186, 195],
    }
)

plot = ScatterPlot(
    penguins,
    "body_mass_g",
    "flipper_length_mm",
    group="species",
    opacity=0.5,
    size=12,
    colors=[(178, 34, 34), (65, 105, 225), (255, 140, 0)],
    shapes=["circle", "square", "diamond"],
    plot_title="Scatter Plot",
    x_title="body mass (g)",
    y_title="flipper length (mm)",
    legend_title="species",
)

spec = plot.to_dict()      # {"data": [...], "layout": {...}}
print(plot.to_json())
```

With `group` set, one trace is made for each distinct non-missing value of the
group column, in sorted order, and each trace is named after its value. Lists
such as `colors`, `shapes` and `lines` are handed out to the traces in that
order; a trace beyond the end of a list falls back to the single `color`,
`shape` or `line`.

A Sankey diagram needs the source, target and value columns. Nodes are
numbered in order of first appearance, sources before targets:

```python
from frameplot.sankeydiagram import SankeyDiagram

flows = pd.DataFrame(
    {
        "source": ["A1", "A2", "A1", "B1", "B2", "B2"],
        "target": ["B1", "B2", "B2", "C1", "C1", "C2"],
        "value": [8, 4, 2, 8, 4, 2],
    }
)

SankeyDiagram(flows, "source", "target", "value", pad=20, thickness=30).to_json()
```

## Options and their forms

- Titles (`plot_title`, `x_title`, `legend_title` and the like) are a string,
  or a mapping that holds a `"text"` entry along with any other title settings.
- Axis and legend settings (`x_axis`, `y_axis`, `legend`, ...) are mappings.
  They are copied into the layout as given, with the matching title added.
  A second y axis gets `"overlaying": "y"` unless the mapping sets it.
- Colours are `(r, g, b)` tuples of integers in 0..255. Anything else raises
  `ValueError`.
- Line styles are one of `solid`, `dot`, `dash`, `longdash`, `dashdot` and
  `longdashdot`. These are listed in `frameplot.figure.LINE_STYLES`.
- `frameplot.figure.Orientation` has `VERTICAL` and `HORIZONTAL`.
  `SankeyDiagram` also accepts the strings `"vertical"` and `"horizontal"`.
- Colour scales (`HeatMap`, `ContourPlot`, `SurfacePlot`) are palette names,
  given as a string or as an enum member with a string value. A colour bar is a
  mapping of colour bar settings.
- `ContourPlot` `coloring` is one of `fill`, `heatmap`, `lines` and `none`.
- `SankeyDiagram` `arrangement` is one of `snap`, `perpendicular`, `freeform`
  and `fixed`.
- `SurfacePlot` `lighting` is a mapping that may hold `ambient`, `diffuse`,
  `fresnel`, `roughness`, `specular`, and a three-value `position`.
- `ScatterMap` uses the `open-street-map` style. It takes an optional
  `(lat, lon)` `center` and a `zoom`, which defaults to 0.
- In a `TimeSeriesPlot`, the additional series go on the second y axis
  (`"y2"`) when `y_axis2` is given.

## Column helpers

`frameplot.figure` also holds the helpers that the plot classes share:

- `numeric_column` and `string_column` read a column, with missing values as
  `None`.
- `unique_groups` and `filter_by_group` split a frame by a column.
- `build_layout`, `build_marker` and `build_line` assemble figure parts.

A column that does not exist raises `KeyError`. A column that cannot be read
as numbers raises `ValueError`.

`frameplot.sankeydiagram` exposes `build_label_index` and `column_to_indices`.
`frameplot.surfaceplot` exposes `unique_ordered`.

## What it does not do

frameplot only builds figure descriptions. It does not draw them. It does not
open a browser or window, and it does not write HTML or static image files.
Pass the output of `to_dict()` or `to_json()` to a Plotly renderer for that.
There is no bar chart class and no command-line tool.

## Running the tests

```
pip install "frameplot[test]"
pytest
```