"""Plotly figure specifications built from pandas DataFrames."""

__version__ = "0.9.6"

__all__ = [
    "boxplot",
    "contourplot",
    "figure",
    "heatmap",
    "histogram",
    "image",
    "lineplot",
    "piechart",
    "sankeydiagram",
    "scatter3dplot",
    "scattermap",
    "scatterplot",
    "surfaceplot",
    "timeseriesplot",
]