import json

import pandas as pd
import pytest

from frameplot.piechart import PieChart


@pytest.fixture
def species():
    return pd.DataFrame({"species": ["Adelie", None, "Gentoo", "Adelie", "Chinstrap"]})


def test_labels_skip_missing_values(species):
    plot = PieChart(species, "species")
    (trace,) = plot.traces
    assert trace["labels"] == ["Adelie", "Gentoo", "Adelie", "Chinstrap"]
    assert "hole" not in trace and "pull" not in trace and "rotation" not in trace


def test_options_are_passed_through(species):
    plot = PieChart(species, "species", hole=0.4, pull=0.01, rotation=20.0)
    (trace,) = plot.traces
    assert trace["hole"] == 0.4
    assert trace["pull"] == 0.01
    assert trace["rotation"] == 20.0


def test_layout_holds_only_the_title(species):
    plot = PieChart(species, "species", plot_title={"text": "Pie Chart", "size": 18})
    assert plot.layout == {"title": {"text": "Pie Chart", "size": 18}}
    assert PieChart(species, "species").layout == {}


def test_json_round_trip(species):
    plot = PieChart(species, "species", hole=0.4)
    assert json.loads(plot.to_json()) == plot.to_dict()


def test_bad_title_raises(species):
    with pytest.raises(ValueError):
        PieChart(species, "species", plot_title={"size": 18})


def test_missing_column_raises(species):
    with pytest.raises(KeyError):
        PieChart(species, "island")