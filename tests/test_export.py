import os

import pytest

from id3py import Leaf, train
from id3py.export import export_graphviz, export_rules, export_text, summary


def test_export_text_weather(weather):
    model = train(weather, "Play")
    assert export_text(model.root) == "\n".join([
        "Root: Weather",
        "  Weather == Sunny:",
        "    -> Yes",
        "  Weather == Rainy:",
        "    -> No",
    ])


def test_export_text_nested(tennis):
    text = export_text(train(tennis, "Play").root)
    lines = text.splitlines()
    assert lines[0] == "Root: Outlook"
    assert lines[1] == "  Outlook == Sunny:"
    assert lines[2] == "    Split: Humidity"
    assert lines[3] == "      Humidity == High:"
    assert lines[4] == "        -> No"


def test_export_text_single_leaf():
    assert export_text(Leaf("A")) == "-> A"


def test_export_rules(tennis):
    rules = export_rules(train(tennis, "Play").root)
    assert len(rules) == 5
    assert rules[0] == "Outlook = Sunny AND Humidity = High => No"
    assert "Outlook = Overcast => Yes" in rules
    assert all("=>" in r for r in rules)


def test_summary(weather):
    assert summary(train(weather, "Play")).splitlines() == [
        "Dataset Information:",
        "===================",
        "Rows: 3",
        "Columns: 2",
        "Features: Weather Play",
        "Target: Play",
    ]


def test_export_graphviz_source(tennis):
    pytest.importorskip("graphviz")
    src = export_graphviz(train(tennis, "Play").root)
    assert "Outlook" in src
    assert "class=Yes" in src
    # 8 nodes, 7 edges
    assert src.count("->") == 7


def test_export_graphviz_dot_file(weather, tmp_path):
    pytest.importorskip("graphviz")
    out_path = export_graphviz(train(weather, "Play").root,
                               str(tmp_path / "weather_tree"), format="dot")
    assert out_path.endswith(".dot")
    assert os.path.exists(out_path)
