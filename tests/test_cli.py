import io

import pytest

from id3py.cli import main, parse_query


@pytest.fixture
def weather_csv(tmp_path):
    path = tmp_path / "weather.csv"
    path.write_text("Weather,Play\nSunny,Yes\nSunny,Yes\nRainy,No\n")
    return path


def test_parse_query():
    assert parse_query("Weather=Sunny, Wind = Weak") == {"Weather": "Sunny", "Wind": "Weak"}
    assert parse_query("a=b=c") == {"a": "b=c"}
    assert parse_query("no pairs here") == {}
    assert parse_query("a=1,junk,a=2") == {"a": "2"}


def test_cli_session(weather_csv, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(
        "Weather=Sunny\nWeather=Foggy\nnonsense\nquit\nWeather=Rainy\n"))
    assert main([str(weather_csv), "Play"]) == 0
    out = capsys.readouterr().out
    assert "Rows: 3" in out
    assert "Root: Weather" in out
    assert "Prediction: Yes" in out
    assert "Prediction: Unknown" in out
    assert "Invalid input format" in out
    # input after quit is ignored
    assert "Prediction: No" not in out


def test_cli_prompts_for_file_and_target(weather_csv, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{weather_csv}\nPlay\nWeather=Rainy\n"))
    assert main([]) == 0
    assert "Prediction: No" in capsys.readouterr().out


def test_cli_unknown_target(weather_csv, capsys):
    assert main([str(weather_csv), "Outcome"]) == 1
    assert "Outcome" in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.csv"), "Play"]) == 1
    assert "cannot open" in capsys.readouterr().err
