import logging

import pytest

from id3py import UNKNOWN, ConfigurationError, Dataset, ID3Model, Leaf, train


def test_train_weather_end_to_end(weather):
    model = train(weather, "Play")
    assert isinstance(model, ID3Model)
    assert model.root.feature == "Weather"
    assert model.predict({"Weather": "Sunny"}) == "Yes"
    assert model.predict({"Weather": "Foggy"}) is UNKNOWN
    assert model.predict({}) is UNKNOWN
    assert model.features == ["Weather"]
    assert model.n_leaves() == 2
    assert model.depth() == 1


def test_train_single_class(single_class):
    model = train(single_class, "Label")
    assert model.root == Leaf("A")
    assert model.predict({"F1": "x"}) == "A"
    assert model.depth() == 0


def test_train_empty_dataset_raises():
    with pytest.raises(ConfigurationError, match="no rows"):
        train(Dataset(("Weather", "Play"), ()), "Play")


def test_train_missing_target_raises(weather):
    with pytest.raises(ConfigurationError, match="Outcome"):
        train(weather, "Outcome")


def test_configuration_error_is_value_error(weather):
    with pytest.raises(ValueError):
        train(weather, "Outcome")


def test_model_is_read_only(weather):
    model = train(weather, "Play")
    with pytest.raises(AttributeError):
        model.root = Leaf("No")


def test_train_logs_summary(tennis, caplog):
    with caplog.at_level(logging.DEBUG, logger="id3py"):
        train(tennis, "Play")
    messages = [r.getMessage() for r in caplog.records]
    assert any("split 14 rows on 'Outlook'" in m for m in messages)
    assert any("5 leaves, depth 2" in m for m in messages)
