"""Shared fixtures: small categorical tables."""
from __future__ import annotations

import pytest

from id3py import Dataset

# Quinlan's classic play-tennis table
TENNIS_HEADERS = ("Outlook", "Temperature", "Humidity", "Wind", "Play")
TENNIS_ROWS = (
    ("Sunny", "Hot", "High", "Weak", "No"),
    ("Sunny", "Hot", "High", "Strong", "No"),
    ("Overcast", "Hot", "High", "Weak", "Yes"),
    ("Rain", "Mild", "High", "Weak", "Yes"),
    ("Rain", "Cool", "Normal", "Weak", "Yes"),
    ("Rain", "Cool", "Normal", "Strong", "No"),
    ("Overcast", "Cool", "Normal", "Strong", "Yes"),
    ("Sunny", "Mild", "High", "Weak", "No"),
    ("Sunny", "Cool", "Normal", "Weak", "Yes"),
    ("Rain", "Mild", "Normal", "Weak", "Yes"),
    ("Sunny", "Mild", "Normal", "Strong", "Yes"),
    ("Overcast", "Mild", "High", "Strong", "Yes"),
    ("Overcast", "Hot", "Normal", "Weak", "Yes"),
    ("Rain", "Mild", "High", "Strong", "No"),
)


@pytest.fixture
def weather() -> Dataset:
    return Dataset(("Weather", "Play"),
                   (("Sunny", "Yes"), ("Sunny", "Yes"), ("Rainy", "No")))


@pytest.fixture
def tennis() -> Dataset:
    return Dataset(TENNIS_HEADERS, TENNIS_ROWS)


@pytest.fixture
def single_class() -> Dataset:
    return Dataset(("F1", "F2", "Label"),
                   (("x", "p", "A"), ("y", "q", "A"), ("z", "p", "A")))
