"""Pytest configuration and fixtures for vanilla tests."""

from datetime import date

import pytest

from vanilla.core.models import ValueRecord


@pytest.fixture(autouse=True)
def clear_log_level_env(monkeypatch):
    """Keep VANILLA_LOG_LEVEL from the outer environment out of tests."""
    monkeypatch.delenv("VANILLA_LOG_LEVEL", raising=False)


@pytest.fixture
def alpha_record():
    """Record with only label and age set."""
    record = ValueRecord()
    record.label = "alpha"
    record.age = 30
    return record


@pytest.fixture
def full_record_data():
    """Values for every field, keyed by attribute name."""
    return {
        "label": "bravo",
        "age": 42,
        "startDate": date(2015, 6, 1),
        "birthday": "1973-04-12",
        "pct": 0.75,
    }
