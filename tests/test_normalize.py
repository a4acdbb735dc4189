"""Tests for turning raw form records into a Session."""
from datetime import datetime, timedelta, timezone

import pytest

from bac_engine.config import DEFAULT_CONFIG, ModelConfig
from bac_engine.normalize import normalize, parse_sex, parse_time
from bac_engine.session import Sex

NOW = datetime(2024, 5, 1, 21, 45)


def test_weight_clamped_and_defaulted():
    assert normalize({"weightKg": 5}, now=NOW).weight_kg == 30.0
    assert normalize({"weightKg": -80}, now=NOW).weight_kg == 30.0
    assert normalize({"weightKg": "abc"}, now=NOW).weight_kg == 70.0
    assert normalize({"weightKg": float("nan")}, now=NOW).weight_kg == 70.0
    assert normalize({"weightKg": "82,5"}, now=NOW).weight_kg == 82.5
    assert normalize({}, now=NOW).weight_kg == 70.0
    assert normalize({"weightKg": 10**400}, now=NOW).weight_kg == 70.0
    assert normalize({"weightKg": "1e999"}, now=NOW).weight_kg == 70.0


def test_sex_mapping():
    assert parse_sex("female") is Sex.FEMALE
    assert parse_sex(" Female ") is Sex.FEMALE
    assert parse_sex("Kobieta") is Sex.FEMALE
    assert parse_sex("male") is Sex.MALE
    assert parse_sex("other") is Sex.MALE
    assert parse_sex(None) is Sex.MALE


def test_parse_time_formats():
    assert parse_time("2024-05-01T20:00", NOW) == datetime(2024, 5, 1, 20, 0)
    assert parse_time("2024-05-01T20:00:30", NOW) == datetime(2024, 5, 1, 20, 0, 30)
    assert parse_time("2024-05-01T20:00:00Z", NOW) == datetime(2024, 5, 1, 20, 0)
    assert parse_time("2024-05-01T22:00:00+02:00", NOW) == datetime(2024, 5, 1, 20, 0)


def test_parse_time_falls_back_to_now():
    assert parse_time("", NOW) == NOW
    assert parse_time("yesterday evening", NOW) == NOW
    assert parse_time(None, NOW) == NOW
    assert parse_time(1714590000, NOW) == NOW
    assert parse_time("0001-01-01T00:00+01:00", NOW) == NOW
    assert parse_time(datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=1))), NOW) == NOW


def test_parse_time_calendar_edges():
    assert parse_time("9999-12-31T23:55", NOW) == datetime(9999, 12, 31, 23, 55)
    assert parse_time("0001-01-01T00:00", NOW) == datetime(1, 1, 1)


def test_missing_time_uses_utc_clock():
    session = normalize({"startTime": "2024-05-01T20:00Z", "endTime": "not a time"})
    utc_now = datetime.now(timezone.utc).replace(tzinfo=None)
    assert abs(session.end_time - utc_now) < timedelta(minutes=1)
    assert session.start_time == datetime(2024, 5, 1, 20, 0)


def test_inverted_window_has_zero_duration():
    session = normalize({"startTime": "2024-05-01T22:00", "endTime": "2024-05-01T20:00"}, now=NOW)
    assert session.duration == timedelta(0)


def test_drinks_are_cleaned():
    session = normalize(
        {
            "drinks": [
                {"volumeMl": "500", "percent": "5", "count": "2"},
                {"volumeMl": -100, "percent": 250, "count": -1},
                "not a drink",
                {"preset": "wine"},
                {"preset": "spirit", "count": 3, "label": "Vodka"},
                {"volumeMl": None, "percent": "x"},
            ]
        },
        now=NOW,
    )
    d = session.drinks
    assert len(d) == 5
    assert (d[0].volume_ml, d[0].percent, d[0].count) == (500.0, 5.0, 2.0)
    assert (d[1].volume_ml, d[1].percent, d[1].count) == (0.0, 100.0, 0.0)
    assert (d[2].volume_ml, d[2].percent, d[2].count) == (175.0, 12.0, 1.0)
    assert d[2].label == "Glass of wine (175 ml)"
    assert d[3].label == "Vodka"
    assert (d[4].volume_ml, d[4].percent) == (0.0, 0.0)


@pytest.mark.parametrize("raw", [None, [], "weightKg=70", 42])
def test_non_mapping_input(raw):
    session = normalize(raw, now=NOW)
    assert session.weight_kg == 70.0
    assert session.sex is Sex.MALE
    assert session.start_time == NOW
    assert session.drinks == ()


def test_drink_amounts_are_capped():
    session = normalize(
        {
            "drinks": [
                {"volumeMl": 1e308, "percent": 5, "count": 1e308},
                {"volumeMl": 10**400, "percent": 10**400, "count": 10**400},
            ]
        },
        now=NOW,
    )
    capped, overflowed = session.drinks
    assert capped.volume_ml == DEFAULT_CONFIG.max_volume_ml
    assert capped.count == DEFAULT_CONFIG.max_count
    assert (overflowed.volume_ml, overflowed.percent, overflowed.count) == (0.0, 0.0, 0.0)


def test_config_rejects_non_positive_step():
    with pytest.raises(ValueError):
        ModelConfig(step_minutes=0)
    with pytest.raises(ValueError):
        DEFAULT_CONFIG.with_overrides(step_minutes=-10)
