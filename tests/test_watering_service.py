from datetime import datetime, timedelta, timezone

import pytest

from app.modules.plant_management.domain.models.plant import LightNeeds, Plant, WateringStatus
from app.modules.plant_management.domain.services.watering_service import (
    days_since_watered,
    get_watering_status,
    next_watering_date,
    suggest_watering_frequency,
    summarize_watering,
)

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def _plant(last_watered, water_frequency=7) -> Plant:
    return Plant(
        id=1,
        user_id=1,
        name="Fern",
        water_frequency=water_frequency,
        light_needs=LightNeeds.MEDIUM,
        last_watered=last_watered,
    )


def test_days_since_watered_floors_partial_days():
    assert days_since_watered(NOW - timedelta(hours=47), NOW) == 1
    assert days_since_watered(NOW - timedelta(hours=23), NOW) == 0


def test_days_since_watered_never_watered():
    assert days_since_watered(None, NOW) is None


def test_days_since_watered_accepts_naive_utc():
    naive = (NOW - timedelta(days=3)).replace(tzinfo=None)
    assert days_since_watered(naive, NOW) == 3


@pytest.mark.parametrize(
    "elapsed_days, expected",
    [
        (0, WateringStatus.OK),
        (5, WateringStatus.OK),
        (6, WateringStatus.SOON),
        (7, WateringStatus.DUE),
        (8, WateringStatus.DUE),
        (9, WateringStatus.OVERDUE),
        (30, WateringStatus.OVERDUE),
    ],
)
def test_watering_status_thresholds(elapsed_days, expected):
    last_watered = NOW - timedelta(days=elapsed_days)
    assert get_watering_status(last_watered, 7, NOW) == expected


def test_watering_status_unknown_when_never_watered():
    assert get_watering_status(None, 7, NOW) == WateringStatus.UNKNOWN


def test_daily_plant_is_soon_on_the_day_it_was_watered():
    # frequency - 1 == 0, so a plant watered daily is never "ok"
    assert get_watering_status(NOW, 1, NOW) == WateringStatus.SOON


def test_next_watering_date():
    last_watered = NOW - timedelta(days=2)
    assert next_watering_date(last_watered, 7) == NOW + timedelta(days=5)
    assert next_watering_date(None, 7) is None


def test_summarize_watering_counts_every_status():
    plants = [
        _plant(None),
        _plant(NOW - timedelta(days=1)),
        _plant(NOW - timedelta(days=10)),
        _plant(NOW - timedelta(days=12)),
    ]

    summary = summarize_watering(plants, NOW)

    assert summary == {
        WateringStatus.UNKNOWN: 1,
        WateringStatus.OVERDUE: 2,
        WateringStatus.DUE: 0,
        WateringStatus.SOON: 0,
        WateringStatus.OK: 1,
    }


@pytest.mark.parametrize(
    "name, species, expected",
    [
        ("Living room Monstera", None, 7),
        ("Golden pothos", None, 10),
        ("Bob", "Sansevieria trifasciata", 21),
        ("Office ZZ plant", None, 21),
        ("Peace lily", None, 5),
        ("Aloe", None, 14),
        ("Boston fern", None, 3),
        ("Kitchen herb", None, 7),
    ],
)
def test_suggest_watering_frequency(name, species, expected):
    assert suggest_watering_frequency(name, species) == expected


def test_suggest_watering_frequency_custom_default():
    assert suggest_watering_frequency("Mystery plant", default=4) == 4
