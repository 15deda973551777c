# 📄 File: app/modules/plant_management/domain/services/watering_service.py
# 🧭 Purpose (Layman Explanation):
# Works out whether a plant needs water: never watered, overdue, due today, due soon,
# or fine. Also suggests how often a new plant should be watered based on its name.
# 🧪 Purpose (Technical Summary):
# Pure, side-effect-free watering functions: elapsed whole days since last watering,
# five-way status classification, next watering date, per-status summary, and a
# substring-rule watering frequency suggestion.
# 🔗 Dependencies:
# Plant domain model, app.shared.utils.helpers (UTC normalisation)
# 🔄 Connected Modules / Calls From:
# plant_service.py, plant API schemas (derived fields), reminder scheduling, tests

from datetime import datetime, timedelta
from typing import Dict, Iterable, Optional, Sequence, Tuple

from app.shared.utils.helpers import ensure_utc, utcnow

from ..models.plant import Plant, WateringStatus

DEFAULT_WATER_FREQUENCY_DAYS = 7

# Ordered (keywords, days); the first rule with a matching keyword wins
WATERING_FREQUENCY_RULES: Sequence[Tuple[Tuple[str, ...], int]] = (
    (("monstera", "deliciosa"), 7),
    (("fiddle leaf", "ficus lyrata"), 7),
    (("pothos", "epipremnum"), 10),
    (("snake plant", "sansevieria"), 21),
    (("zz plant", "zamioculcas"), 21),
    (("peace lily", "spathiphyllum"), 5),
    (("orchid", "phalaenopsis"), 7),
    (("aloe", "cactus", "succulent", "haworthia"), 14),
    (("fern", "calathea", "maranta", "prayer plant"), 3),
)


def days_since_watered(last_watered: Optional[datetime], now: Optional[datetime] = None) -> Optional[int]:
    """
    Whole days elapsed since the last watering.

    Partial days are floored, so 47 hours is 1 day.

    Args:
        last_watered: Last watering time, or None if never watered
        now: Reference time (defaults to the current UTC time)

    Returns:
        Elapsed whole days, or None if never watered
    """
    if last_watered is None:
        return None
    reference = ensure_utc(now) if now is not None else utcnow()
    return (reference - ensure_utc(last_watered)).days


def get_watering_status(
    last_watered: Optional[datetime],
    water_frequency: int,
    now: Optional[datetime] = None,
) -> WateringStatus:
    """
    Classify how urgently a plant needs water.

    Thresholds, checked in order:
      never watered               -> unknown
      elapsed >= frequency + 2    -> overdue
      elapsed >= frequency        -> due
      elapsed >= frequency - 1    -> soon
      otherwise                   -> ok

    Args:
        last_watered: Last watering time, or None if never watered
        water_frequency: Watering interval in days
        now: Reference time (defaults to the current UTC time)

    Returns:
        WateringStatus
    """
    elapsed = days_since_watered(last_watered, now)
    if elapsed is None:
        return WateringStatus.UNKNOWN
    if elapsed >= water_frequency + 2:
        return WateringStatus.OVERDUE
    if elapsed >= water_frequency:
        return WateringStatus.DUE
    if elapsed >= water_frequency - 1:
        return WateringStatus.SOON
    return WateringStatus.OK


def next_watering_date(last_watered: Optional[datetime], water_frequency: int) -> Optional[datetime]:
    """Date the plant next needs water, or None if it has never been watered."""
    if last_watered is None:
        return None
    return ensure_utc(last_watered) + timedelta(days=water_frequency)


def plant_watering_status(plant: Plant, now: Optional[datetime] = None) -> WateringStatus:
    return get_watering_status(plant.last_watered, plant.water_frequency, now)


def summarize_watering(plants: Iterable[Plant], now: Optional[datetime] = None) -> Dict[WateringStatus, int]:
    """
    Count plants per watering status.

    Every status is present in the result, with zero when no plant has it.
    """
    reference = now or utcnow()
    summary = {status: 0 for status in WateringStatus}
    for plant in plants:
        summary[plant_watering_status(plant, reference)] += 1
    return summary


def suggest_watering_frequency(
    name: str,
    species: Optional[str] = None,
    default: int = DEFAULT_WATER_FREQUENCY_DAYS,
) -> int:
    """
    Suggest a watering interval (days) from a plant's name and species.

    Args:
        name: Plant name as entered by the user
        species: Optional species / botanical name
        default: Interval returned when no rule matches

    Returns:
        Suggested watering interval in days
    """
    haystack = f"{name} {species or ''}".lower()
    for keywords, days in WATERING_FREQUENCY_RULES:
        if any(keyword in haystack for keyword in keywords):
            return days
    return default
