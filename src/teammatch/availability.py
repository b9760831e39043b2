"""Weekly availability schedules: expansion, normalisation and editing.

A schedule is a list of ``AvailabilitySlot``.  Every helper returns a new
list and leaves its input untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from src.teammatch.models import AvailabilitySlot, SlotKey

logger = logging.getLogger(__name__)

WORKDAY_START = 9
WORKDAY_END = 17
ALL_WEEK_END = 18


def expand_slots(slots: Iterable[AvailabilitySlot]) -> dict[SlotKey, bool]:
    """Map every ``(day, hour)`` a schedule touches to its availability.

    Later slots overwrite earlier ones for the same hour.
    """
    expanded: dict[SlotKey, bool] = {}
    for slot in slots:
        for hour in slot.hours():
            key = (slot.day_of_week, hour)
            if key in expanded and expanded[key] != slot.is_available:
                logger.warning(
                    "Conflicting availability for day=%d hour=%d, keeping last",
                    slot.day_of_week, hour,
                )
            expanded[key] = slot.is_available
    return expanded


def is_time_slot_available(
    slots: Iterable[AvailabilitySlot], day: int, hour: int,
) -> bool:
    return any(
        slot.day_of_week == day
        and slot.start_hour <= hour < slot.end_hour
        and slot.is_available
        for slot in slots
    )


def merge_consecutive_slots(
    slots: Iterable[AvailabilitySlot],
) -> list[AvailabilitySlot]:
    """Join touching slots on the same day that share an availability flag."""
    ordered = sorted(slots, key=lambda s: (s.day_of_week, s.start_hour))
    merged: list[AvailabilitySlot] = []
    for slot in ordered:
        if merged:
            last = merged[-1]
            if (
                last.day_of_week == slot.day_of_week
                and last.end_hour == slot.start_hour
                and last.is_available == slot.is_available
            ):
                merged[-1] = last.model_copy(update={"end_hour": slot.end_hour})
                continue
        merged.append(slot)
    return merged


def toggle_availability(
    slots: Iterable[AvailabilitySlot], day: int, hour: int,
) -> list[AvailabilitySlot]:
    """Flip one hour: free hours become busy and vice versa.

    Slots covering the hour are split around it; when the hour was not
    available a one-hour available slot takes its place.
    """
    slots = list(slots)
    was_available = is_time_slot_available(slots, day, hour)
    kept: list[AvailabilitySlot] = []
    for s in slots:
        if not (s.day_of_week == day and s.start_hour <= hour < s.end_hour):
            kept.append(s)
            continue
        if s.start_hour < hour:
            kept.append(s.model_copy(update={"end_hour": hour}))
        if hour + 1 < s.end_hour:
            kept.append(s.model_copy(update={"start_hour": hour + 1}))
    if not was_available:
        kept.append(AvailabilitySlot(
            day_of_week=day, start_hour=hour, end_hour=hour + 1,
            is_available=True,
        ))
    return merge_consecutive_slots(kept)


def weekdays_only() -> list[AvailabilitySlot]:
    """Monday to Friday, 9 to 17."""
    return [
        AvailabilitySlot(
            day_of_week=day, start_hour=WORKDAY_START, end_hour=WORKDAY_END,
        )
        for day in range(1, 6)
    ]


def all_week() -> list[AvailabilitySlot]:
    return [
        AvailabilitySlot(
            day_of_week=day, start_hour=WORKDAY_START, end_hour=ALL_WEEK_END,
        )
        for day in range(7)
    ]


def initialize_if_empty(
    slots: Iterable[AvailabilitySlot],
) -> list[AvailabilitySlot]:
    slots = list(slots)
    return slots if slots else weekdays_only()
