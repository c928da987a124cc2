"""Delivery slot availability for a single store."""

from __future__ import annotations

import logging

import httpx

from everli.models import Availability, AvailabilityResponse, DayEntry, Slot

AVAILABILITY_PATH = "/sm/api/v3/locations/{location}/stores/{store}/availability"

logger = logging.getLogger(__name__)


async def fetch_availability(
    client: httpx.AsyncClient,
    location_id: str,
    store_id: str,
) -> list[Availability]:
    """Fetch the bookable slots of a store, one record per upstream day."""
    response = await client.get(
        AVAILABILITY_PATH.format(location=location_id, store=store_id)
    )
    response.raise_for_status()
    parsed = AvailabilityResponse.model_validate(response.json())
    days = [_parse_day(day) for day in parsed.data.data or [] if day is not None]
    logger.debug(
        "availability_fetched",
        extra={"location_id": location_id, "store_id": store_id, "days": len(days)},
    )
    return days


def _parse_day(day: DayEntry) -> Availability:
    return Availability(
        date=day.date,
        slots=[
            Slot(time=hour.time, cost=hour.cost)
            for hour in day.hours or []
            if hour is not None and hour.valid
        ],
    )
