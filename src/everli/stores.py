"""Partner store listing for an Everli delivery location."""

from __future__ import annotations

import logging

import httpx

from everli.models import Store, StoreEntry, StoresResponse

STORES_PATH = "/sm/api/v3/locations/{location}/stores"

logger = logging.getLogger(__name__)


async def fetch_stores(client: httpx.AsyncClient, location_id: str) -> list[Store]:
    """List the stores delivering to a location, flattened across widget groups."""
    response = await client.get(STORES_PATH.format(location=location_id))
    response.raise_for_status()
    parsed = StoresResponse.model_validate(response.json())
    stores = [
        _parse_store(entry)
        for group in parsed.data.body or []
        if group is not None
        for entry in group.stores or []
        if entry is not None
    ]
    logger.debug(
        "stores_fetched", extra={"location_id": location_id, "count": len(stores)}
    )
    return stores


def _parse_store(entry: StoreEntry) -> Store:
    """Project a store widget onto a flat Store record."""
    label = entry.label[0] if entry.label else None
    first_tracking = entry.tracking[0] if entry.tracking else None
    tracking = first_tracking.data if first_tracking else None
    return Store(
        id=entry.id,
        name=entry.name,
        image=entry.image,
        color=label.color if label else None,
        location_id=tracking.location_id if tracking else None,
        type=tracking.store_type if tracking else None,
        address=tracking.store_address if tracking else None,
        province=tracking.store_province if tracking else None,
        is_new=tracking.store_new_flag if tracking else None,
        city=tracking.store_city if tracking else None,
        postal_code=tracking.store_postal_code if tracking else None,
        country=tracking.store_country if tracking else None,
        area=tracking.store_area if tracking else None,
    )
