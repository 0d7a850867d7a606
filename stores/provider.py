"""
Purpose: Store/inventory providers (the collaborator that supplies Store[]).
What it does:

Every provider is a zero-argument callable returning a snapshot of stores,
so the search engine never knows where the data came from:

- StaticStoreProvider: a fixed list (seed catalog, test fakes)
- CsvStoreProvider: a flat inventory export, one row per listing (pandas)
- OverpassStoreProvider: nearby facilities from OpenStreetMap, stocked
  from the medicine template (the map knows places, not shelves)

Rule: Providers only build Store objects. No matching or ranking here.
"""

from __future__ import annotations

import logging
import zlib
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd

from .catalog import MEDICINE_TEMPLATE, SEED_STORES
from .geo import haversine_km
from .models import LatLon, MAX_RATING, MedicineListing, Store
from .overpass_client import OverpassClient, OverpassError

logger = logging.getLogger(__name__)

StoreProvider = Callable[[], Sequence[Store]]

# Columns expected in an inventory CSV export
CSV_STORE_COLUMNS = ["store_id", "store_name", "distance_km", "rating"]
CSV_LISTING_COLUMNS = ["medicine_name", "price"]


class StaticStoreProvider:
    """
    Returns the same snapshot on every call.
    """
    def __init__(self, stores: Iterable[Store] = SEED_STORES):
        self._stores = tuple(stores)

    def __call__(self) -> List[Store]:
        return list(self._stores)


class CsvStoreProvider:
    """
    Loads stores from a flat inventory CSV (see scripts/generate_mock_inventory.py).

    Rows are grouped by store_id in first-appearance order, and listings keep
    their row order inside each store.
    """
    def __init__(self, path: str):
        self.path = path

    def __call__(self) -> List[Store]:
        df = pd.read_csv(self.path, keep_default_na=False)

        missing = [c for c in CSV_STORE_COLUMNS + CSV_LISTING_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"{self.path}: missing columns {missing}")

        stores: List[Store] = []
        for store_id, rows in df.groupby("store_id", sort=False):
            first = rows.iloc[0]
            listings = [
                MedicineListing.new(
                    name=str(row["medicine_name"]),
                    price=float(row["price"]),
                    category=str(row.get("category", "") or "General"),
                    stock_quantity=int(row.get("stock_quantity", 0) or 0),
                    availability=str(row.get("availability", "") or "In Stock"),
                )
                for _, row in rows.iterrows()
            ]

            location: Optional[LatLon] = None
            if "lat" in df.columns and "lon" in df.columns and first["lat"] != "" and first["lon"] != "":
                location = (float(first["lat"]), float(first["lon"]))

            stores.append(
                Store.new(
                    str(store_id),
                    str(first["store_name"]),
                    float(first["distance_km"]),
                    float(first["rating"]),
                    listings,
                    address=str(first.get("address", "")),
                    contact_number=str(first.get("contact_number", "")),
                    location=location,
                    timing=str(first.get("timing", "") or "9AM - 9PM"),
                    is_open_24x7=_as_bool(first.get("is_open_24x7", False)),
                    has_home_delivery=_as_bool(first.get("has_home_delivery", True)),
                    has_pickup=_as_bool(first.get("has_pickup", True)),
                )
            )

        logger.info("Loaded %d stores from %s", len(stores), self.path)
        return stores


class OverpassStoreProvider:
    """
    Nearby-facility discovery around a user location.

    Falls back to the seed catalog when the API fails or nothing usable
    comes back, so a search always has something to run against.
    """
    def __init__(
        self,
        client: OverpassClient,
        center: LatLon,
        *,
        radius_km: float = 10.0,
        max_stores: int = 20,
        home_delivery_radius_km: float = 5.0,
        fallback: Sequence[Store] = SEED_STORES,
    ):
        self.client = client
        self.center = center
        self.radius_km = radius_km
        self.max_stores = max_stores
        self.home_delivery_radius_km = home_delivery_radius_km
        self.fallback = tuple(fallback)

    def __call__(self) -> List[Store]:
        try:
            elements = self.client.fetch_facilities(self.center, self.radius_km)
        except OverpassError as e:
            logger.warning("Store discovery failed, using fallback stores: %s", e)
            return list(self.fallback)

        stores = []
        for index, element in enumerate(elements):
            if element.get("lat") is None or element.get("lon") is None:
                continue
            store = self.element_to_store(element, index)
            # fail closed on anything outside the search radius
            if store.distance_km >= self.radius_km:
                continue
            stores.append(store)

        if not stores:
            logger.warning("No usable facilities around %s, using fallback stores", self.center)
            return list(self.fallback)

        stores.sort(key=lambda s: s.distance_km)
        return stores[: self.max_stores]

    def element_to_store(self, element: Dict[str, Any], index: int) -> Store:
        tags = element.get("tags") or {}
        location = (float(element["lat"]), float(element["lon"]))
        distance = haversine_km(self.center, location)
        facility_type = tags.get("amenity") or tags.get("shop") or tags.get("healthcare") or "pharmacy"

        opening_hours = tags.get("opening_hours") or tags.get("opening_hours:covid19") or ""

        return Store.new(
            f"STORE_{element.get('id', index)}",
            _store_name(tags, facility_type, index),
            round(distance, 2),
            round(_parse_rating(tags, facility_type, distance), 1),
            _stock_shelf(element.get("id", index)),
            address=_format_address(tags, distance),
            contact_number=tags.get("phone") or tags.get("contact:phone") or tags.get("contact:mobile") or "Contact not available",
            location=location,
            timing=opening_hours or "9AM - 9PM",
            is_open_24x7="24/7" in opening_hours or "24 hours" in opening_hours,
            has_home_delivery=distance < self.home_delivery_radius_km,
            has_pickup=True,
        )


# -------------------------
# Element conversion helpers
# -------------------------

def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "y")
    return bool(value)


def _parse_rating(tags: Dict[str, str], facility_type: str, distance_km: float) -> float:
    """
    Use an explicit rating/stars tag when present (clamped to [1, 5]),
    otherwise a default by facility type nudged by distance.
    """
    for key in ("rating", "stars"):
        if key in tags:
            try:
                return max(1.0, min(MAX_RATING, float(tags[key])))
            except ValueError:
                break

    rating = {"hospital": 4.3, "clinic": 4.1, "pharmacy": 4.2}.get(facility_type, 4.0)
    if distance_km < 2:
        rating = min(MAX_RATING, rating + 0.3)
    elif distance_km > 5:
        rating = max(3.5, rating - 0.2)
    return rating


def _store_name(tags: Dict[str, str], facility_type: str, index: int) -> str:
    name = tags.get("name") or tags.get("operator") or tags.get("brand")
    if name:
        return name
    labels = {
        "hospital": "Hospital",
        "clinic": "Medical Clinic",
        "doctors": "Doctor's Office",
    }
    return f"{labels.get(facility_type, 'Pharmacy')} {index + 1}"


def _format_address(tags: Dict[str, str], distance_km: float) -> str:
    if tags.get("addr:full"):
        return tags["addr:full"]

    street = tags.get("addr:street", "")
    house = tags.get("addr:housenumber", "")
    city = tags.get("addr:city") or tags.get("addr:town") or ""
    if not street and not city:
        return f"{distance_km:.1f}km from your location"

    parts = [
        f"{house} {street}" if house and street else street,
        city,
        tags.get("addr:state", ""),
        tags.get("addr:postcode", ""),
    ]
    return ", ".join(p for p in parts if p)


def _stock_shelf(seed: Any) -> List[MedicineListing]:
    """
    Synthetic inventory from the medicine template: stock 50-199 and a
    price jitter of -2..+2. Seeded by element id so repeated lookups of the
    same facility return the same shelf.
    """
    rng = np.random.default_rng(zlib.crc32(str(seed).encode("utf-8")))
    shelf = []
    for med in MEDICINE_TEMPLATE:
        shelf.append(
            MedicineListing.new(
                name=med.name,
                category=med.category,
                price=max(0.0, med.price + int(rng.integers(-2, 3))),
                stock_quantity=int(rng.integers(50, 200)),
                availability=med.availability,
                generic_name=med.generic_name,
                manufacturer=med.manufacturer,
                dosage=med.dosage,
                pack_size=med.pack_size,
            )
        )
    return shelf
