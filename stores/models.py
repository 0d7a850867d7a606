"""
Purpose: Domain models for the Stores capability.
What it does:
- Defines core data structures:
- Store (id, name, distance, rating, listings, delivery metadata)
- MedicineListing (name, category, unit price, stock, availability)

Defines enums/constants:
- Availability = IN_STOCK | LOW_STOCK | OUT_OF_STOCK | UNAVAILABLE

Rule: No matching, scoring or HTTP here. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

LatLon = Tuple[float, float]

MAX_RATING = 5.0


class Availability(str, Enum):
    """
    Stock status as reported by the inventory source.
    Only IN_STOCK listings can satisfy a search term.
    """
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"
    UNAVAILABLE = "Unavailable"


@dataclass(frozen=True)
class MedicineListing:
    """
    One medicine on a store's shelf.

    The prescription requirement is deliberately not stored here; it is
    resolved by name through a PrescriptionClassifier.
    """
    name: str
    category: str
    price: float
    stock_quantity: int
    availability: Availability = Availability.IN_STOCK

    generic_name: Optional[str] = None
    manufacturer: Optional[str] = None
    dosage: Optional[str] = None
    pack_size: Optional[str] = None

    @property
    def is_in_stock(self) -> bool:
        return self.availability == Availability.IN_STOCK

    @classmethod
    def new(
        cls,
        name: str,
        price: float,
        category: str = "General",
        stock_quantity: int = 0,
        availability: str | Availability = Availability.IN_STOCK,
        **extra,
    ) -> MedicineListing:
        if isinstance(availability, str):
            availability = Availability(availability)
        if price < 0:
            raise ValueError(f"price must be >= 0 (got {price} for {name!r})")
        if stock_quantity < 0:
            raise ValueError(f"stock_quantity must be >= 0 (got {stock_quantity} for {name!r})")

        return cls(
            name=name,
            category=category,
            price=float(price),
            stock_quantity=int(stock_quantity),
            availability=availability,
            **extra,
        )


@dataclass(frozen=True)
class Store:
    """
    A vendor snapshot for the duration of one search session.
    Listings keep the order the provider supplied them in.
    """
    id: str
    name: str
    distance_km: float
    rating: float
    medicines: Tuple[MedicineListing, ...] = ()

    # Display / contact fields
    address: str = ""
    contact_number: str = ""
    location: Optional[LatLon] = None

    # Delivery eligibility metadata
    timing: str = "9AM - 9PM"
    is_open_24x7: bool = False
    has_home_delivery: bool = True
    has_pickup: bool = True

    @classmethod
    def new(
        cls,
        store_id: str,
        name: str,
        distance_km: float,
        rating: float,
        medicines: Iterable[MedicineListing] = (),
        **extra,
    ) -> Store:
        if distance_km < 0:
            raise ValueError(f"distance_km must be >= 0 (got {distance_km} for {store_id})")
        if not 0.0 <= rating <= MAX_RATING:
            raise ValueError(f"rating must be within [0, {MAX_RATING}] (got {rating} for {store_id})")

        return cls(
            id=store_id,
            name=name,
            distance_km=float(distance_km),
            rating=float(rating),
            medicines=tuple(medicines),
            **extra,
        )
