"""
Purpose: Output model of the ranking stage.
What it does:
- StoreResult: a scored store, what the UI lists and what checkout consumes.

Rule: Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from search.models import MedicineAvailability
from stores.models import Store


@dataclass(frozen=True)
class StoreResult:
    """
    A store that can supply at least part of a query, with its scores.

    len(available_medicines) + len(missing_medicines) == len(query)
    """
    store: Store
    available_medicines: Tuple[MedicineAvailability, ...]
    missing_medicines: Tuple[str, ...]
    total_price: float

    base_score: float
    priority_score: float   # boosted; unbounded above 100
    estimated_delivery: str

    @property
    def is_complete(self) -> bool:
        return not self.missing_medicines
