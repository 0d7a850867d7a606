"""
Purpose: Domain models for the Search capability.
What it does:
- SearchQuery (ordered, non-empty terms)
- MedicineAvailability (one term resolved to a listing at one store)
- StoreCoverage (a store's available/missing split for a query)

Rule: No matching logic. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from stores.models import Store


@dataclass(frozen=True)
class SearchQuery:
    """
    Ordered search terms. Built by search.normalizer.normalize_query,
    which guarantees there are no empty terms.
    """
    terms: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[str]:
        return iter(self.terms)


@dataclass(frozen=True)
class MedicineAvailability:
    """
    A query term satisfied by a specific listing.
    """
    term: str
    medicine_name: str
    price: float
    category: str
    stock_quantity: int

    # resolved by the prescription classifier at aggregation time
    requires_prescription: bool = False


@dataclass(frozen=True)
class StoreCoverage:
    """
    What one store can supply for a query.
    Every query term lands in exactly one of available/missing.
    """
    store: Store
    available_medicines: Tuple[MedicineAvailability, ...]
    missing_medicines: Tuple[str, ...]
    total_price: float

    @property
    def is_complete(self) -> bool:
        return not self.missing_medicines

    @property
    def term_count(self) -> int:
        return len(self.available_medicines) + len(self.missing_medicines)

    def availability_ratio(self) -> float:
        if self.term_count == 0:
            return 0.0
        return len(self.available_medicines) / self.term_count
