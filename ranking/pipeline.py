"""
Purpose: Filter & sort the scored results for display.
What it does:

1) Filters (optional, independent): distance_km <= max, rating >= min
2) Primary sort by the chosen SortMode (stable: ties keep input order)
3) Completeness overlay: stable partition, complete stores first

The overlay is a partition and not a sort key, so any SortMode added later
still gets "full coverage always outranks partial coverage" for free.

initial_order() is the ordering the engine hands back before the user
picks a sort: completeness, then available count, then priority score.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from .models import StoreResult


class SortMode(str, Enum):
    PRIORITY = "priority"
    NEAREST = "nearest"
    CHEAPEST = "cheapest"
    BEST_RATED = "best-rated"

    @classmethod
    def parse(cls, value: str | SortMode | None) -> SortMode:
        if value is None or value == "":
            return cls.PRIORITY
        if isinstance(value, SortMode):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"unknown sort mode: {value!r}") from None


# Primary sort keys. All ascending: descending modes negate the value.
SORT_KEYS: Dict[SortMode, Callable[[StoreResult], float]] = {
    SortMode.PRIORITY: lambda r: -r.priority_score,
    SortMode.NEAREST: lambda r: r.store.distance_km,
    SortMode.CHEAPEST: lambda r: r.total_price,
    SortMode.BEST_RATED: lambda r: -r.store.rating,
}


@dataclass(frozen=True)
class ResultFilters:
    """
    User-selected filters. None means "all".
    """
    max_distance_km: Optional[float] = None
    min_rating: Optional[float] = None

    @classmethod
    def from_options(cls, distance: str | float | None = None, rating: str | float | None = None) -> ResultFilters:
        """
        Accepts the option values the UI sends ("all", "2", "4.5", ...).
        """
        return cls(max_distance_km=_option(distance), min_rating=_option(rating))

    def accepts(self, result: StoreResult) -> bool:
        if self.max_distance_km is not None and result.store.distance_km > self.max_distance_km:
            return False
        if self.min_rating is not None and result.store.rating < self.min_rating:
            return False
        return True


def _option(value: str | float | None) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if value == "" or value.lower() == "all":
            return None
    return float(value)


def filter_results(results: Sequence[StoreResult], filters: Optional[ResultFilters] = None) -> List[StoreResult]:
    if filters is None:
        return list(results)
    return [r for r in results if filters.accepts(r)]


def sort_results(results: Sequence[StoreResult], mode: SortMode = SortMode.PRIORITY) -> List[StoreResult]:
    """
    Stable primary sort; equal keys keep their input order.
    """
    return sorted(results, key=SORT_KEYS[SortMode.parse(mode)])


def complete_first(results: Sequence[StoreResult]) -> List[StoreResult]:
    """
    Stable partition: complete results first, relative order kept on both sides.
    """
    complete = [r for r in results if r.is_complete]
    partial = [r for r in results if not r.is_complete]
    return complete + partial


def apply_view(
    results: Sequence[StoreResult],
    sort_mode: SortMode | str = SortMode.PRIORITY,
    filters: Optional[ResultFilters] = None,
) -> List[StoreResult]:
    """
    Full display pipeline: filter -> sort -> completeness overlay.
    Pure; the same input always gives the same list.
    """
    filtered = filter_results(results, filters)
    ordered = sort_results(filtered, SortMode.parse(sort_mode))
    return complete_first(ordered)


def initial_order(results: Sequence[StoreResult]) -> List[StoreResult]:
    """
    Ordering of a fresh search: complete first, then more items available,
    then higher priority score.
    """
    return sorted(
        results,
        key=lambda r: (0 if r.is_complete else 1, -len(r.available_medicines), -r.priority_score),
    )
