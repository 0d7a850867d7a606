"""
Purpose: Central configuration for query parsing and inventory matching.
What it does:

Stores the tunable choices the matcher and normaliser make:

TERM_SEPARATOR = ","

DEDUPE_TERMS = True

LISTING_TIE_BREAK = FIRST

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ListingTieBreak(str, Enum):
    """
    Which listing wins when a store has several in-stock listings
    containing the same term (e.g. two Paracetamol brands).
    """
    FIRST = "first"                  # first in the order the provider listed them
    LOWEST_PRICE = "lowest-price"
    HIGHEST_STOCK = "highest-stock"


@dataclass(frozen=True)
class SearchPolicy:
    """
    Central configuration for turning raw input into matches.

    Notes:
    - dedupe_terms drops later case-insensitive repeats of a term, so
      "Paracetamol, paracetamol" is one term. Set False to keep every piece.
    - tie_break only matters when a store stocks several candidates for one term.
    """

    term_separator: str = ","

    dedupe_terms: bool = True

    tie_break: ListingTieBreak = ListingTieBreak.FIRST

    # Optional: match stores in a thread pool. None = run inline.
    max_workers: int | None = None

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if not self.term_separator:
            raise ValueError("term_separator must be a non-empty string")

        if not isinstance(self.tie_break, ListingTieBreak):
            raise ValueError(f"unknown tie_break: {self.tie_break!r}")

        if self.max_workers is not None and self.max_workers <= 0:
            raise ValueError("max_workers must be > 0 when set")


def default_search_policy() -> SearchPolicy:
    """
    Convenience factory for the default policy.
    """
    p = SearchPolicy()
    p.validate()
    return p
