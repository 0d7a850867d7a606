"""
Purpose: Turn the raw search box text into a SearchQuery.
What it does:
- splits on the policy separator (comma)
- trims each piece, drops empty pieces
- optionally drops case-insensitive repeats (first spelling wins)

Raises EmptyQuery when nothing usable is left.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set

from .models import SearchQuery
from .policy import SearchPolicy, default_search_policy

logger = logging.getLogger(__name__)


class EmptyQuery(ValueError):
    """Raised when the input holds no usable search terms."""

    def __init__(self, raw: Optional[str] = None):
        self.raw = raw
        super().__init__("Please enter medicine names to search")


def normalize_query(raw: Optional[str], policy: Optional[SearchPolicy] = None) -> SearchQuery:
    """
    "Paracetamol, , Cetirizine " -> SearchQuery(("Paracetamol", "Cetirizine"))
    """
    policy = policy or default_search_policy()

    if raw is None or not raw.strip():
        raise EmptyQuery(raw)

    terms: List[str] = []
    seen: Set[str] = set()
    for piece in raw.split(policy.term_separator):
        term = piece.strip()
        if not term:
            continue

        key = term.casefold()
        if policy.dedupe_terms and key in seen:
            logger.debug("Dropping repeated term %r", term)
            continue
        seen.add(key)
        terms.append(term)

    if not terms:
        raise EmptyQuery(raw)

    return SearchQuery(terms=tuple(terms))
