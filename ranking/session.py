"""
Purpose: Search session state (the "latest search wins" guard).
What it does:
Each user-initiated search takes a token from a monotonically increasing
counter. Store fetching can be slow and searches can overlap, so a
response is only committed if its token is still the latest issued;
anything older is discarded instead of overwriting newer results.

No retries and no cancellation here: the provider owns those.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from stores.provider import StoreProvider

from .engine import SearchOutcome, search_stores

logger = logging.getLogger(__name__)


class SearchSession:
    """
    Holds the latest committed SearchOutcome for one user.
    """
    def __init__(self, provider: StoreProvider, **engine_options):
        self.provider = provider
        self.engine_options = engine_options

        self._lock = threading.Lock()
        self._latest_token = 0
        self._outcome: Optional[SearchOutcome] = None

    @property
    def outcome(self) -> Optional[SearchOutcome]:
        return self._outcome

    @property
    def latest_token(self) -> int:
        return self._latest_token

    def begin(self) -> int:
        """
        Issue the token for a new search. Invalidates every earlier token.
        """
        with self._lock:
            self._latest_token += 1
            return self._latest_token

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._latest_token

    def complete(self, token: int, outcome: SearchOutcome) -> bool:
        """
        Commit `outcome` if `token` is still the latest. Returns False (and
        keeps the newer state) for stale responses.
        """
        with self._lock:
            if token != self._latest_token:
                logger.warning(
                    "Discarding stale search response (token %d, latest %d)",
                    token, self._latest_token,
                )
                return False
            self._outcome = outcome
            return True

    def search(self, raw_query: Optional[str]) -> Optional[SearchOutcome]:
        """
        Fetch stores, run the engine, commit. Returns the outcome, or None if
        a newer search started while this one was fetching.
        """
        token = self.begin()
        stores = self.provider()
        outcome = search_stores(raw_query, stores, **self.engine_options)
        if not self.complete(token, outcome):
            return None
        return outcome
