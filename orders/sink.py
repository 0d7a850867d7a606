"""
Purpose: Order sink (where confirmed orders go).
The engine never persists orders: it hands Order.to_payload() to an
OrderSink and gets an order id back.
"""

from __future__ import annotations

import uuid
from typing import Any, Callable, Dict, List, Optional

OrderSink = Callable[[Dict[str, Any]], str]


class InMemoryOrderSink:
    """
    Keeps payloads in a dict by id. Good enough for tests and the simulation script.
    """
    def __init__(self):
        self._orders: Dict[str, Dict[str, Any]] = {}

    def __call__(self, payload: Dict[str, Any]) -> str:
        order_id = f"ORD-{uuid.uuid4().hex[:8].upper()}"
        self._orders[order_id] = payload
        return order_id

    def get(self, order_id: str) -> Optional[Dict[str, Any]]:
        return self._orders.get(order_id)

    def order_ids(self) -> List[str]:
        return list(self._orders.keys())

    def __len__(self) -> int:
        return len(self._orders)
