"""
Purpose: Delivery pricing strategies.
What it does:
A DeliveryPricing is any callable (distance_km, delivery_type, store) -> amount.
Contract: 0 for pickup, a non-negative amount for delivery.

TieredDeliveryPricing (default):
- pickup -> 0
- distance < 2 km -> flat 15
- otherwise -> 2 per km, capped at 40
"""

from __future__ import annotations

from typing import Callable, Optional

from stores.models import Store

from .models import DeliveryType
from .policy import OrderPolicy, default_order_policy

DeliveryPricing = Callable[[float, DeliveryType, Store], float]


class TieredDeliveryPricing:
    def __init__(self, policy: Optional[OrderPolicy] = None):
        self.policy = policy or default_order_policy()

    def __call__(self, distance_km: float, delivery_type: DeliveryType, store: Store) -> float:
        if DeliveryType(delivery_type) == DeliveryType.PICKUP:
            return 0.0

        if distance_km < self.policy.near_radius_km:
            return self.policy.near_flat_fee

        return min(distance_km * self.policy.per_km_rate, self.policy.max_delivery_fee)
