"""
Purpose: Central configuration for order pricing and checkout rules.
What it does:

Stores all tunable fees/limits:

PLATFORM_FEE_RATE = 0.02 (2% of subtotal)

DEFAULT_QUANTITY = 1, MIN_QUANTITY = 1

Delivery tiers: under 2 km flat 15, otherwise 2 per km capped at 40

Prescription uploads: jpeg/png/pdf, at most 5 MB

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet

MB = 1024 * 1024


@dataclass(frozen=True)
class OrderPolicy:
    """
    Central configuration for checkout.

    Notes:
    - delivery tiers are consumed by orders.delivery.TieredDeliveryPricing;
      a different DeliveryPricing strategy can ignore them.
    - attachment limits are inclusive: exactly max_attachment_bytes passes.
    """

    # --- Fees ---
    platform_fee_rate: float = 0.02

    # --- Quantities ---
    default_quantity: int = 1
    min_quantity: int = 1

    # --- Delivery tiers (rupees / km) ---
    near_radius_km: float = 2.0
    near_flat_fee: float = 15.0
    per_km_rate: float = 2.0
    max_delivery_fee: float = 40.0

    # --- Prescription attachment ---
    allowed_mime_types: FrozenSet[str] = field(
        default_factory=lambda: frozenset({"image/jpeg", "image/jpg", "image/png", "application/pdf"})
    )
    max_attachment_bytes: int = 5 * MB

    # --- Pickup wording ---
    pickup_estimate: str = "Ready for pickup in 15-45 mins"
    pickup_note: str = (
        "[PICKUP ORDER] Your order is ready for pickup. "
        "Please collect your medicine directly from the pharmacy."
    )

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if not 0 <= self.platform_fee_rate < 1:
            raise ValueError("platform_fee_rate must be within [0, 1)")

        if self.min_quantity < 1:
            raise ValueError("min_quantity must be >= 1")

        if self.default_quantity < self.min_quantity:
            raise ValueError("default_quantity must be >= min_quantity")

        if self.near_radius_km < 0 or self.near_flat_fee < 0 or self.per_km_rate < 0:
            raise ValueError("delivery tiers must be >= 0")

        if self.max_delivery_fee < 0:
            raise ValueError("max_delivery_fee must be >= 0")

        if not self.allowed_mime_types:
            raise ValueError("allowed_mime_types must not be empty")

        if self.max_attachment_bytes <= 0:
            raise ValueError("max_attachment_bytes must be > 0")


def default_order_policy() -> OrderPolicy:
    """
    Convenience factory for the default policy.
    """
    p = OrderPolicy()
    p.validate()
    return p
