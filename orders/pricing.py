"""
Purpose: Price a chosen store result.
What it does:

subtotal = Σ unit_price * quantity (available items only)

platform_charge = subtotal * 0.02

delivery_charge = DeliveryPricing(distance_km, delivery_type, store)

total_amount = subtotal + platform_charge + delivery_charge

Quantities default to 1 per item; names not in the result are ignored.
"""

from __future__ import annotations

import numbers
from typing import List, Mapping, Optional

from ranking.models import StoreResult
from stores.prescription import PrescriptionClassifier, default_prescription_classifier

from .delivery import DeliveryPricing, TieredDeliveryPricing
from .exceptions import InvalidQuantity
from .models import DeliveryType, OrderItem, OrderPricing
from .policy import OrderPolicy, default_order_policy


def build_items(
    result: StoreResult,
    quantities: Optional[Mapping[str, int]] = None,
    *,
    classifier: Optional[PrescriptionClassifier] = None,
    policy: Optional[OrderPolicy] = None,
) -> List[OrderItem]:
    """
    One OrderItem per available medicine, keyed by listing name in `quantities`.
    """
    quantities = quantities or {}
    classifier = classifier or default_prescription_classifier()
    policy = policy or default_order_policy()

    items: List[OrderItem] = []
    for med in result.available_medicines:
        qty = quantities.get(med.medicine_name, policy.default_quantity)

        # bool is an int subclass; True is not a quantity
        if isinstance(qty, bool) or not isinstance(qty, numbers.Integral) or qty < policy.min_quantity:
            raise InvalidQuantity(med.medicine_name, qty)

        items.append(
            OrderItem(
                name=med.medicine_name,
                quantity=int(qty),
                unit_price=med.price,
                requires_prescription=bool(classifier(med.medicine_name)),
            )
        )
    return items


def compute_pricing(
    items: List[OrderItem],
    delivery_charge: float,
    policy: Optional[OrderPolicy] = None,
) -> OrderPricing:
    policy = policy or default_order_policy()

    if delivery_charge < 0:
        raise ValueError(f"delivery pricing returned a negative amount: {delivery_charge}")

    subtotal = sum(item.line_total for item in items)
    platform_charge = subtotal * policy.platform_fee_rate

    return OrderPricing(
        subtotal=subtotal,
        platform_charge=platform_charge,
        delivery_charge=delivery_charge,
        total_amount=subtotal + platform_charge + delivery_charge,
    )


def price_order(
    result: StoreResult,
    quantities: Optional[Mapping[str, int]] = None,
    delivery_type: DeliveryType = DeliveryType.DELIVERY,
    *,
    delivery_pricing: Optional[DeliveryPricing] = None,
    classifier: Optional[PrescriptionClassifier] = None,
    policy: Optional[OrderPolicy] = None,
) -> OrderPricing:
    """
    Pricing only, for showing totals before the user confirms.
    """
    policy = policy or default_order_policy()
    delivery_pricing = delivery_pricing or TieredDeliveryPricing(policy)

    items = build_items(result, quantities, classifier=classifier, policy=policy)
    delivery_charge = delivery_pricing(result.store.distance_km, DeliveryType(delivery_type), result.store)
    return compute_pricing(items, float(delivery_charge), policy)
