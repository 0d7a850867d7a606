"""
Purpose: Turn a chosen StoreResult into a submitted Order.
What it does:

1) validates the prescription attachment, if any (type/size)

2) prescription gate: any item the classifier flags needs an attachment

3) builds items + pricing (orders.pricing)

4) fills delivery address / estimate / notes by delivery type

5) hands the payload to the OrderSink and returns the submitted Order

build_order() raises CheckoutError subclasses; place_order() wraps the
whole flow and returns a CheckoutResult instead, so callers can render
guidance without a try/except.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional

from ranking.models import StoreResult
from stores.prescription import PrescriptionClassifier, default_prescription_classifier

from .attachments import validate_attachment
from .delivery import DeliveryPricing, TieredDeliveryPricing
from .exceptions import CheckoutError, InvalidOrderOption, PrescriptionRequired
from .models import DeliveryType, Order, PaymentMethod, PrescriptionAttachment
from .policy import OrderPolicy, default_order_policy
from .pricing import build_items, compute_pricing
from .sink import OrderSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    """
    Output of place_order: either a submitted order or the reason it was blocked.
    """
    order: Optional[Order] = None
    error: Optional[CheckoutError] = None

    @property
    def ok(self) -> bool:
        return self.order is not None and self.error is None

    @property
    def message(self) -> str:
        if self.error is not None:
            return str(self.error)
        if self.order is not None and self.order.delivery_type == DeliveryType.PICKUP:
            return "Order placed! Your order is ready for pickup."
        return "Order placed successfully!"


def prescription_items(
    result: StoreResult,
    classifier: Optional[PrescriptionClassifier] = None,
) -> List[str]:
    """
    Names of the available medicines that need a prescription, in result order.
    """
    classifier = classifier or default_prescription_classifier()
    return [m.medicine_name for m in result.available_medicines if classifier(m.medicine_name)]


def check_prescription_gate(
    result: StoreResult,
    attachment: Optional[PrescriptionAttachment],
    classifier: Optional[PrescriptionClassifier] = None,
) -> List[str]:
    """
    Raises PrescriptionRequired when flagged items have no attachment.
    Returns the flagged names (possibly empty) otherwise.
    """
    required = prescription_items(result, classifier)
    if required and attachment is None:
        raise PrescriptionRequired(required)
    if not required and attachment is not None:
        logger.info("Prescription uploaded for %s but not required", result.store.id)
    return required


def _coerce_option(enum_cls, value, field: str):
    try:
        return enum_cls(value)
    except ValueError as e:
        raise InvalidOrderOption(field, value) from e


def build_order(
    result: StoreResult,
    *,
    quantities: Optional[Mapping[str, int]] = None,
    delivery_type: DeliveryType | str = DeliveryType.DELIVERY,
    delivery_address: str = "",
    payment_method: PaymentMethod | str = PaymentMethod.COD,
    prescription: Optional[PrescriptionAttachment] = None,
    notes: str = "",
    classifier: Optional[PrescriptionClassifier] = None,
    delivery_pricing: Optional[DeliveryPricing] = None,
    policy: Optional[OrderPolicy] = None,
) -> Order:
    """
    Validate, gate and price an order. Raises CheckoutError subclasses.
    The returned Order has no id until it is submitted.
    """
    policy = policy or default_order_policy()
    classifier = classifier or default_prescription_classifier()
    delivery_pricing = delivery_pricing or TieredDeliveryPricing(policy)
    delivery_type = _coerce_option(DeliveryType, delivery_type, "delivery type")
    payment_method = _coerce_option(PaymentMethod, payment_method, "payment method")

    if prescription is not None:
        validate_attachment(prescription, policy)

    check_prescription_gate(result, prescription, classifier)

    items = build_items(result, quantities, classifier=classifier, policy=policy)
    store = result.store
    delivery_charge = float(delivery_pricing(store.distance_km, delivery_type, store))
    pricing = compute_pricing(items, delivery_charge, policy)

    if delivery_type == DeliveryType.PICKUP:
        address = f"Pickup at {store.name}"
        estimate = policy.pickup_estimate
        customer_notes = f"{notes}\n\n{policy.pickup_note}" if notes else policy.pickup_note
    else:
        address = delivery_address
        estimate = result.estimated_delivery
        customer_notes = notes

    return Order(
        store_id=store.id,
        store_name=store.name,
        store_address=store.address,
        store_phone=store.contact_number,
        distance_km=store.distance_km,
        items=tuple(items),
        pricing=pricing,
        delivery_type=delivery_type,
        delivery_address=address,
        payment_method=payment_method,
        estimated_delivery=estimate,
        prescription=prescription,
        customer_notes=customer_notes,
    )


def place_order(
    result: StoreResult,
    sink: OrderSink,
    **order_options,
) -> CheckoutResult:
    """
    Build the order and submit it to `sink`. Never raises for user-input
    problems: they come back as CheckoutResult.error.
    """
    try:
        order = build_order(result, **order_options)
    except CheckoutError as e:
        logger.info("Checkout blocked for %s: %s", result.store.id, e)
        return CheckoutResult(error=e)

    order_id = sink(order.to_payload())
    submitted = order.submitted(order_id)

    logger.info(
        "Order %s placed at %s: %d items, total %.2f (%s)",
        order_id, submitted.store_id, len(submitted.items),
        submitted.pricing.total_amount, submitted.delivery_type.value,
    )
    return CheckoutResult(order=submitted)
