"""
Purpose: Package entry + stable exports.
What it does:

Marks orders as a Python package and re-exports the public API so other
modules can do:

from orders import place_order, DeliveryType, PrescriptionAttachment

Should not contain business logic.

Orders domain package.

Public API:
- Domain models: Order, OrderItem, OrderPricing, PrescriptionAttachment,
  DeliveryType, PaymentMethod, OrderStatus
- Pricing: price_order, TieredDeliveryPricing
- Checkout entry: place_order, build_order, CheckoutResult
- Errors: CheckoutError, PrescriptionRequired, InvalidAttachment, InvalidQuantity,
  InvalidOrderOption
"""
from .models import (
    DeliveryType,
    Order,
    OrderItem,
    OrderPricing,
    OrderStatus,
    PaymentMethod,
    PrescriptionAttachment,
)
from .policy import OrderPolicy, default_order_policy
from .exceptions import (
    CheckoutError,
    InvalidAttachment,
    InvalidOrderOption,
    InvalidQuantity,
    PrescriptionRequired,
)
from .attachments import validate_attachment
from .delivery import DeliveryPricing, TieredDeliveryPricing
from .pricing import price_order
from .sink import InMemoryOrderSink, OrderSink
from .checkout import CheckoutResult, build_order, check_prescription_gate, place_order

__all__ = ["Order",
           "OrderItem",
           "OrderPricing",
           "OrderStatus",
           "DeliveryType",
           "PaymentMethod",
           "PrescriptionAttachment",
           "OrderPolicy",
           "default_order_policy",
           "CheckoutError",
           "PrescriptionRequired",
           "InvalidAttachment",
           "InvalidQuantity",
           "InvalidOrderOption",
           "validate_attachment",
           "DeliveryPricing",
           "TieredDeliveryPricing",
           "price_order",
           "OrderSink",
           "InMemoryOrderSink",
           "CheckoutResult",
           "build_order",
           "check_prescription_gate",
           "place_order",
           ]
