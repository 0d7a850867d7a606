"""
Purpose: Domain models for the Orders capability.
What it does:
- Defines core data structures:
- PrescriptionAttachment (filename, mime type, size, optional data URL)
- OrderItem (name, quantity, unit price, prescription flag)
- OrderPricing (subtotal, platform charge, delivery charge, total)
- Order (the priced, confirmed order handed to the order sink)

Defines enums/constants:
- DeliveryType = DELIVERY | PICKUP
- PaymentMethod = COD | UPI | CARD
- OrderStatus = DRAFT | SUBMITTED

Rule: No pricing, no gate logic. Models only.
"""
from __future__ import annotations

import base64
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class DeliveryType(str, Enum):
    DELIVERY = "delivery"
    PICKUP = "pickup"


class PaymentMethod(str, Enum):
    COD = "cod"
    UPI = "upi"
    CARD = "card"


class OrderStatus(Enum):
    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"


@dataclass(frozen=True)
class PrescriptionAttachment:
    """
    Descriptor of an uploaded prescription file.
    Validation (type/size) happens in orders.attachments, not here.
    """
    filename: str
    mime_type: str
    size_bytes: int
    data_url: Optional[str] = None

    @classmethod
    def from_bytes(cls, filename: str, mime_type: str, content: bytes) -> PrescriptionAttachment:
        """
        Build an attachment from raw file content, with a base64 data URL
        for the order payload.
        """
        encoded = base64.b64encode(content).decode("ascii")
        return cls(
            filename=filename,
            mime_type=mime_type,
            size_bytes=len(content),
            data_url=f"data:{mime_type};base64,{encoded}",
        )


@dataclass(frozen=True)
class OrderItem:
    name: str
    quantity: int
    unit_price: float
    requires_prescription: bool = False

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class OrderPricing:
    subtotal: float
    platform_charge: float
    delivery_charge: float
    total_amount: float


@dataclass(frozen=True)
class Order:
    """
    A confirmed order. Immutable: submission returns a copy carrying the
    id the sink assigned.
    """
    store_id: str
    store_name: str
    store_address: str
    store_phone: str
    distance_km: float

    items: Tuple[OrderItem, ...]
    pricing: OrderPricing

    delivery_type: DeliveryType
    delivery_address: str
    payment_method: PaymentMethod
    estimated_delivery: str

    prescription: Optional[PrescriptionAttachment] = None
    customer_notes: str = ""

    id: Optional[str] = None
    status: OrderStatus = OrderStatus.DRAFT
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def requires_prescription(self) -> bool:
        return any(item.requires_prescription for item in self.items)

    def submitted(self, order_id: str) -> Order:
        return replace(self, id=order_id, status=OrderStatus.SUBMITTED)

    def to_payload(self) -> Dict[str, Any]:
        """
        Plain-dict form handed verbatim to the order sink.
        """
        return {
            "pharmacy": {
                "id": self.store_id,
                "name": self.store_name,
                "address": self.store_address,
                "phone": self.store_phone,
                "distance": f"{self.distance_km} km",
            },
            "medicines": [
                {
                    "name": item.name,
                    "quantity": item.quantity,
                    "price": item.unit_price,
                    "requires_prescription": item.requires_prescription,
                }
                for item in self.items
            ],
            "subtotal": self.pricing.subtotal,
            "platform_charge": self.pricing.platform_charge,
            "delivery_charge": self.pricing.delivery_charge,
            "total_amount": self.pricing.total_amount,
            "delivery_method": self.delivery_type.value,
            "delivery_address": self.delivery_address,
            "payment_method": self.payment_method.value,
            "estimated_delivery": self.estimated_delivery,
            "prescription_url": self.prescription.data_url if self.prescription else None,
            "customer_notes": self.customer_notes,
            "created_at": self.created_at.isoformat(),
        }
