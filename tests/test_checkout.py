import dataclasses

import numpy as np
import pytest

from orders.attachments import validate_attachment
from orders.checkout import build_order, check_prescription_gate, place_order
from orders.delivery import TieredDeliveryPricing
from orders.exceptions import InvalidAttachment, InvalidOrderOption, InvalidQuantity, PrescriptionRequired
from orders.models import DeliveryType, OrderStatus, PaymentMethod, PrescriptionAttachment
from orders.policy import MB, OrderPolicy
from orders.pricing import price_order
from orders.sink import InMemoryOrderSink
from ranking.engine import search_stores

ADDRESS = "123 Main St, Gharuan, Punjab 140413"


@pytest.fixture
def results(scenario_stores, scenario_query):
    outcome = search_stores(scenario_query, scenario_stores)
    return {r.store.id: r for r in outcome.results}


@pytest.fixture
def result_a(results):
    # Paracetamol + Cetirizine: over the counter only
    return results["A"]


@pytest.fixture
def result_b(results):
    # includes Azithromycin, which needs a prescription
    return results["B"]


@pytest.fixture
def pdf():
    return PrescriptionAttachment(filename="rx.pdf", mime_type="application/pdf", size_bytes=120_000)


@pytest.fixture
def sink():
    return InMemoryOrderSink()


# -------------------------
# Pricing
# -------------------------

def test_price_order_delivery(result_b):
    pricing = price_order(result_b, {"Paracetamol 500mg": 2}, DeliveryType.DELIVERY)

    assert pricing.subtotal == pytest.approx(85 * 2 + 82 + 100)
    assert pricing.platform_charge == pytest.approx(352 * 0.02)
    assert pricing.delivery_charge == pytest.approx(10)  # 5 km * 2
    assert pricing.total_amount == pytest.approx(352 + 7.04 + 10)


def test_price_order_pickup_has_no_delivery_charge(result_b):
    pricing = price_order(result_b, delivery_type="pickup")

    assert pricing.subtotal == pytest.approx(267)
    assert pricing.delivery_charge == 0
    assert pricing.total_amount == pytest.approx(267 * 1.02)


def test_quantities_default_to_one_and_unknown_names_are_ignored(result_a):
    pricing = price_order(result_a, {"Insulin": 5})
    assert pricing.subtotal == pytest.approx(167)


@pytest.mark.parametrize("qty", [0, -1, 1.5, "2", True])
def test_invalid_quantities_are_rejected(result_a, qty):
    with pytest.raises(InvalidQuantity) as exc:
        price_order(result_a, {"Cetirizine 10mg": qty})
    assert exc.value.medicine == "Cetirizine 10mg"


def test_numpy_integer_quantities_are_accepted(result_a):
    pricing = price_order(result_a, {"Cetirizine 10mg": np.int64(2)})
    items = build_order(result_a, quantities={"Cetirizine 10mg": np.int32(3)}).items

    assert pricing.subtotal == pytest.approx(85 + 82 * 2)
    assert [type(i.quantity) for i in items] == [int, int]
    assert items[1].quantity == 3


@pytest.mark.parametrize(
    "distance, expected",
    [(0.5, 15), (1.99, 15), (2.0, 4), (10.0, 20), (19.9, 39.8), (30.0, 40)],
)
def test_tiered_delivery_pricing(store_a, distance, expected):
    pricing = TieredDeliveryPricing()
    assert pricing(distance, DeliveryType.DELIVERY, store_a) == pytest.approx(expected)
    assert pricing(distance, DeliveryType.PICKUP, store_a) == 0


def test_injected_delivery_pricing_is_used(result_a):
    calls = []

    def flat_fee(distance_km, delivery_type, store):
        calls.append((distance_km, delivery_type, store.id))
        return 7.5

    pricing = price_order(result_a, delivery_pricing=flat_fee)

    assert calls == [(2.0, DeliveryType.DELIVERY, "A")]
    assert pricing.delivery_charge == pytest.approx(7.5)


def test_negative_delivery_pricing_is_a_programming_error(result_a):
    with pytest.raises(ValueError):
        price_order(result_a, delivery_pricing=lambda d, t, s: -1)


# -------------------------
# Attachments
# -------------------------

def test_attachment_size_boundary():
    ok = PrescriptionAttachment("rx.pdf", "application/pdf", 5 * MB)
    too_big = PrescriptionAttachment("rx.pdf", "application/pdf", 5 * MB + 1)

    assert 5 * MB == 5_242_880
    assert validate_attachment(ok) is ok
    with pytest.raises(InvalidAttachment):
        validate_attachment(too_big)


@pytest.mark.parametrize("mime", ["image/jpeg", "image/jpg", "image/png", "application/pdf", "IMAGE/PNG"])
def test_allowed_attachment_types(mime):
    validate_attachment(PrescriptionAttachment("rx", mime, 1024))


@pytest.mark.parametrize("mime", ["image/gif", "text/plain", "", "application/zip"])
def test_rejected_attachment_types(mime):
    with pytest.raises(InvalidAttachment) as exc:
        validate_attachment(PrescriptionAttachment("rx", mime, 1024))
    assert "JPG, PNG, or PDF" in exc.value.reason


def test_attachment_from_bytes_builds_data_url():
    attachment = PrescriptionAttachment.from_bytes("rx.png", "image/png", b"\x89PNG....")
    assert attachment.size_bytes == 8
    assert attachment.data_url.startswith("data:image/png;base64,")


# -------------------------
# Prescription gate
# -------------------------

def test_gate_blocks_prescription_items_without_attachment(result_b, sink):
    result = place_order(result_b, sink, delivery_address=ADDRESS)

    assert not result.ok
    assert isinstance(result.error, PrescriptionRequired)
    assert result.error.medicines == ("Azithromycin 500mg",)
    assert "Azithromycin 500mg" in result.message
    assert len(sink) == 0


def test_gate_passes_with_valid_attachment(result_b, sink, pdf):
    result = place_order(result_b, sink, delivery_address=ADDRESS, prescription=pdf)

    assert result.ok
    assert result.order.id in sink.order_ids()
    assert result.order.status == OrderStatus.SUBMITTED
    assert result.order.requires_prescription


def test_gate_lists_exactly_the_flagged_items(result_b):
    with pytest.raises(PrescriptionRequired) as exc:
        check_prescription_gate(result_b, None, classifier=lambda name: "cetirizine" in name.lower() or "azithro" in name.lower())
    assert exc.value.medicines == ("Cetirizine 10mg", "Azithromycin 500mg")


@pytest.mark.parametrize("with_attachment", [False, True])
def test_otc_orders_never_block_on_attachment(result_a, sink, pdf, with_attachment):
    result = place_order(result_a, sink, prescription=pdf if with_attachment else None)
    assert result.ok
    assert not result.order.requires_prescription


def test_invalid_attachment_is_rejected_before_the_gate(result_a, sink):
    bad = PrescriptionAttachment("rx.gif", "image/gif", 100)
    result = place_order(result_a, sink, prescription=bad)

    assert isinstance(result.error, InvalidAttachment)
    assert len(sink) == 0


def test_oversized_attachment_fails_even_when_prescription_needed(result_b, sink):
    too_big = PrescriptionAttachment("rx.pdf", "application/pdf", 5 * MB + 1)
    result = place_order(result_b, sink, prescription=too_big)
    assert isinstance(result.error, InvalidAttachment)


# -------------------------
# Order construction
# -------------------------

def test_delivery_order_payload(result_b, sink, pdf):
    result = place_order(
        result_b,
        sink,
        quantities={"Paracetamol 500mg": 2},
        delivery_type="delivery",
        delivery_address=ADDRESS,
        payment_method="upi",
        prescription=pdf,
        notes="Ring the bell",
    )
    order = result.order
    payload = sink.get(order.id)

    assert order.delivery_address == ADDRESS
    assert order.estimated_delivery == "2-3 hours"
    assert order.payment_method == PaymentMethod.UPI
    assert order.customer_notes == "Ring the bell"
    assert [(i.name, i.quantity) for i in order.items] == [
        ("Paracetamol 500mg", 2),
        ("Cetirizine 10mg", 1),
        ("Azithromycin 500mg", 1),
    ]

    assert payload["pharmacy"]["name"] == "Store B"
    assert payload["delivery_method"] == "delivery"
    assert payload["total_amount"] == pytest.approx(369.04)
    assert payload["medicines"][0] == {
        "name": "Paracetamol 500mg",
        "quantity": 2,
        "price": 85.0,
        "requires_prescription": False,
    }


def test_pickup_order_uses_store_as_address(result_a, sink):
    result = place_order(result_a, sink, delivery_type=DeliveryType.PICKUP, notes="")
    order = result.order

    assert order.delivery_address == "Pickup at Store A"
    assert order.estimated_delivery == "Ready for pickup in 15-45 mins"
    assert order.customer_notes.startswith("[PICKUP ORDER]")
    assert order.pricing.delivery_charge == 0
    assert result.message == "Order placed! Your order is ready for pickup."


def test_build_order_does_not_submit(result_a):
    order = build_order(result_a, delivery_address=ADDRESS)

    assert order.id is None
    assert order.status == OrderStatus.DRAFT
    with pytest.raises(dataclasses.FrozenInstanceError):
        order.delivery_address = "elsewhere"


def test_custom_policy_changes_platform_fee(result_a):
    policy = OrderPolicy(platform_fee_rate=0.05)
    order = build_order(result_a, delivery_type="pickup", policy=policy)
    assert order.pricing.platform_charge == pytest.approx(167 * 0.05)


def test_order_policy_validation():
    with pytest.raises(ValueError):
        OrderPolicy(platform_fee_rate=1.5).validate()
    with pytest.raises(ValueError):
        OrderPolicy(min_quantity=0).validate()
    with pytest.raises(ValueError):
        OrderPolicy(max_attachment_bytes=0).validate()


@pytest.mark.parametrize(
    "options, field",
    [
        ({"delivery_type": "courier"}, "delivery type"),
        ({"payment_method": "bitcoin"}, "payment method"),
    ],
)
def test_unknown_order_options_come_back_as_errors(result_a, sink, options, field):
    result = place_order(result_a, sink, delivery_address=ADDRESS, **options)

    assert not result.ok
    assert isinstance(result.error, InvalidOrderOption)
    assert result.error.field == field
    assert len(sink) == 0
