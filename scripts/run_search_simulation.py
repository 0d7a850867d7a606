import argparse
import logging
import os

from orders import DeliveryType, InMemoryOrderSink, PrescriptionAttachment, place_order
from ranking import ResultFilters, SearchSession, SortMode
from stores import CsvStoreProvider, StaticStoreProvider

def build_provider(inventory_path=None):
    if inventory_path and os.path.exists(inventory_path):
        return CsvStoreProvider(inventory_path)
    return StaticStoreProvider()

def print_results(results, limit=10):
    for rank, result in enumerate(results[:limit], 1):
        store = result.store
        have = ", ".join(m.medicine_name for m in result.available_medicines)
        print(
            f"{rank:>2}. {store.name} ({store.distance_km} km, {store.rating}★) "
            f"score={result.priority_score:.1f} total=₹{result.total_price:.0f} "
            f"eta={result.estimated_delivery}"
        )
        print(f"    available: {have}")
        if result.missing_medicines:
            print(f"    missing:   {', '.join(result.missing_medicines)}")

def main():
    parser = argparse.ArgumentParser(description="Run a medicine search and place an order against the top store.")
    parser.add_argument("query", nargs="?", default="Paracetamol, Cetirizine, Azithromycin")
    parser.add_argument("--inventory", default=None, help="CSV from generate_mock_inventory.py")
    parser.add_argument("--sort", default="priority", choices=[m.value for m in SortMode])
    parser.add_argument("--max-distance", default="all")
    parser.add_argument("--min-rating", default="all")
    parser.add_argument("--pickup", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    session = SearchSession(build_provider(args.inventory))
    outcome = session.search(args.query)
    if outcome is None:
        print("Search superseded by a newer one.")
        return

    print(f"\n--- Search: {args.query!r} -> {outcome.status.value} ---")
    print(outcome.message)
    if not outcome.ok:
        return

    view = outcome.view(args.sort, ResultFilters.from_options(args.max_distance, args.min_rating))
    print_results(view)

    if not view:
        print("No stores left after filtering.")
        return

    # --- Checkout against the top store ---
    sink = InMemoryOrderSink()
    top = view[0]
    delivery_type = DeliveryType.PICKUP if args.pickup else DeliveryType.DELIVERY

    first = place_order(top, sink, delivery_type=delivery_type, delivery_address="123 Main St, Gharuan, Punjab 140413")
    print(f"\nFirst attempt: {first.message}")

    if not first.ok:
        # Retry with an uploaded prescription, like the user would
        attachment = PrescriptionAttachment.from_bytes("prescription.pdf", "application/pdf", b"%PDF-1.4 mock")
        second = place_order(
            top,
            sink,
            delivery_type=delivery_type,
            delivery_address="123 Main St, Gharuan, Punjab 140413",
            prescription=attachment,
        )
        print(f"Second attempt: {second.message}")
        first = second

    if first.ok:
        pricing = first.order.pricing
        print(f"Order {first.order.id}:")
        print(f"  Subtotal:        ₹{pricing.subtotal:.2f}")
        print(f"  Platform (2%):   ₹{pricing.platform_charge:.2f}")
        print(f"  Delivery:        ₹{pricing.delivery_charge:.2f}")
        print(f"  Total:           ₹{pricing.total_amount:.2f}")
        print(f"  {first.order.estimated_delivery}")

if __name__ == "__main__":
    main()
