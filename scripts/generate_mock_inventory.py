import uuid

import numpy as np
import pandas as pd

from stores.catalog import MEDICINE_TEMPLATE

def generate_mock_inventory(num_stores=25, output_file="mock_inventory.csv", seed=None):
    """
    Generates a flat inventory CSV (one row per store listing) that
    stores.provider.CsvStoreProvider can load.
    Every store carries a random subset of the medicine template, and a few
    listings are marked unavailable so searches produce partial coverage.
    """
    rng = np.random.default_rng(seed)

    # Center around Kharar / Mohali (same area as the seed catalog)
    CENTER_LAT = 30.7390
    CENTER_LON = 76.6510

    rows = []
    for store_index in range(num_stores):
        store_id = f"s_{str(uuid.uuid4())[:8]}"
        distance_km = np.round(rng.uniform(0.3, 12.0), 2)
        rating = np.round(rng.uniform(3.0, 5.0), 1)
        is_24x7 = bool(rng.random() < 0.2)

        # Each store stocks 3..all template medicines
        count = rng.integers(3, len(MEDICINE_TEMPLATE) + 1)
        picked = rng.choice(len(MEDICINE_TEMPLATE), size=count, replace=False)

        for med_index in sorted(picked):
            med = MEDICINE_TEMPLATE[med_index]
            unavailable = rng.random() < 0.15
            rows.append({
                "store_id": store_id,
                "store_name": f"Pharmacy {store_index + 1}",
                "distance_km": distance_km,
                "rating": rating,
                "address": f"{distance_km}km from Kharar",
                "contact_number": f"+91-98{rng.integers(10000000, 99999999)}",
                "lat": np.round(CENTER_LAT + rng.uniform(-0.08, 0.08), 6),
                "lon": np.round(CENTER_LON + rng.uniform(-0.08, 0.08), 6),
                "timing": "24/7" if is_24x7 else "9AM - 9PM",
                "is_open_24x7": is_24x7,
                "has_home_delivery": bool(distance_km < 5),
                "has_pickup": True,
                "medicine_name": med.name,
                "category": med.category,
                "price": max(1, med.price + int(rng.integers(-3, 4))),
                "stock_quantity": 0 if unavailable else int(rng.integers(10, 250)),
                "availability": "Unavailable" if unavailable else "In Stock",
            })

    df = pd.DataFrame(rows)
    df.to_csv(output_file, index=False)
    print(f"✅ Generated {num_stores} stores ({len(df)} listings) and saved to '{output_file}'")

    # Quick preview of how often each medicine is actually in stock
    print("\nIn-stock listings per medicine:")
    counts = df[df["availability"] == "In Stock"]["medicine_name"].value_counts()
    for name, count in counts.items():
        print(f"  {name}: {count} stores")

if __name__ == "__main__":
    generate_mock_inventory(num_stores=25)
