"""
Purpose: Static seed data for the Stores capability.
What it does:
- MEDICINE_TEMPLATE: the reference shelf used to stock stores that come
  from the map API (which knows locations but not inventory).
- SEED_STORES: a fixed snapshot of stores around the Kharar/Mohali area,
  used as the default provider and as the fallback when discovery fails.

Rule: Data only. Build stores with Store.new so validation still runs.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from .models import Availability, MedicineListing, Store

# name, category, base price, generic name, manufacturer, dosage, pack size
_TEMPLATE_ROWS: List[Tuple[str, str, float, str, str, str, str]] = [
    ("Dolo 650", "Pain Relief", 32, "Paracetamol", "Micro Labs", "650mg", "15 tablets"),
    ("Paracetamol 500mg", "Pain Relief", 12, "Acetaminophen", "Sun Pharma", "500mg", "15 tablets"),
    ("Crocin Advance", "Pain Relief", 18, "Paracetamol", "GSK", "500mg", "15 tablets"),
    ("Allegra 120mg", "Allergy Relief", 85, "Fexofenadine", "Sanofi", "120mg", "10 tablets"),
    ("Cetirizine 10mg", "Allergy Relief", 15, "Cetirizine Hydrochloride", "Cipla", "10mg", "10 tablets"),
    ("Montair LC", "Allergy Relief", 95, "Montelukast + Levocetirizine", "Cipla", "5mg + 10mg", "10 tablets"),
    ("Azithromycin 500mg", "Antibiotic", 120, "Azithromycin", "Zydus", "500mg", "3 tablets"),
    ("Amoxicillin 500mg", "Antibiotic", 80, "Amoxicillin", "Dr. Reddy's", "500mg", "10 capsules"),
]

MEDICINE_TEMPLATE: Tuple[MedicineListing, ...] = tuple(
    MedicineListing.new(
        name=name,
        category=category,
        price=price,
        stock_quantity=100,
        availability=Availability.IN_STOCK,
        generic_name=generic,
        manufacturer=manufacturer,
        dosage=dosage,
        pack_size=pack_size,
    )
    for name, category, price, generic, manufacturer, dosage, pack_size in _TEMPLATE_ROWS
)

_TEMPLATE_BY_NAME: Dict[str, MedicineListing] = {m.name: m for m in MEDICINE_TEMPLATE}


def _shelf(rows: Sequence[Tuple[str, float, int]]) -> List[MedicineListing]:
    """
    Build a store shelf from (template name, price, stock) rows.
    Zero stock marks the listing as unavailable at that store.
    """
    shelf = []
    for name, price, stock in rows:
        base = _TEMPLATE_BY_NAME[name]
        shelf.append(
            MedicineListing.new(
                name=base.name,
                category=base.category,
                price=price,
                stock_quantity=stock,
                availability=Availability.IN_STOCK if stock > 0 else Availability.UNAVAILABLE,
                generic_name=base.generic_name,
                manufacturer=base.manufacturer,
                dosage=base.dosage,
                pack_size=base.pack_size,
            )
        )
    return shelf


SEED_STORES: Tuple[Store, ...] = (
    Store.new(
        "STORE001", "Kailon Clinic", 4.97, 4.3,
        _shelf([
            ("Paracetamol 500mg", 10, 150),
            ("Cetirizine 10mg", 15, 0),
            ("Dolo 650", 12, 80),
            ("Crocin Advance", 18, 65),
            ("Allegra 120mg", 86, 40),
            ("Montair LC", 94, 50),
            ("Azithromycin 500mg", 120, 25),
            ("Amoxicillin 500mg", 80, 40),
        ]),
        address="Kharar Road, Mohali, Punjab 140301",
        contact_number="+91-98765-43210",
        location=(30.7390, 76.6510),
        timing="9AM - 8PM",
    ),
    Store.new(
        "STORE002", "Thakur Clinic", 6.48, 4.4,
        _shelf([
            ("Paracetamol 500mg", 12, 200),
            ("Cetirizine 10mg", 14, 0),
            ("Dolo 650", 11, 150),
            ("Crocin Advance", 17, 80),
            ("Allegra 120mg", 85, 35),
            ("Montair LC", 92, 45),
            ("Azithromycin 500mg", 115, 30),
            ("Amoxicillin 500mg", 75, 55),
        ]),
        address="Industrial Area, Sahibzada Ajit Singh Nagar, Mohali, Punjab 160055",
        contact_number="+91-98888-12345",
        location=(30.7050, 76.6920),
    ),
    Store.new(
        "STORE003", "Siya Health Care", 6.9, 4.2,
        _shelf([
            ("Paracetamol 500mg", 11, 100),
            ("Dolo 650", 13, 90),
            ("Crocin Advance", 19, 85),
            ("Allegra 120mg", 85, 35),
            ("Cetirizine 10mg", 15, 60),
            ("Montair LC", 95, 50),
            ("Amoxicillin 500mg", 82, 45),
        ]),
        address="Kuhali, Kharar, Punjab 140301",
        contact_number="+91-98777-54321",
        location=(30.7420, 76.6380),
        timing="8AM - 10PM",
    ),
    Store.new(
        "STORE004", "Behgal Multispecialty Hospital", 7.74, 4.6,
        _shelf([
            ("Paracetamol 500mg", 10, 180),
            ("Cetirizine 10mg", 14, 0),
            ("Dolo 650", 13, 130),
            ("Crocin Advance", 18, 75),
            ("Allegra 120mg", 88, 40),
            ("Montair LC", 93, 55),
            ("Azithromycin 500mg", 118, 30),
            ("Amoxicillin 500mg", 78, 60),
        ]),
        address="Industrial Area Phase 8B, Mohali, Punjab 160055",
        contact_number="+91-98141-09573",
        location=(30.6980, 76.7020),
        timing="24/7",
        is_open_24x7=True,
    ),
    Store.new(
        "STORE005", "Sharma Hospital, S.A.S Nagar", 8.02, 4.5,
        _shelf([
            ("Paracetamol 500mg", 9, 210),
            ("Cetirizine 10mg", 13, 70),
            ("Dolo 650", 12, 120),
            ("Allegra 120mg", 84, 30),
            ("Azithromycin 500mg", 119, 15),
        ]),
        address="Landran Road, Kharar, Punjab 140301",
        contact_number="+91-0160-503-2384",
        location=(30.7450, 76.6280),
        timing="24/7",
        is_open_24x7=True,
        has_home_delivery=False,
    ),
)
