"""
Stores domain package.

Public API:
- Domain models: Store, MedicineListing, Availability
- Providers: StoreProvider, StaticStoreProvider, CsvStoreProvider, OverpassStoreProvider
- Seed data: SEED_STORES, MEDICINE_TEMPLATE
- Prescription lookup: PrescriptionClassifier, KeywordPrescriptionClassifier
"""
from .models import Availability, MedicineListing, Store
from .catalog import MEDICINE_TEMPLATE, SEED_STORES
from .prescription import KeywordPrescriptionClassifier, PrescriptionClassifier, default_prescription_classifier
from .provider import CsvStoreProvider, OverpassStoreProvider, StaticStoreProvider, StoreProvider

__all__ = [
    "Availability",
    "MedicineListing",
    "Store",
    "MEDICINE_TEMPLATE",
    "SEED_STORES",
    "StoreProvider",
    "StaticStoreProvider",
    "CsvStoreProvider",
    "OverpassStoreProvider",
    "PrescriptionClassifier",
    "KeywordPrescriptionClassifier",
    "default_prescription_classifier",
]
