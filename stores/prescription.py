"""
Purpose: Prescription classifier (medicine name -> requires prescription?).
What it does:

Pure lookup used in two places:
- at aggregation time, to flag matched items for the order screen
- at checkout, to decide whether the prescription gate applies

Any Callable[[str], bool] works; KeywordPrescriptionClassifier is the
default table-driven implementation.
"""

from __future__ import annotations

from typing import Callable, Iterable, Tuple

PrescriptionClassifier = Callable[[str], bool]

# Antibiotics and combination drugs that need a doctor's prescription.
# OTC medicines (Paracetamol, Cetirizine, ...) are not listed.
DEFAULT_PRESCRIPTION_KEYWORDS: Tuple[str, ...] = (
    "Azithromycin",
    "Amoxicillin",
    "Montair LC",
    "Antibiotic",
)


class KeywordPrescriptionClassifier:
    """
    A medicine requires a prescription if its name contains any keyword,
    case-insensitive.
    """
    def __init__(self, keywords: Iterable[str] = DEFAULT_PRESCRIPTION_KEYWORDS):
        self.keywords = tuple(k for k in keywords if k)
        self._lowered = tuple(k.lower() for k in self.keywords)

    def __call__(self, medicine_name: str) -> bool:
        name = medicine_name.lower()
        return any(keyword in name for keyword in self._lowered)


def default_prescription_classifier() -> KeywordPrescriptionClassifier:
    return KeywordPrescriptionClassifier()
