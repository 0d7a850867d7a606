from typing import Iterable, Tuple


class CheckoutError(Exception):
    """Base for user-recoverable checkout failures."""
    pass


class PrescriptionRequired(CheckoutError):
    """Raised when prescription-only medicines are ordered without an attachment."""

    def __init__(self, medicines: Iterable[str]):
        self.medicines: Tuple[str, ...] = tuple(medicines)
        super().__init__(
            "The following medicines require a valid prescription: "
            f"{', '.join(self.medicines)}. Please upload your prescription to continue."
        )


class InvalidAttachment(CheckoutError):
    """Raised when a prescription upload has the wrong type or is too large."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class InvalidQuantity(CheckoutError):
    """Raised when an item quantity is not a whole number >= the minimum."""

    def __init__(self, medicine: str, quantity):
        self.medicine = medicine
        self.quantity = quantity
        super().__init__(f"Invalid quantity {quantity!r} for {medicine}")


class InvalidOrderOption(CheckoutError):
    """Raised when a delivery type or payment method is not one we offer."""

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r}")
