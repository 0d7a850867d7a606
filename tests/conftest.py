import pytest

from stores.models import MedicineListing, Store


def listing(name, price, stock=50, availability="In Stock", category="General"):
    return MedicineListing.new(
        name=name,
        price=price,
        category=category,
        stock_quantity=stock,
        availability=availability,
    )


@pytest.fixture
def store_a():
    # Close and well rated, but no Azithromycin
    return Store.new(
        "A", "Store A", 2.0, 4.5,
        [
            listing("Paracetamol 500mg", 85, category="Pain Relief"),
            listing("Cetirizine 10mg", 82, category="Allergy Relief"),
        ],
        address="1 Market Road",
        contact_number="+91-1111",
    )


@pytest.fixture
def store_b():
    # Further and pricier, but stocks everything
    return Store.new(
        "B", "Store B", 5.0, 4.0,
        [
            listing("Paracetamol 500mg", 85, category="Pain Relief"),
            listing("Cetirizine 10mg", 82, category="Allergy Relief"),
            listing("Azithromycin 500mg", 100, category="Antibiotic"),
        ],
        address="2 Hospital Lane",
        contact_number="+91-2222",
    )


@pytest.fixture
def store_c():
    # Closest, only Paracetamol
    return Store.new(
        "C", "Store C", 1.0, 3.5,
        [
            listing("Paracetamol 500mg", 85, category="Pain Relief"),
            listing("Azithromycin 500mg", 100, stock=0, availability="Out of Stock", category="Antibiotic"),
        ],
    )


@pytest.fixture
def scenario_stores(store_a, store_b, store_c):
    return [store_a, store_b, store_c]


@pytest.fixture
def scenario_query():
    return "Paracetamol, Cetirizine, Azithromycin"
