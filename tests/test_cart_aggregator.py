"""Tests for cart warning aggregation."""

from food_safety.domain.products import Product
from food_safety.services.cart import CartAggregator
from tests.conftest import family_profile


def test_identical_messages_collapse_to_one() -> None:
    products = [
        Product(allergens=("en:peanuts",), name="Peanut Butter"),
        Product(allergens=("en:Peanuts", "en:milk"), name="Peanut Cookies"),
    ]

    messages = CartAggregator().aggregate(products, family_profile())

    assert messages == ["⚠️ Sam (child): Peanut Allergy - Contains peanuts"]


def test_distinct_measured_values_are_both_kept() -> None:
    products = [
        Product(nutrients={"sugars_100g": 18}),
        Product(nutrients={"sugars_100g": 22}),
        Product(nutrients={"sugars_100g": 18}),
    ]

    messages = CartAggregator().aggregate(products, family_profile())

    assert messages == [
        "⚠️ You (Alex): Type 2 Diabetes - High sugar content (18g/100g)",
        "⚠️ You (Alex): Type 2 Diabetes - High sugar content (22g/100g)",
    ]


def test_first_occurrence_order_is_kept() -> None:
    products = [
        Product(allergens=("en:peanuts",)),
        Product(nutrients={"sugars_100g": 30}, allergens=("en:peanuts",)),
    ]

    messages = CartAggregator().aggregate(products, family_profile())

    assert messages[0].endswith("Contains peanuts")
    assert "High sugar content (30g/100g)" in messages[1]
    assert len(messages) == 2


def test_empty_cart_yields_nothing() -> None:
    aggregator = CartAggregator()

    assert aggregator.aggregate([], family_profile()) == []
    assert aggregator.aggregate([Product()], family_profile()) == []
