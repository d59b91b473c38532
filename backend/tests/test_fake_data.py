"""
Storefront Backend - Fake Catalog Generator Tests
==================================================

What we test:
    ✅ Requested count is honored (including zero)
    ✅ Ids are unique
    ✅ Field values stay inside their documented ranges
    ✅ Same seed → same catalog; different seeds → different catalogs
    ✅ Negative counts are rejected
"""

import uuid

import pytest

from storefront.services.fake_data import (
    DEPARTMENTS,
    MAX_PRICE,
    MIN_PRICE,
    generate_fake_products,
)


class TestGenerateFakeProducts:
    """Tests for generate_fake_products()."""

    def test_generates_requested_count(self):
        assert len(generate_fake_products(25)) == 25

    def test_zero_count_yields_empty_catalog(self):
        assert generate_fake_products(0) == []

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError, match="count must be >= 0"):
            generate_fake_products(-1)

    def test_ids_are_unique(self):
        products = generate_fake_products(200)
        ids = [p.id for p in products]
        assert len(set(ids)) == len(ids)

    def test_ids_are_uuid4_strings(self):
        for product in generate_fake_products(10, seed=7):
            assert uuid.UUID(product.id).version == 4

    def test_field_values_are_consistent(self):
        """Every field is populated and within range."""
        for product in generate_fake_products(50, seed=3):
            assert MIN_PRICE <= product.price <= MAX_PRICE
            assert round(product.price, 2) == product.price
            assert product.category in DEPARTMENTS
            assert len(product.name.split()) == 3
            assert product.description
            assert product.image == f"https://picsum.photos/seed/{product.id}/640/480"

    def test_same_seed_reproduces_catalog(self):
        assert generate_fake_products(10, seed=99) == generate_fake_products(10, seed=99)

    def test_different_seeds_differ(self):
        first = generate_fake_products(10, seed=1)
        second = generate_fake_products(10, seed=2)
        assert [p.id for p in first] != [p.id for p in second]
