"""Unit tests for the brand service."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import patch
from fleet_api.errors import NotFoundError, StoreError, ValidationError
from fleet_api.services.brand_service import (
    DEFAULT_BRANDS, create_brand, delete_brand, get_brand, list_brands,
    seed_default_brands, update_brand,
)


class TestBrandListing:
    def test_first_listing_seeds_catalog(self, store):
        brands = list_brands(store, {})
        assert len(brands) == len(DEFAULT_BRANDS) == 16
        assert brands[0] == {"id": 1, "name": "Audi", "country": "Germany"}

    def test_seeding_happens_once(self, store):
        list_brands(store, {})
        assert not seed_default_brands(store)
        assert len(list_brands(store, {})) == 16

    def test_seeding_can_be_disabled(self, store):
        with patch("fleet_api.services.brand_service.settings") as mock_settings:
            mock_settings.SEED_BRANDS = False
            assert list_brands(store, {}) == []

    def test_filter_by_name(self, store):
        assert [b["name"] for b in list_brands(store, {"name": "Fiat"})] == ["Fiat"]

    def test_filter_by_country_list(self, store):
        brands = list_brands(store, {"country": "Italy,Japan"})
        assert {b["country"] for b in brands} == {"Italy", "Japan"}
        assert len(brands) == 4

    def test_no_match_is_an_empty_list(self, store):
        assert list_brands(store, {"name": "Audi", "country": "Japan"}) == []

    def test_unknown_filter_rejected(self, store):
        with pytest.raises(ValidationError, match="unknown filter"):
            list_brands(store, {"founded": "1909"})


class TestBrandCrud:
    def test_get_by_id(self, seeded_store):
        assert get_brand(seeded_store, 1) == {"id": 1, "name": "Audi", "country": "Germany"}

    def test_get_missing_not_found(self, seeded_store):
        with pytest.raises(NotFoundError, match="brand not found"):
            get_brand(seeded_store, 100)

    def test_create_update_delete(self, seeded_store):
        msg = create_brand(seeded_store, "Suzuki", "Japan")
        assert msg == 'Brand created with name "Suzuki", country "Japan".'
        assert get_brand(seeded_store, 17)["name"] == "Suzuki"

        msg = update_brand(seeded_store, 17, "Ferrari", "Italy")
        assert msg == 'Brand updated to "Ferrari", country "Italy".'
        assert get_brand(seeded_store, 17) == {"id": 17, "name": "Ferrari", "country": "Italy"}

        assert delete_brand(seeded_store, 17) == 'Brand "17" removed.'
        with pytest.raises(NotFoundError):
            get_brand(seeded_store, 17)

    @pytest.mark.parametrize("name,country", [("X", "ABC"), ("XYZ", "A"), ("", "")])
    def test_short_fields_rejected(self, seeded_store, name, country):
        with pytest.raises(ValidationError, match="characters"):
            create_brand(seeded_store, name, country)
        with pytest.raises(ValidationError, match="characters"):
            update_brand(seeded_store, 1, name, country)

    def test_duplicate_name_is_a_store_error(self, seeded_store):
        with pytest.raises(StoreError):
            create_brand(seeded_store, "Audi", "Germany")

    def test_update_missing_not_found(self, seeded_store):
        with pytest.raises(NotFoundError):
            update_brand(seeded_store, 100, "Lada", "Russia")

    def test_delete_missing_not_found(self, seeded_store):
        with pytest.raises(NotFoundError):
            delete_brand(seeded_store, 100)
