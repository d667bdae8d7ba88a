"""Shared fixtures: a fresh in-memory SQLite store per test."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fleet_api.database import Store
from fleet_api.services.brand_service import seed_default_brands


@pytest.fixture
def store():
    s = Store("sqlite://")
    s.create_tables()
    yield s
    s.close()


@pytest.fixture
def seeded_store(store):
    """Store with the 16 default brands (Fiat = 5, Ford = 6, Volkswagen = 16)."""
    seed_default_brands(store)
    return store
