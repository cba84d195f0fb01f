"""
Shared fixtures for the complaint analysis tests.
"""

import pytest

from components.complaints.store import JsonRecordStore
from components.taxonomy import get_taxonomy


@pytest.fixture(scope="session")
def campus():
    return get_taxonomy("campus")


@pytest.fixture(scope="session")
def civic():
    return get_taxonomy("civic")


@pytest.fixture
def store(tmp_path):
    record_store = JsonRecordStore(tmp_path / "data")
    record_store.initialize()
    return record_store


@pytest.fixture
def wifi_pair():
    """Two reports of the same outage, worded differently."""
    return (
        {"id": 1, "description": "wifi is not working in lab 3", "category": "internet_connectivity"},
        {"id": 2, "description": "wifi down in laboratory 3 again", "category": "internet_connectivity"},
    )
