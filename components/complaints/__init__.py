"""
Complaints Component - complaint records and their JSON file store.
"""

from components.complaints.models import (
    DEFAULT_CATEGORY,
    Complaint,
    ComplaintCreate,
    ComplaintUpdate,
)
from components.complaints.store import JsonRecordStore

__all__ = [
    "DEFAULT_CATEGORY",
    "Complaint",
    "ComplaintCreate",
    "ComplaintUpdate",
    "JsonRecordStore",
]
