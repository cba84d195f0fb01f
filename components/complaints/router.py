"""
FastAPI router for complaint records.

Thin CRUD layer over the JSON record store, plus the analysis entry
points that need stored complaints (similar complaints, full analysis).
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from components.base import ComponentConfig
from components.base.exceptions import ComponentError, NotFoundError
from components.classification.service import ClassificationService
from components.complaints.models import Complaint, ComplaintCreate, ComplaintUpdate
from components.complaints.store import JsonRecordStore
from components.orchestrator.models import ComprehensiveAnalysis
from components.orchestrator.workflow import run_analysis
from components.similarity.models import SimilarityReport
from components.similarity.service import SimilarityService

logger = logging.getLogger(__name__)

COLLECTION = "complaints"

router = APIRouter(prefix="/complaints", tags=["Complaints"])


class StoreConfig(ComponentConfig):
    """Configuration for the complaint record store."""

    data_dir: str = "data"

    class Config:
        env_prefix = "STORE_"


_store: Optional[JsonRecordStore] = None


def get_store() -> JsonRecordStore:
    """Dependency injection for the record store."""
    global _store
    if _store is None:
        _store = JsonRecordStore(StoreConfig().data_dir)
        _store.initialize()
    return _store


def get_classifier() -> ClassificationService:
    return ClassificationService()


def _load(store: JsonRecordStore, complaint_id: int) -> Dict[str, Any]:
    record = store.find_by_id(COLLECTION, complaint_id)
    if record is None:
        raise NotFoundError(
            f"Complaint {complaint_id} not found",
            component="complaints",
            collection=COLLECTION,
            record_id=complaint_id,
        )
    return record


def _others(store: JsonRecordStore, complaint_id: int) -> List[Dict[str, Any]]:
    return [r for r in store.get_all(COLLECTION) if r.get("id") != complaint_id]


def _error_response(e: ComponentError) -> HTTPException:
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.to_dict())
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_dict())


@router.get("/", response_model=List[Complaint])
async def list_complaints(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    category: Optional[str] = None,
    priority: Optional[str] = None,
    store: JsonRecordStore = Depends(get_store),
):
    """List complaints, newest first, optionally filtered."""
    query = {
        key: value
        for key, value in (("status", status_filter), ("category", category), ("priority", priority))
        if value is not None
    }
    records = store.find(COLLECTION, query) if query else store.get_all(COLLECTION)
    return sorted(records, key=lambda r: r.get("created_at") or "", reverse=True)


@router.post("/", response_model=Complaint, status_code=status.HTTP_201_CREATED)
async def create_complaint(
    payload: ComplaintCreate,
    store: JsonRecordStore = Depends(get_store),
    classifier: ClassificationService = Depends(get_classifier),
):
    """File a complaint. Missing category and priority are predicted."""
    prediction = classifier.classify(payload.description)
    record = store.insert(COLLECTION, {
        "description": payload.description,
        "category": payload.category or prediction.category,
        "priority": payload.priority or prediction.priority,
        "status": "submitted",
        "location": payload.location,
        "summary": prediction.summary,
        "department": prediction.department.model_dump(),
    })
    logger.info("Filed complaint %s as %s/%s", record["id"], record["category"], record["priority"])
    return record


@router.get("/{complaint_id}", response_model=Complaint)
async def get_complaint(complaint_id: int, store: JsonRecordStore = Depends(get_store)):
    try:
        return _load(store, complaint_id)
    except ComponentError as e:
        raise _error_response(e)


@router.patch("/{complaint_id}", response_model=Complaint)
async def update_complaint(
    complaint_id: int,
    payload: ComplaintUpdate,
    store: JsonRecordStore = Depends(get_store),
):
    """Triage update: category, priority, status or description."""
    updates = payload.model_dump(exclude_none=True)
    record = store.update_by_id(COLLECTION, complaint_id, updates)
    if record is None:
        raise _error_response(NotFoundError(
            f"Complaint {complaint_id} not found",
            component="complaints",
            collection=COLLECTION,
            record_id=complaint_id,
        ))
    return record


@router.delete("/{complaint_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_complaint(complaint_id: int, store: JsonRecordStore = Depends(get_store)):
    if not store.delete_by_id(COLLECTION, complaint_id):
        raise _error_response(NotFoundError(
            f"Complaint {complaint_id} not found",
            component="complaints",
            collection=COLLECTION,
            record_id=complaint_id,
        ))


@router.get("/{complaint_id}/similar", response_model=SimilarityReport)
async def similar_complaints(complaint_id: int, store: JsonRecordStore = Depends(get_store)):
    """Compare a stored complaint against every other stored complaint."""
    try:
        complaint = _load(store, complaint_id)
        return SimilarityService().find(complaint, _others(store, complaint_id))
    except ComponentError as e:
        raise _error_response(e)


@router.get("/{complaint_id}/analysis", response_model=ComprehensiveAnalysis)
async def analyze_stored_complaint(complaint_id: int, store: JsonRecordStore = Depends(get_store)):
    """Run the full analysis workflow on a stored complaint."""
    try:
        complaint = _load(store, complaint_id)
        return await run_analysis(complaint, _others(store, complaint_id))
    except ComponentError as e:
        raise _error_response(e)
