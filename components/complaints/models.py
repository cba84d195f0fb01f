"""
Pydantic models for complaint records.

Complaints are owned by the record store; the analysis components only
read their fields.
"""

from datetime import datetime
from typing import Literal, Optional, Union
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

Priority = Literal["low", "medium", "high"]
Status = Literal["submitted", "in_progress", "resolved", "closed"]

DEFAULT_CATEGORY = "other"
BLANKABLE_FIELDS = ("description", "category", "priority")


class Complaint(BaseModel):
    """A stored complaint. Extra fields from the store are kept as-is."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Optional[Union[int, str]] = Field(default=None, description="Record id")
    description: str = Field(default="", description="Free-text complaint description")
    category: str = Field(default=DEFAULT_CATEGORY, description="Category tag")
    priority: Priority = Field(default="medium", description="Triage priority")
    status: Status = Field(default="submitted", description="Lifecycle status")
    created_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        description="Creation timestamp assigned by the store",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_blank_fields(cls, data):
        # Blank values stay unset so callers can fill them from predictions.
        if isinstance(data, dict):
            return {
                key: value
                for key, value in data.items()
                if key not in BLANKABLE_FIELDS or value not in (None, "")
            }
        return data

    @field_validator("priority", mode="before")
    @classmethod
    def lower_priority(cls, value):
        return value.lower() if isinstance(value, str) else value


class ComplaintCreate(BaseModel):
    """Request model for filing a new complaint."""

    description: str = Field(min_length=1, max_length=1000, description="What is wrong")
    category: Optional[str] = Field(
        default=None, description="Category tag. Predicted from the description when omitted."
    )
    priority: Optional[Priority] = Field(
        default=None, description="Priority. Predicted from the description when omitted."
    )
    location: Optional[str] = Field(default=None, description="Where the issue is")

    class Config:
        json_schema_extra = {
            "examples": [
                {
                    "description": "Wifi is not working in lab 3 since this morning",
                    "location": "Engineering block, lab 3",
                },
                {
                    "description": "Garbage has not been collected near hostel B for a week",
                    "category": "sanitation",
                    "priority": "medium",
                },
            ]
        }


class ComplaintUpdate(BaseModel):
    """Patch model for triage updates."""

    category: Optional[str] = None
    priority: Optional[Priority] = None
    status: Optional[Status] = None
    description: Optional[str] = Field(default=None, min_length=1, max_length=1000)
