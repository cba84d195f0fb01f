"""
Pydantic models for the complaint taxonomy.

A taxonomy is the immutable vocabulary every analysis function reads:
category keyword lists, the priority ladder, the sentiment lexicon and
the canned response templates. All models are frozen so a loaded
taxonomy can be shared across requests and threads.
"""

from typing import Dict, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _normalize_keywords(value) -> Tuple[str, ...]:
    keywords = []
    for keyword in value or ():
        keyword = str(keyword).strip().lower()
        if keyword and keyword not in keywords:
            keywords.append(keyword)
    return tuple(keywords)


class DepartmentAssignment(BaseModel):
    """Department a complaint category is routed to."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Department display name")
    code: str = Field(description="Short department code")


class CategoryRule(BaseModel):
    """Keyword rule for a single complaint category."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Category tag (e.g. water_supply)")
    label: Optional[str] = Field(default=None, description="Human readable name")
    keywords: Tuple[str, ...] = Field(description="Lower-cased substrings that signal this category")
    department: Optional[DepartmentAssignment] = None

    @field_validator("keywords", mode="before")
    @classmethod
    def lower_keywords(cls, value):
        return _normalize_keywords(value)

    @property
    def display_name(self) -> str:
        return self.label or self.name.replace("_", " ").title()


class PriorityLexicon(BaseModel):
    """Keyword lists for the priority ladder, checked in this order."""

    model_config = ConfigDict(frozen=True)

    urgent: Tuple[str, ...] = ()
    safety: Tuple[str, ...] = ("unsafe", "dangerous", "hurt")
    functional: Tuple[str, ...] = ("not working", "broken", "fail")

    @field_validator("urgent", "safety", "functional", mode="before")
    @classmethod
    def lower_keywords(cls, value):
        return _normalize_keywords(value)


class SentimentLexicon(BaseModel):
    """Positive, negative and urgent keyword sets for sentiment scoring."""

    model_config = ConfigDict(frozen=True)

    positive: Tuple[str, ...] = ()
    negative: Tuple[str, ...] = ()
    urgent: Tuple[str, ...] = ()

    @field_validator("positive", "negative", "urgent", mode="before")
    @classmethod
    def lower_keywords(cls, value):
        return _normalize_keywords(value)


class ResponseTemplates(BaseModel):
    """Canned replies keyed by category, plus per-tone closing sentences."""

    model_config = ConfigDict(frozen=True)

    templates: Dict[str, Tuple[str, ...]] = Field(default_factory=dict)
    default: Tuple[str, ...] = Field(min_length=1)
    closings: Dict[str, str] = Field(default_factory=dict)

    @field_validator("templates")
    @classmethod
    def reject_empty_lists(cls, value):
        empty = sorted(name for name, texts in value.items() if not texts)
        if empty:
            raise ValueError(f"Empty template lists: {', '.join(empty)}")
        return value


class Taxonomy(BaseModel):
    """Complete vocabulary injected into the analysis functions."""

    model_config = ConfigDict(frozen=True)

    name: str
    categories: Tuple[CategoryRule, ...] = Field(min_length=1)
    priority: PriorityLexicon
    sentiment: SentimentLexicon
    responses: ResponseTemplates
    default_department: DepartmentAssignment

    @model_validator(mode="after")
    def check_unique_categories(self):
        names = [category.name for category in self.categories]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate category names: {', '.join(duplicates)}")
        return self

    @property
    def category_names(self) -> Tuple[str, ...]:
        return tuple(category.name for category in self.categories)

    def get_category(self, name: str) -> Optional[CategoryRule]:
        for category in self.categories:
            if category.name == name:
                return category
        return None
