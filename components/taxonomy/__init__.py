"""
Taxonomy Component - keyword vocabularies for complaint analysis.

Usage:
    from components.taxonomy import get_taxonomy
    taxonomy = get_taxonomy("civic")
    result = predict_category(text, taxonomy)
"""

from components.taxonomy.models import (
    CategoryRule,
    DepartmentAssignment,
    PriorityLexicon,
    ResponseTemplates,
    SentimentLexicon,
    Taxonomy,
)
from components.taxonomy.loader import (
    DEFAULT_TAXONOMY,
    available_taxonomies,
    get_taxonomy,
    load_taxonomy,
    reload_taxonomies,
)

__all__ = [
    "CategoryRule",
    "DepartmentAssignment",
    "PriorityLexicon",
    "ResponseTemplates",
    "SentimentLexicon",
    "Taxonomy",
    "DEFAULT_TAXONOMY",
    "available_taxonomies",
    "get_taxonomy",
    "load_taxonomy",
    "reload_taxonomies",
]
