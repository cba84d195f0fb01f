"""
Base classes and interfaces for all components.
"""

from components.base.component import BaseComponent
from components.base.config import ComponentConfig
from components.base.exceptions import (
    ComponentError,
    ConfigurationError,
    NotFoundError,
    ProcessingError,
    ValidationError,
)
from components.base.log import configure_logging

__all__ = [
    "BaseComponent",
    "ComponentConfig",
    "ComponentError",
    "ConfigurationError",
    "NotFoundError",
    "ProcessingError",
    "ValidationError",
    "configure_logging",
]
