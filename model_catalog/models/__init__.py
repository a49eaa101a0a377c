"""
Data Models Layer.

This package contains the Pydantic models that define the core data structures
used throughout the application: model records, configuration and statistics.
"""

from .config import CatalogConfig
from .model_info import ModelInfo
from .stats import CatalogStats

__all__ = ["CatalogConfig", "CatalogStats", "ModelInfo"]
