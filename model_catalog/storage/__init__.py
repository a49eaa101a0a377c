"""
Storage Layer.

This package handles all data persistence: the configuration file and JSON
catalog documents.
"""

from .catalog_file import CatalogFile
from .config_manager import ConfigManager

__all__ = ["CatalogFile", "ConfigManager"]
