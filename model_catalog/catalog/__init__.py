"""
Catalog Layer.

This package holds the built-in model records and the read-only catalog
consumers use to look them up by model id.
"""

from .catalog import ModelCatalog
from .export import render_info_js, write_info_js_tree
from .records import BUILTIN_RECORDS, DRAGON

__all__ = [
    "BUILTIN_RECORDS",
    "DRAGON",
    "ModelCatalog",
    "render_info_js",
    "write_info_js_tree",
]
