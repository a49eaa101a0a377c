"""
Asset Layer.

This package is responsible for checks on downloaded model archives.
"""

from .integrity import ArchiveIntegrityChecker, ArchiveReport

__all__ = ["ArchiveIntegrityChecker", "ArchiveReport"]
