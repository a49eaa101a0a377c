"""
Provides methods for checking the integrity of downloaded model archives.
"""

import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path

from model_catalog.exceptions import ArchiveIntegrityError
from model_catalog.models.model_info import ModelInfo

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArchiveReport:
    """The outcome of inspecting one archive on disk."""

    path: Path
    exists: bool
    valid: bool = False
    size_bytes: int = 0
    member_count: int = 0
    bad_member: str | None = None
    error: str | None = None


class ArchiveIntegrityChecker:
    """A collection of static methods for validating model archive integrity."""

    @staticmethod
    def inspect(filepath: Path) -> ArchiveReport:
        """
        Performs a basic integrity check on a zip archive.

        Checks that the file exists, opens as a zip archive, holds at least one
        member, and that every member's CRC matches.

        Args:
            filepath: Path to the archive.

        Returns:
            An ArchiveReport describing what was found.
        """
        if not filepath.is_file():
            return ArchiveReport(path=filepath, exists=False, error="File not found.")

        size = filepath.stat().st_size
        try:
            with zipfile.ZipFile(filepath) as archive:
                members = archive.namelist()
                bad_member = archive.testzip()
        except zipfile.BadZipFile as e:
            log.warning(f"Archive integrity check failed for '{filepath}': {e}")
            return ArchiveReport(
                path=filepath, exists=True, size_bytes=size, error=str(e)
            )

        if bad_member is not None:
            log.warning(
                f"Archive integrity check failed for '{filepath}': "
                f"corrupt member '{bad_member}'."
            )
            return ArchiveReport(
                path=filepath,
                exists=True,
                size_bytes=size,
                member_count=len(members),
                bad_member=bad_member,
                error=f"CRC mismatch in '{bad_member}'.",
            )

        if not members:
            return ArchiveReport(
                path=filepath, exists=True, size_bytes=size, error="Archive is empty."
            )

        return ArchiveReport(
            path=filepath,
            exists=True,
            valid=True,
            size_bytes=size,
            member_count=len(members),
        )

    @staticmethod
    def check_record_archive(record: ModelInfo, assets_dir: Path) -> ArchiveReport:
        """
        Inspects the archive a record points at inside ``assets_dir``.

        Raises:
            ArchiveIntegrityError: If the record's archive is not a zip file,
            since only zip archives can be inspected.
        """
        if not record.download_filename.lower().endswith(".zip"):
            raise ArchiveIntegrityError(
                f"Cannot inspect '{record.download_filename}': only .zip archives "
                "are supported."
            )
        return ArchiveIntegrityChecker.inspect(assets_dir / record.download_filename)
