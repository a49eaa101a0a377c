"""
Pydantic model for a single downloadable 3D model record.
Provides robust validation for every field a catalog page reads.
"""

import re
from typing import Any

from pathvalidate import ValidationError as FilenameError
from pathvalidate import validate_filename
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from model_catalog.exceptions import RecordValidationError
from model_catalog.utils.markup import extract_links, find_unbalanced_tags, to_plain_text

ARCHIVE_EXTENSIONS = (
    ".zip",
    ".7z",
    ".rar",
    ".tar.gz",
    ".tgz",
    ".tar.bz2",
    ".tar.xz",
)

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class ModelInfo(BaseModel):
    """
    Metadata for one downloadable model asset.

    Field names are snake_case in Python and camelCase when serialized, so a
    record reads the same way the catalog page consumes it
    (``downloadFilename``, ``updatedDate``...).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    title: str = Field(min_length=1)
    download_filename: str
    # Display strings, not parsed into numbers or dates
    download_size: str = Field(min_length=1)
    triangles: int = Field(ge=0, strict=True)
    vertices: int = Field(ge=0, strict=True)
    copyright: str
    updated_date: str
    license: str
    description: str

    @field_validator("download_filename")
    @classmethod
    def validate_download_filename(cls, v: str) -> str:
        """Ensures the archive name is a plain, portable file name."""
        try:
            validate_filename(v, platform="universal")
        except FilenameError as e:
            raise ValueError(f"Download filename is not a valid file name: {e}") from e
        if not v.lower().endswith(ARCHIVE_EXTENSIONS):
            raise ValueError(
                f"Download filename must end in one of: {', '.join(ARCHIVE_EXTENSIONS)}."
            )
        return v

    @field_validator("updated_date")
    @classmethod
    def validate_updated_date(cls, v: str) -> str:
        if not DATE_PATTERN.match(v):
            raise ValueError(f"Updated date must look like YYYY-MM-DD, got '{v}'.")
        return v

    @field_validator("license", "description")
    @classmethod
    def validate_markup(cls, v: str) -> str:
        """Rejects HTML fragments with unclosed or mismatched tags."""
        if problems := find_unbalanced_tags(v):
            raise ValueError(f"Unbalanced markup: {'; '.join(problems)}.")
        return v

    @classmethod
    def field_names(cls) -> list[str]:
        """Returns the serialized names of every record field, in order."""
        return [field.alias or name for name, field in cls.model_fields.items()]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ModelInfo":
        """
        Builds a record from its serialized mapping.

        Raises:
            RecordValidationError: If any field is missing, unknown or invalid.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise RecordValidationError(f"Invalid model record:\n{e}") from e

    @classmethod
    def from_json(cls, payload: str | bytes) -> "ModelInfo":
        try:
            return cls.model_validate_json(payload)
        except ValidationError as e:
            raise RecordValidationError(f"Invalid model record:\n{e}") from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)

    def license_links(self) -> list[tuple[str, str]]:
        return extract_links(self.license)

    def description_links(self) -> list[tuple[str, str]]:
        return extract_links(self.description)

    def description_text(self) -> str:
        """The description with markup stripped, for terminal display."""
        return to_plain_text(self.description)

    def copyright_text(self) -> str:
        return to_plain_text(self.copyright)
