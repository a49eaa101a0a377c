"""
Reads and writes catalogs stored as a single JSON document keyed by model id.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from model_catalog.catalog.catalog import MODEL_ID_PATTERN
from model_catalog.exceptions import CatalogFileError
from model_catalog.models.model_info import ModelInfo
from model_catalog.utils.schema import validate_catalog_document

log = logging.getLogger(__name__)


def check_catalog_document(document: Any) -> list[str]:
    """
    Validates a decoded catalog document without raising.

    Structural problems are reported from the JSON schema; records that pass
    the schema are then checked by the record model for rules the schema
    cannot express (file name and markup balance).
    """
    is_valid, problems = validate_catalog_document(document)
    if not is_valid:
        return problems

    for model_id, data in document.items():
        try:
            ModelInfo.model_validate(data)
        except ValidationError as e:
            for error in e.errors():
                location = ".".join(str(p) for p in error["loc"])
                problems.append(f"{model_id}.{location}: {error['msg']}")
    return problems


class CatalogFile:
    """Handles all operations on a JSON catalog document."""

    def __init__(self, path: Path):
        self.path = path

    def _read_document(self) -> Any:
        if not self.path.is_file():
            raise CatalogFileError(f"Catalog file not found at '{self.path}'.")
        try:
            with open(self.path, encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogFileError(
                f"Catalog file '{self.path}' is not valid JSON: {e}"
            ) from e
        except OSError as e:
            raise CatalogFileError(f"Failed to read catalog file: {e}") from e

    def load(self) -> dict[str, ModelInfo]:
        """
        Loads and validates every record in the catalog file.

        Returns:
            A dictionary of model id to record.

        Raises:
            CatalogFileError: If the file is missing, is not valid JSON, or any
            record fails validation.
        """
        document = self._read_document()
        if not isinstance(document, dict):
            raise CatalogFileError(
                f"Catalog file '{self.path}' must contain a JSON object keyed by "
                "model id."
            )

        records = {}
        for model_id, data in document.items():
            if not MODEL_ID_PATTERN.match(model_id):
                raise CatalogFileError(f"Invalid model id '{model_id}' in catalog.")
            try:
                records[model_id] = ModelInfo.model_validate(data)
            except ValidationError as e:
                raise CatalogFileError(
                    f"Record '{model_id}' in '{self.path}' is invalid:\n{e}"
                ) from e

        log.debug(f"Loaded {len(records)} records from '{self.path}'.")
        return records

    def save(self, records: Mapping[str, ModelInfo]) -> None:
        """
        Writes records to the catalog file, replacing its contents.

        Raises:
            CatalogFileError: If the file cannot be written.
        """
        document = {
            model_id: records[model_id].to_dict() for model_id in sorted(records)
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
                f.write("\n")
        except OSError as e:
            raise CatalogFileError(f"Failed to save catalog file: {e}") from e

        log.debug(f"Saved {len(document)} records to '{self.path}'.")

    def check(self) -> list[str]:
        """
        Validates the catalog file without raising.

        Returns:
            A list of problems. An empty list means the file is valid.
        """
        try:
            document = self._read_document()
        except CatalogFileError as e:
            return [str(e)]
        return check_catalog_document(document)
