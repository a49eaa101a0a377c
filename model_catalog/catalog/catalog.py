"""
A read-only catalog of model records keyed by model id.
"""

import logging
import re
from collections.abc import Iterator, Mapping
from difflib import get_close_matches
from types import MappingProxyType

from model_catalog.exceptions import RecordValidationError, UnknownModelError
from model_catalog.models.model_info import ModelInfo
from model_catalog.models.stats import CatalogStats

from .records import BUILTIN_RECORDS

log = logging.getLogger(__name__)

MODEL_ID_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_-]*$")


def validate_model_id(model_id: str) -> str:
    """Ensures a model id is a lowercase slug usable as a directory name."""
    if not MODEL_ID_PATTERN.match(model_id):
        raise RecordValidationError(
            f"Invalid model id '{model_id}': use lowercase letters, digits, '-' or '_'."
        )
    return model_id


class ModelCatalog(Mapping[str, ModelInfo]):
    """
    An immutable mapping from model id to record.

    Catalogs are never modified in place; ``merged`` returns a new catalog with
    additional records layered over the existing ones.
    """

    def __init__(self, records: Mapping[str, ModelInfo] | None = None):
        checked: dict[str, ModelInfo] = {}
        for model_id, record in (records or {}).items():
            validate_model_id(model_id)
            if not isinstance(record, ModelInfo):
                raise RecordValidationError(
                    f"Catalog entry '{model_id}' is not a ModelInfo record."
                )
            checked[model_id] = record
        self._records = MappingProxyType(checked)

    @classmethod
    def builtin(cls) -> "ModelCatalog":
        """Returns a catalog holding the records shipped with the package."""
        return cls(BUILTIN_RECORDS)

    def __getitem__(self, model_id: str) -> ModelInfo:
        return self.get_record(model_id)

    def __contains__(self, model_id: object) -> bool:
        try:
            return model_id in self._records
        except TypeError:
            # Unhashable keys
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"ModelCatalog({sorted(self._records)!r})"

    def get_record(self, model_id: str) -> ModelInfo:
        """
        Looks up a record by id.

        Raises:
            UnknownModelError: If the id is not in the catalog. The error carries
            the closest matching ids as suggestions.
        """
        try:
            return self._records[model_id]
        except KeyError:
            suggestions = get_close_matches(model_id, list(self._records), n=3)
            raise UnknownModelError(model_id, suggestions) from None

    def merged(self, records: Mapping[str, ModelInfo]) -> "ModelCatalog":
        """Returns a new catalog where ``records`` override same-id entries."""
        combined = dict(self._records)
        for model_id in records:
            if model_id in combined:
                log.debug(f"Catalog entry '{model_id}' overridden by external record.")
        combined.update(records)
        return ModelCatalog(combined)

    def search(self, text: str) -> list[tuple[str, ModelInfo]]:
        """
        Finds records whose id, title or description contains ``text``
        (case-insensitive). Results are ordered by model id.
        """
        needle = text.strip().lower()
        if not needle:
            return list(self.items())
        return [
            (model_id, record)
            for model_id, record in self.items()
            if needle in model_id
            or needle in record.title.lower()
            or needle in record.description_text().lower()
        ]

    def stats(self) -> CatalogStats:
        """Computes aggregate triangle and vertex counts for the catalog."""
        if not self._records:
            return CatalogStats()
        largest_id = max(
            self._records, key=lambda model_id: self._records[model_id].triangles
        )
        return CatalogStats(
            model_count=len(self._records),
            total_triangles=sum(r.triangles for r in self._records.values()),
            total_vertices=sum(r.vertices for r in self._records.values()),
            largest_model_id=largest_id,
            largest_triangles=self._records[largest_id].triangles,
        )
