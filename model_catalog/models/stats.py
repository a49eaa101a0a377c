"""
Dataclass for summarising the contents of a model catalog.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogStats:
    """Aggregate geometry counts over every record in a catalog."""

    model_count: int = 0
    total_triangles: int = 0
    total_vertices: int = 0
    largest_model_id: str | None = None
    largest_triangles: int = 0

    @property
    def average_triangles(self) -> float:
        if not self.model_count:
            return 0.0
        return self.total_triangles / self.model_count
