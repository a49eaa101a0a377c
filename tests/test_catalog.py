from typing import Any

import pytest

from model_catalog.catalog.catalog import ModelCatalog
from model_catalog.catalog.records import BUILTIN_RECORDS, DRAGON
from model_catalog.exceptions import RecordValidationError, UnknownModelError
from model_catalog.models.model_info import ModelInfo


@pytest.fixture
def bunny(bunny_dict: dict[str, Any]) -> ModelInfo:
    return ModelInfo.from_dict(bunny_dict)


def test_builtin_catalog_exposes_dragon() -> None:
    catalog = ModelCatalog.builtin()
    assert len(catalog) == 1
    assert list(catalog) == ["dragon"]
    assert "dragon" in catalog
    assert catalog["dragon"] is DRAGON
    assert catalog.get_record("dragon") is DRAGON


def test_builtin_records_are_read_only() -> None:
    with pytest.raises(TypeError):
        BUILTIN_RECORDS["teapot"] = DRAGON  # type: ignore[index]


def test_unknown_model_suggests_close_matches() -> None:
    catalog = ModelCatalog.builtin()
    with pytest.raises(UnknownModelError) as excinfo:
        catalog.get_record("dragn")
    assert excinfo.value.suggestions == ["dragon"]
    assert "Did you mean: dragon?" in str(excinfo.value)


def test_unknown_model_behaves_like_a_mapping_miss() -> None:
    catalog = ModelCatalog.builtin()
    assert "teapot" not in catalog
    assert [] not in catalog
    assert {} not in catalog
    assert catalog.get("teapot") is None
    with pytest.raises(KeyError):
        catalog["teapot"]


def test_merged_returns_new_catalog(bunny: ModelInfo) -> None:
    catalog = ModelCatalog.builtin()
    merged = catalog.merged({"bunny": bunny})
    assert list(merged) == ["bunny", "dragon"]
    assert "bunny" not in catalog


def test_merged_overrides_same_id(bunny: ModelInfo) -> None:
    merged = ModelCatalog.builtin().merged({"dragon": bunny})
    assert merged["dragon"] == bunny


@pytest.mark.parametrize("model_id", ["Dragon", "-dragon", "my dragon", ""])
def test_invalid_model_ids_are_rejected(model_id: str) -> None:
    with pytest.raises(RecordValidationError):
        ModelCatalog({model_id: DRAGON})


def test_non_record_values_are_rejected(dragon_dict: dict[str, Any]) -> None:
    with pytest.raises(RecordValidationError):
        ModelCatalog({"dragon": dragon_dict})  # type: ignore[dict-item]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("drag", ["dragon"]),
        ("CHINESE", ["dragon"]),
        ("cyberware", ["dragon"]),
        ("bunny", ["bunny"]),
        ("teapot", []),
        ("", ["bunny", "dragon"]),
    ],
)
def test_search(bunny: ModelInfo, text: str, expected: list[str]) -> None:
    catalog = ModelCatalog.builtin().merged({"bunny": bunny})
    assert [model_id for model_id, _ in catalog.search(text)] == expected


def test_stats(bunny: ModelInfo) -> None:
    stats = ModelCatalog.builtin().merged({"bunny": bunny}).stats()
    assert stats.model_count == 2
    assert stats.total_triangles == 871306 + 144046
    assert stats.total_vertices == 438929 + 72378
    assert stats.largest_model_id == "dragon"
    assert stats.largest_triangles == 871306
    assert stats.average_triangles == (871306 + 144046) / 2


def test_stats_of_empty_catalog() -> None:
    stats = ModelCatalog().stats()
    assert stats.model_count == 0
    assert stats.largest_model_id is None
    assert stats.average_triangles == 0.0
