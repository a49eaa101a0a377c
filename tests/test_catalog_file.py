import json
from pathlib import Path
from typing import Any

import pytest

from model_catalog.catalog.records import DRAGON
from model_catalog.exceptions import CatalogFileError
from model_catalog.storage.catalog_file import CatalogFile, check_catalog_document
from model_catalog.utils.schema import (
    catalog_schema,
    export_schema,
    validate_catalog_document,
)


def _write(path: Path, document: Any) -> Path:
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_save_then_load(tmp_path: Path) -> None:
    catalog_file = CatalogFile(tmp_path / "nested" / "catalog.json")
    catalog_file.save({"dragon": DRAGON})

    document = json.loads(catalog_file.path.read_text(encoding="utf-8"))
    assert list(document) == ["dragon"]
    assert document["dragon"]["downloadFilename"] == "dragon.zip"

    assert catalog_file.load() == {"dragon": DRAGON}


def test_load_catalog_with_extra_record(catalog_path: Path) -> None:
    records = CatalogFile(catalog_path).load()
    assert list(records) == ["bunny"]
    assert records["bunny"].title == "Stanford Bunny"


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CatalogFileError, match="not found"):
        CatalogFile(tmp_path / "missing.json").load()


def test_load_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogFileError, match="not valid JSON"):
        CatalogFile(path).load()


def test_load_requires_object(tmp_path: Path) -> None:
    path = _write(tmp_path / "catalog.json", [1, 2, 3])
    with pytest.raises(CatalogFileError, match="keyed by model id"):
        CatalogFile(path).load()


def test_load_rejects_bad_model_id(tmp_path: Path, dragon_dict: dict[str, Any]) -> None:
    path = _write(tmp_path / "catalog.json", {"Big Dragon": dragon_dict})
    with pytest.raises(CatalogFileError, match="Invalid model id"):
        CatalogFile(path).load()


def test_load_names_invalid_record(tmp_path: Path, dragon_dict: dict[str, Any]) -> None:
    dragon_dict["triangles"] = -1
    path = _write(tmp_path / "catalog.json", {"dragon": dragon_dict})
    with pytest.raises(CatalogFileError, match="Record 'dragon'"):
        CatalogFile(path).load()


def test_check_valid_file(catalog_path: Path) -> None:
    assert CatalogFile(catalog_path).check() == []


def test_check_reports_schema_problems(
    tmp_path: Path, dragon_dict: dict[str, Any]
) -> None:
    dragon_dict["triangles"] = -1
    del dragon_dict["vertices"]
    path = _write(tmp_path / "catalog.json", {"dragon": dragon_dict})

    problems = CatalogFile(path).check()
    assert any(p.startswith("dragon.triangles:") for p in problems)
    assert any("vertices" in p for p in problems)


def test_check_reports_markup_problems(
    tmp_path: Path, dragon_dict: dict[str, Any]
) -> None:
    dragon_dict["description"] = "<p>never closed"
    path = _write(tmp_path / "catalog.json", {"dragon": dragon_dict})

    problems = CatalogFile(path).check()
    assert len(problems) == 1
    assert problems[0].startswith("dragon.description:")
    assert "unclosed tag <p>" in problems[0]


def test_check_catalog_document(dragon_dict: dict[str, Any]) -> None:
    assert check_catalog_document({"dragon": DRAGON.to_dict()}) == []

    dragon_dict["triangles"] = -1
    dragon_dict["license"] = "<a href='x'>Stanford Scan</a><a href='y'"
    problems = check_catalog_document({"dragon": dragon_dict})
    assert [p.split(":")[0] for p in problems] == ["dragon.triangles"]

    dragon_dict["triangles"] = 871306
    problems = check_catalog_document({"dragon": dragon_dict})
    assert len(problems) == 1
    assert "incomplete tag" in problems[0]


def test_check_missing_file(tmp_path: Path) -> None:
    problems = CatalogFile(tmp_path / "missing.json").check()
    assert len(problems) == 1
    assert "not found" in problems[0]


def test_schema_describes_record_fields() -> None:
    schema = catalog_schema()
    record_schema = schema["$defs"]["ModelInfo"]
    assert sorted(record_schema["required"]) == sorted(
        [
            "title",
            "downloadFilename",
            "downloadSize",
            "triangles",
            "vertices",
            "copyright",
            "updatedDate",
            "license",
            "description",
        ]
    )
    assert record_schema["additionalProperties"] is False
    assert record_schema["properties"]["triangles"]["minimum"] == 0


def test_validate_catalog_document(dragon_dict: dict[str, Any]) -> None:
    assert validate_catalog_document({"dragon": dragon_dict}) == (True, [])

    dragon_dict["extra"] = True
    ok, messages = validate_catalog_document({"Dragon!": dragon_dict})
    assert not ok
    assert any("Dragon!" in m for m in messages)
    assert any("'extra' was unexpected" in m for m in messages)


def test_export_schema(tmp_path: Path) -> None:
    target = tmp_path / "out" / "schema.json"
    export_schema(target)
    assert json.loads(target.read_text(encoding="utf-8")) == catalog_schema()
