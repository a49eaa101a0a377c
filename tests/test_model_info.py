import re
from typing import Any

import pytest
from pydantic import ValidationError

from model_catalog.catalog.records import DRAGON
from model_catalog.exceptions import RecordValidationError
from model_catalog.models.model_info import ModelInfo

EXPECTED_FIELDS = [
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


def test_field_set_matches_record_schema() -> None:
    assert ModelInfo.field_names() == EXPECTED_FIELDS
    assert list(DRAGON.to_dict()) == EXPECTED_FIELDS


def test_dragon_values() -> None:
    assert DRAGON.title == "Chinese Dragon"
    assert DRAGON.download_filename == "dragon.zip"
    assert DRAGON.download_size == "17.4 MB"
    assert DRAGON.triangles == 871306
    assert DRAGON.vertices == 438929
    assert DRAGON.copyright == "&copy; 1996 Stanford University"
    assert DRAGON.updated_date == "2011-07-27"
    assert DRAGON.license.startswith("<a href='http://www.graphics.stanford.edu/")
    assert DRAGON.description.startswith("<p>  I converted the PLY")
    assert DRAGON.description.rstrip().endswith("</p>")


def test_dragon_satisfies_field_rules() -> None:
    assert isinstance(DRAGON.triangles, int) and DRAGON.triangles >= 0
    assert isinstance(DRAGON.vertices, int) and DRAGON.vertices >= 0
    assert DRAGON.download_filename.endswith(".zip")
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", DRAGON.updated_date)


def test_record_is_immutable() -> None:
    with pytest.raises(ValidationError):
        DRAGON.triangles = 1


def test_json_round_trip_preserves_every_field() -> None:
    restored = ModelInfo.from_json(DRAGON.to_json())
    assert restored == DRAGON
    assert restored.description == DRAGON.description


def test_snake_case_names_are_accepted(dragon_dict: dict[str, Any]) -> None:
    record = ModelInfo(**DRAGON.model_dump())
    assert record == ModelInfo.from_dict(dragon_dict)


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("triangles", -1),
        ("vertices", -5),
        ("triangles", "871306"),
        ("triangles", 1.5),
        ("downloadFilename", "dragon.obj"),
        ("downloadFilename", "../dragon.zip"),
        ("updatedDate", "27/07/2011"),
        ("updatedDate", "2011-7-27"),
        ("license", "<a href='x'>Stanford Scan"),
        ("license", "<a href='x'>Stanford Scan</a><a href='y'"),
        ("description", "<p>text</a>"),
        ("title", ""),
        ("title", None),
    ],
)
def test_invalid_field_values_are_rejected(
    dragon_dict: dict[str, Any], field: str, value: Any
) -> None:
    dragon_dict[field] = value
    with pytest.raises(RecordValidationError):
        ModelInfo.from_dict(dragon_dict)


def test_missing_field_is_rejected(dragon_dict: dict[str, Any]) -> None:
    del dragon_dict["vertices"]
    with pytest.raises(RecordValidationError, match="vertices"):
        ModelInfo.from_dict(dragon_dict)


def test_unknown_field_is_rejected(dragon_dict: dict[str, Any]) -> None:
    dragon_dict["author"] = "someone"
    with pytest.raises(RecordValidationError, match="author"):
        ModelInfo.from_dict(dragon_dict)


@pytest.mark.parametrize("filename", ["asset.7z", "asset.tar.gz", "ASSET.ZIP"])
def test_other_archive_extensions_are_accepted(
    dragon_dict: dict[str, Any], filename: str
) -> None:
    dragon_dict["downloadFilename"] = filename
    assert ModelInfo.from_dict(dragon_dict).download_filename == filename


def test_markup_helpers() -> None:
    assert DRAGON.license_links() == [
        ("Stanford Scan", "http://www.graphics.stanford.edu/data/3Dscanrep/")
    ]
    assert [text for text, _ in DRAGON.description_links()] == [
        "Georgia Tech",
        "NVIDIA",
    ]
    assert DRAGON.copyright_text() == "© 1996 Stanford University"

    text = DRAGON.description_text()
    assert text.startswith("I converted the PLY from Georgia Tech to IFS")
    assert "<" not in text
    assert text.endswith("The icon image is from NVIDIA.")
