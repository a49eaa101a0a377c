import json
from pathlib import Path
from typing import Any

import pytest

from model_catalog.catalog.records import DRAGON
from model_catalog.cli import app as app_module


@pytest.fixture
def dragon_dict() -> dict[str, Any]:
    """The serialized form of the built-in dragon record."""
    return DRAGON.to_dict()


@pytest.fixture
def bunny_dict(dragon_dict: dict[str, Any]) -> dict[str, Any]:
    return {
        **dragon_dict,
        "title": "Stanford Bunny",
        "downloadFilename": "bunny.zip",
        "downloadSize": "2.9 MB",
        "triangles": 144046,
        "vertices": 72378,
        "updatedDate": "2012-03-04",
        "description": "<p>The classic <a href='https://example.org/bunny'>bunny</a>.</p>",
    }


@pytest.fixture
def catalog_path(tmp_path: Path, bunny_dict: dict[str, Any]) -> Path:
    """A JSON catalog document holding one extra record."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"bunny": bunny_dict}), encoding="utf-8")
    return path


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Points the CLI at an empty, per-test configuration directory."""
    directory = tmp_path / "config"
    monkeypatch.setattr(app_module, "CONFIG_DIR", directory)
    monkeypatch.setattr(app_module, "CONFIG_FILE", directory / "config.ini")
    return directory
