"""
JSON Schema validation for catalog documents.
Allows external tools to validate catalogs and provides better error messages.
"""

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from pydantic import TypeAdapter

from model_catalog.models.model_info import ModelInfo

MODEL_ID_REGEX = "^[a-z0-9][a-z0-9_-]*$"


def catalog_schema() -> dict[str, Any]:
    """
    Builds the JSON schema of a catalog document: an object mapping model ids to
    records, using the serialized (camelCase) field names.
    """
    schema = TypeAdapter(dict[str, ModelInfo]).json_schema(by_alias=True)
    schema["$schema"] = "https://json-schema.org/draft/2020-12/schema"
    schema["title"] = "Model Catalog"
    schema["description"] = "Downloadable 3D model records keyed by model id"
    schema["propertyNames"] = {"pattern": MODEL_ID_REGEX}
    return schema


def validate_catalog_document(document: Any) -> tuple[bool, list[str]]:
    """
    Validate a decoded catalog document against the JSON schema.

    Args:
        document: The decoded JSON document.

    Returns:
        Tuple of (is_valid, error_messages)
    """
    validator = Draft202012Validator(catalog_schema())
    errors = sorted(validator.iter_errors(document), key=lambda e: list(e.path))

    if not errors:
        return True, []

    error_messages = []
    for error in errors:
        path = ".".join(str(p) for p in error.path) if error.path else "root"
        error_messages.append(f"{path}: {error.message}")

    return False, error_messages


def export_schema(output_path: Path) -> None:
    """
    Export JSON schema to file for external validation tools.

    Args:
        output_path: Path to save schema file
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(catalog_schema(), f, indent=2)
