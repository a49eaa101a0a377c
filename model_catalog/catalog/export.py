"""
Writes model records in the per-model ``info.js`` layout read by the catalog
web page (``<root>/<model id>/info.js``).
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from model_catalog.exceptions import CatalogFileError
from model_catalog.models.model_info import ModelInfo

log = logging.getLogger(__name__)

INFO_FILENAME = "info.js"


def _js_string(value: str) -> str:
    """Quotes a single-line value as a JavaScript string literal."""
    return json.dumps(value, ensure_ascii=False)


def _js_template(value: str) -> str:
    """Quotes a multi-line value as a JavaScript template literal."""
    escaped = value.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")
    return f"`{escaped}`"


def render_info_js(record: ModelInfo) -> str:
    """
    Renders a record as an ``info = { ... };`` JavaScript assignment.

    Counts are written as bare numbers; the description, which is usually a
    multi-line HTML fragment, is written as a template literal.
    """
    lines = ["info = {"]
    for key, value in record.to_dict().items():
        if isinstance(value, int):
            literal = str(value)
        elif "\n" in value or key == "description":
            literal = _js_template(value)
        else:
            literal = _js_string(value)
        lines.append(f"    {key}: {literal},")
    lines.append("};")
    return "\n".join(lines) + "\n"


def write_info_js_tree(records: Mapping[str, ModelInfo], root: Path) -> list[Path]:
    """
    Writes every record to ``<root>/<model id>/info.js``.

    Returns:
        The paths written, in model id order.

    Raises:
        CatalogFileError: If a file cannot be written.
    """
    written = []
    for model_id in sorted(records):
        target = root / model_id / INFO_FILENAME
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(render_info_js(records[model_id]), encoding="utf-8")
        except OSError as e:
            raise CatalogFileError(f"Failed to write '{target}': {e}") from e
        log.debug(f"Wrote {target}")
        written.append(target)
    return written
