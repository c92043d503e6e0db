"""Serialization of catalog projections to JSON."""

from __future__ import annotations

import json
from pathlib import Path

from .projection import CatalogProjection
from ..utils.fs import write_file

JSON_INDENT = 4


def dump_projection(projection: CatalogProjection, compact: bool = False) -> str:
    """
    Render a projection as JSON text.

    Key order is preserved, so a projection built from the same catalog
    always renders to the same bytes.

    Args:
        projection: Projection to render
        compact: Omit all optional whitespace instead of indenting

    Returns:
        JSON document
    """
    if compact:
        return json.dumps(projection, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(projection, ensure_ascii=False, indent=JSON_INDENT)


def write_projection(projection: CatalogProjection, json_file: Path, compact: bool = False) -> None:
    """Write a projection to a JSON file."""
    write_file(json_file, dump_projection(projection, compact))
