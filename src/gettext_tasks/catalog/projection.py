"""
Projection of parsed translation catalogs into plain nested mappings.

A .po file is parsed with polib and reduced to the structure consumed at
runtime: catalog metadata plus a ``context -> msgid -> translation`` mapping,
where a translation is a string, or the list of plural forms when the message
declares a plural id.

Usage Examples:
    Project a language file:
        >>> from gettext_tasks.catalog.projection import load_projection
        >>> projection = load_projection(Path("po/fr.po"))
        >>> projection["data"][""]["hello"]
        'bonjour'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TypedDict

import polib

from ..utils.core.exceptions import CatalogError

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT = ""

Translation = str | list[str]


class CatalogMeta(TypedDict):
    """Catalog-level metadata taken from the .po header."""

    charset: str
    project: str | None
    language: str | None
    plural: str


class CatalogProjection(TypedDict):
    """Serializable projection of one translation catalog."""

    meta: CatalogMeta
    data: dict[str, dict[str, Translation]]


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """
    Look up a header value ignoring the header name's case.

    Args:
        headers: Header mapping as parsed from the catalog
        name: Header name, e.g. "Plural-Forms"

    Returns:
        The header value, or None when absent
    """
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def extract_plural_rule(plural_forms: str | None) -> str:
    """
    Extract the plural selector expression from a Plural-Forms header.

    ``"nplurals=2; plural=(n > 1);"`` becomes ``"(n > 1)"``.
    """
    if not plural_forms:
        return ""
    rule = plural_forms.split("plural=")[-1].strip()
    return rule.removesuffix(";").strip()


def extract_charset(headers: Mapping[str, str], fallback: str) -> str:
    """Return the charset declared in the Content-Type header."""
    content_type = get_header(headers, "Content-Type")
    if content_type:
        for part in content_type.split(";"):
            key, _, value = part.strip().partition("=")
            if key.strip().lower() == "charset" and value.strip():
                return value.strip()
    return fallback


def entry_translation(entry: polib.POEntry) -> Translation:
    """
    Return the projected value of one catalog entry.

    Entries with a plural id yield all plural forms ordered by their index;
    other entries yield their single translated string.
    """
    if entry.msgid_plural:
        return [entry.msgstr_plural[index] for index in sorted(entry.msgstr_plural)]
    return entry.msgstr


def group_by_context(catalog: polib.POFile) -> dict[str, dict[str, polib.POEntry]]:
    """
    Group the live entries of a catalog by message context.

    Obsolete entries are not part of the catalog and are left out.
    """
    contexts: dict[str, dict[str, polib.POEntry]] = {}
    for entry in catalog:
        if entry.obsolete:
            continue
        context = entry.msgctxt if entry.msgctxt is not None else DEFAULT_CONTEXT
        contexts.setdefault(context, {})[entry.msgid] = entry
    return contexts


def project_catalog(catalog: polib.POFile) -> CatalogProjection:
    """
    Build the deterministic projection of a parsed catalog.

    Contexts and message ids are emitted in sorted order and entries with an
    empty message id (reserved for the catalog header) are skipped. The
    catalog itself is not modified.

    Args:
        catalog: Parsed translation catalog

    Returns:
        CatalogProjection with sorted contexts and message ids
    """
    headers: Mapping[str, str] = catalog.metadata

    meta: CatalogMeta = {
        "charset": extract_charset(headers, catalog.encoding),
        "project": get_header(headers, "Project-Id-Version"),
        "language": get_header(headers, "Language"),
        "plural": extract_plural_rule(get_header(headers, "Plural-Forms")),
    }

    contexts = group_by_context(catalog)
    data: dict[str, dict[str, Translation]] = {}

    for context_name in sorted(contexts):
        messages = contexts[context_name]
        data[context_name] = {}
        for msgid in sorted(messages):
            if not msgid:
                continue
            data[context_name][msgid] = entry_translation(messages[msgid])

    return {"meta": meta, "data": data}


def read_catalog(po_file: Path) -> polib.POFile:
    """
    Parse a .po file with polib.

    Args:
        po_file: Path to the translation source file

    Returns:
        Parsed catalog

    Raises:
        CatalogError: If the file cannot be read or parsed
    """
    # polib parses its argument as PO text when it is not an existing file
    if not po_file.is_file():
        raise CatalogError(f"Translation file not found: {po_file}", path=po_file)

    try:
        return polib.pofile(str(po_file))
    except (OSError, ValueError, UnicodeDecodeError) as e:
        raise CatalogError(f"Failed to parse {po_file}: {e}", path=po_file) from e


def load_projection(po_file: Path) -> CatalogProjection:
    """Parse a .po file and project it."""
    projection = project_catalog(read_catalog(po_file))
    logger.debug(
        f"Projected {sum(len(messages) for messages in projection['data'].values())} messages from {po_file}"
    )
    return projection
