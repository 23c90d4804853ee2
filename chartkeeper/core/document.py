"""Optional-field accessors over parsed YAML documents.

A parsed document is an arbitrary tree of dicts, lists and scalars. The
helpers below read one field at a time and return ``None`` (or an empty
list) whenever the field is absent or has the wrong shape, so callers
never need to guard against ``KeyError`` or ``TypeError``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

#: One parsed YAML document, as produced by the splitter.
RawDocument = Any


def as_mapping(node: RawDocument) -> Optional[Dict[str, Any]]:
    """Return ``node`` if it is a mapping, else ``None``."""
    return node if isinstance(node, dict) else None


def get_mapping(node: RawDocument, key: str) -> Optional[Dict[str, Any]]:
    """Return the mapping stored under ``key`` in ``node``, if any."""
    mapping = as_mapping(node)
    if mapping is None:
        return None
    return as_mapping(mapping.get(key))


def get_sequence(node: RawDocument, key: str) -> List[Any]:
    """Return the list stored under ``key`` in ``node``, or ``[]``."""
    mapping = as_mapping(node)
    if mapping is None:
        return []
    value = mapping.get(key)
    return value if isinstance(value, list) else []


def get_text(node: RawDocument, key: str) -> Optional[str]:
    """Return the non-empty string stored under ``key``, stripped.

    Non-string values (nested mappings, lists, ``null``) and blank
    strings read as absent.
    """
    mapping = as_mapping(node)
    if mapping is None:
        return None
    value = mapping.get(key)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None
