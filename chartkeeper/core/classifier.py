"""Recognize Sveltos manifests among arbitrary YAML documents.

A document is a Sveltos manifest when its ``apiVersion`` belongs to the
``config.projectsveltos.io`` group and its ``kind`` is one of
:class:`~chartkeeper.models.ManifestKind`. Everything else (plain
Kubernetes resources, scalars, lists) is "not applicable" and classifies
as ``None``.
"""

from __future__ import annotations

import re
from typing import Optional

from chartkeeper.models import ManifestKind
from chartkeeper.core.document import RawDocument, as_mapping, get_text
from chartkeeper.constants import SVELTOS_API_GROUP

API_VERSION_PATTERN = re.compile(rf"^{re.escape(SVELTOS_API_GROUP)}/[^/\s]+$")

_QUOTE_CHARS = ("'", '"')


def strip_quotes(value: str) -> str:
    """Remove one pair of matching single or double quotes around ``value``.

    YAML already unquotes scalars, but a value written as
    ``"'config.projectsveltos.io/v1beta1'"`` keeps the inner quotes.

    Example::

        >>> strip_quotes('"v1"'), strip_quotes("'v1'"), strip_quotes("v1")
        ('v1', 'v1', 'v1')
    """
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTE_CHARS:
        return value[1:-1].strip()
    return value


def is_sveltos_api_version(api_version: Optional[str]) -> bool:
    """Return True for ``config.projectsveltos.io/<version>``, quoted or not."""
    if not api_version:
        return False
    return API_VERSION_PATTERN.match(strip_quotes(api_version)) is not None


def classify_manifest(document: RawDocument) -> Optional[ManifestKind]:
    """Return the manifest kind of ``document``, or ``None`` if unrelated.

    Args:
        document: One parsed YAML document.

    Returns:
        The :class:`ManifestKind` (whose ``category`` gives the dependency
        category), or ``None`` when the document is not a mapping, the
        ``apiVersion`` is outside the Sveltos group, or the ``kind`` is
        missing or not recognized.
    """
    if as_mapping(document) is None:
        return None

    if not is_sveltos_api_version(get_text(document, "apiVersion")):
        return None

    kind = get_text(document, "kind")
    if kind is None:
        return None

    return ManifestKind.from_kind(strip_quotes(kind))
