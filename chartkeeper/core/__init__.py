"""
Core extraction pipeline for chartkeeper.

Importing from here keeps user-facing imports clean and stable:

    from chartkeeper.core import extract_package_file
"""

from __future__ import annotations

from chartkeeper.core.extractor import extract_package_file
from chartkeeper.core.walker import walk_helm_charts
from chartkeeper.core.splitter import ParsedDocument, split_documents
from chartkeeper.core.classifier import classify_manifest
from chartkeeper.core.normalizer import (
    is_container_registry_reference,
    normalize_chart,
)

__all__ = [
    "extract_package_file",
    "split_documents",
    "ParsedDocument",
    "classify_manifest",
    "walk_helm_charts",
    "normalize_chart",
    "is_container_registry_reference",
]
