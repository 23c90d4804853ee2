"""
Unified data model exports for chartkeeper.

Example:
    >>> from chartkeeper.models import DependencyRecord, ManifestKind
"""

from __future__ import annotations

from chartkeeper.models.manifest import ChartEntry, DependencyCategory, ManifestKind
from chartkeeper.models.dependency import Datasource, DependencyRecord, ExtractResult

__all__ = [
    "ChartEntry",
    "Datasource",
    "DependencyCategory",
    "DependencyRecord",
    "ExtractResult",
    "ManifestKind",
]
