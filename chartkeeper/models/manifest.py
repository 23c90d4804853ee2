"""
Manifest-side data models for chartkeeper.

Defines the recognized Sveltos manifest kinds, the dependency category
each kind maps to, and the structured form of one Helm chart entry read
from a manifest's ``spec.helmCharts`` list.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class DependencyCategory(str, enum.Enum):
    """Tag identifying which manifest kind produced a dependency."""

    PROFILE = "profile"
    CLUSTER_PROFILE = "cluster-profile"
    EVENT_TRIGGER = "event-trigger"


class ManifestKind(str, enum.Enum):
    """Sveltos custom resource kinds that declare Helm charts.

    The enum values are the exact, case-sensitive ``kind`` strings.
    """

    PROFILE = "Profile"
    CLUSTER_PROFILE = "ClusterProfile"
    EVENT_TRIGGER = "EventTrigger"

    @property
    def category(self) -> DependencyCategory:
        return _CATEGORIES[self]

    @classmethod
    def from_kind(cls, kind: str) -> Optional[ManifestKind]:
        """Return the member whose value equals ``kind``, or ``None``."""
        try:
            return cls(kind)
        except ValueError:
            return None


_CATEGORIES = {
    ManifestKind.PROFILE: DependencyCategory.PROFILE,
    ManifestKind.CLUSTER_PROFILE: DependencyCategory.CLUSTER_PROFILE,
    ManifestKind.EVENT_TRIGGER: DependencyCategory.EVENT_TRIGGER,
}


@dataclass(frozen=True)
class ChartEntry:
    """
    One Helm chart declared under ``spec.helmCharts``.

    Attributes:
        chart_name: Chart reference, usually ``<repository-name>/<chart>``
            or a full registry path for OCI charts.
        chart_version: Declared chart version, kept verbatim.
        repository_url: ``repositoryURL`` of the entry, if any.
        repository_name: ``repositoryName`` of the entry (informational).
    """

    chart_name: str
    chart_version: str
    repository_url: Optional[str] = None
    repository_name: Optional[str] = None
