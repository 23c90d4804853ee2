"""
Dependency data models for chartkeeper.

A :class:`DependencyRecord` is the unit handed to a version-update engine:
it names a chart, its current version, where newer versions are looked up
(the datasource) and which kind of manifest declared it.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from chartkeeper.models.manifest import DependencyCategory


class Datasource(str, enum.Enum):
    """Where a dependency's versions should be resolved from."""

    HELM = "helm"
    DOCKER = "docker"


@dataclass
class DependencyRecord:
    """
    A single chart dependency extracted from a manifest.

    Attributes:
        dep_name: Chart name for ``helm`` sources, full registry path for
            ``docker`` sources.
        current_value: Chart version exactly as declared.
        datasource: Version lookup source.
        dep_type: Category of the manifest that declared the chart.
        registry_urls: Helm repository URLs; always ``None`` for ``docker``.
    """

    dep_name: str
    current_value: str
    datasource: Datasource
    dep_type: DependencyCategory
    registry_urls: Optional[List[str]] = None

    def __post_init__(self) -> None:
        if self.registry_urls is not None:
            if self.datasource is Datasource.DOCKER:
                raise ValueError("docker dependencies cannot carry registry URLs")
            if not self.registry_urls:
                raise ValueError("registry_urls must be non-empty when set")

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready form, omitting ``registryUrls`` when unset."""
        data: Dict[str, Any] = {
            "depName": self.dep_name,
            "currentValue": self.current_value,
            "datasource": self.datasource.value,
            "depType": self.dep_type.value,
        }
        if self.registry_urls is not None:
            data["registryUrls"] = list(self.registry_urls)
        return data


@dataclass
class ExtractResult:
    """Successful extraction result for one file.

    ``deps`` is never empty; an empty extraction is reported as ``None``
    by the extractor instead of an :class:`ExtractResult`.
    """

    deps: List[DependencyRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"deps": [dep.to_dict() for dep in self.deps]}

    def __len__(self) -> int:
        return len(self.deps)
