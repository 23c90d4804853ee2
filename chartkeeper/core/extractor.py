"""Extract Helm chart dependencies from Sveltos manifest files.

This is the single entry point of the extraction core. It runs the
pipeline splitter → classifier → walker → normalizer over every document
in a file and concatenates the results.

The extractor runs speculatively over arbitrary repository files, so
"nothing here" is the common case: files that are not YAML, YAML that is
not a Sveltos manifest, and manifests without usable charts all return
``None`` rather than raising.

Typical usage::

    from chartkeeper import extract_package_file

    result = extract_package_file(text, "clusterprofiles.yaml")
    if result is not None:
        for dep in result.deps:
            print(dep.dep_name, dep.current_value, dep.datasource.value)
"""

from __future__ import annotations

from typing import List, Optional

from chartkeeper.config import ChartKeeperConfig
from chartkeeper.utils.logger import get_logger
from chartkeeper.models import DependencyRecord, ExtractResult
from chartkeeper.core.walker import walk_helm_charts
from chartkeeper.core.splitter import split_documents
from chartkeeper.core.normalizer import normalize_chart
from chartkeeper.core.classifier import classify_manifest

logger = get_logger("core.extractor")


def extract_package_file(
    content: str,
    file_path: str,
    config: Optional[ChartKeeperConfig] = None,
) -> Optional[ExtractResult]:
    """Extract chart dependencies from the text of one file.

    Args:
        content: Raw file text.
        file_path: Name or path of the file, used for log messages only.
        config: Optional configuration; only ``registry_aliases`` is
            consulted here.

    Returns:
        An :class:`ExtractResult` with at least one dependency, in
        document order then declaration order, or ``None`` when nothing
        was extracted.

    Example::

        >>> text = '''
        ... apiVersion: config.projectsveltos.io/v1beta1
        ... kind: ClusterProfile
        ... spec:
        ...   helmCharts:
        ...   - repositoryURL: https://prometheus-community.github.io/helm-charts
        ...     chartName: prometheus-community/prometheus
        ...     chartVersion: 23.4.0
        ... '''
        >>> extract_package_file(text, "sveltos.yaml").deps[0].dep_name
        'prometheus'
    """
    if not content or not content.strip():
        return None

    registry_aliases = config.registry_aliases if config is not None else None
    deps: List[DependencyRecord] = []

    for document in split_documents(content):
        if not document.ok:
            continue

        kind = classify_manifest(document.data)
        if kind is None:
            continue

        entries = walk_helm_charts(document.data)
        logger.debug(
            "%s: document %d is a %s with %d chart(s)",
            file_path,
            document.index,
            kind.value,
            len(entries),
        )

        deps.extend(normalize_chart(entry, kind, registry_aliases) for entry in entries)

    if not deps:
        logger.debug("%s: no dependencies found", file_path)
        return None

    logger.debug("%s: extracted %d dependency(ies)", file_path, len(deps))
    return ExtractResult(deps=deps)
