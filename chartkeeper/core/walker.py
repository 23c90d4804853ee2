"""Read the Helm chart list declared by a Sveltos manifest."""

from __future__ import annotations

from typing import List, Optional

from chartkeeper.models import ChartEntry
from chartkeeper.utils.logger import get_logger
from chartkeeper.constants import HELM_CHARTS_FIELD
from chartkeeper.core.document import RawDocument, as_mapping, get_mapping, get_sequence, get_text

logger = get_logger("core.walker")


def _to_chart_entry(item: RawDocument, position: int) -> Optional[ChartEntry]:
    """Build a :class:`ChartEntry` from one ``helmCharts`` item.

    Returns ``None`` (and logs why) for items without a chart name or
    version.
    """
    if as_mapping(item) is None:
        logger.debug("helmCharts[%d]: not a mapping, skipped", position)
        return None

    chart_name = get_text(item, "chartName")
    chart_version = get_text(item, "chartVersion")

    if chart_name is None or chart_version is None:
        logger.debug(
            "helmCharts[%d]: missing chartName or chartVersion, skipped",
            position,
        )
        return None

    return ChartEntry(
        chart_name=chart_name,
        chart_version=chart_version,
        repository_url=get_text(item, "repositoryURL"),
        repository_name=get_text(item, "repositoryName"),
    )


def walk_helm_charts(document: RawDocument) -> List[ChartEntry]:
    """Return the valid chart entries under ``spec.helmCharts``.

    Entries keep their declaration order. A missing ``spec``, a missing
    or non-list ``helmCharts``, or a list with no usable entries all give
    an empty list.

    Args:
        document: A document already classified as a Sveltos manifest.

    Returns:
        Ordered list of :class:`ChartEntry`.
    """
    items = get_sequence(get_mapping(document, "spec"), HELM_CHARTS_FIELD)

    entries: List[ChartEntry] = []
    for position, item in enumerate(items):
        entry = _to_chart_entry(item, position)
        if entry is not None:
            entries.append(entry)

    return entries
