"""Turn chart entries into dependency records.

The only judgement call in the pipeline lives here: deciding whether a
chart comes from a Helm chart repository (``helm`` datasource) or from an
OCI container registry (``docker`` datasource). Sveltos marks OCI charts
in two ways, and both are honoured:

- the ``repositoryURL`` uses the ``oci://`` scheme, or
- the ``chartName`` itself is a registry reference.

A chart name is a registry reference when it matches one of:

==================================  =====================================
Pattern                             Example
==================================  =====================================
``oci://<anything>``                ``oci://ghcr.io/org/chart``
``<host with dot>/<path>``          ``registry-1.docker.io/org/chart``
``<host>:<port>/<path>``            ``custom-registry:443/charts/chart``
``localhost/<path>``                ``localhost/charts/chart``
==================================  =====================================

The host rule is the one container tooling uses to tell a registry
domain from a repository namespace: a first path component containing
``.`` or ``:``, or equal to ``localhost``. A chart-repository label such
as ``prometheus-community/prometheus`` therefore stays a Helm chart.
"""

from __future__ import annotations

from typing import Mapping, Optional

from chartkeeper.constants import LOCALHOST, OCI_SCHEME
from chartkeeper.models import ChartEntry, Datasource, DependencyRecord, ManifestKind


def _remove_oci_scheme(value: str) -> str:
    if value.lower().startswith(OCI_SCHEME):
        return value[len(OCI_SCHEME) :]
    return value


def _is_registry_host(component: str) -> bool:
    return "." in component or ":" in component or component == LOCALHOST


def is_oci_repository(repository_url: Optional[str]) -> bool:
    """Return True when ``repository_url`` uses the ``oci://`` scheme."""
    return bool(repository_url) and repository_url.lower().startswith(OCI_SCHEME)


def is_container_registry_reference(chart_name: str) -> bool:
    """Return True if ``chart_name`` points into a container registry.

    See the module docstring for the accepted patterns.

    Example::

        >>> is_container_registry_reference("registry-1.docker.io/bitnamicharts/vault")
        True
        >>> is_container_registry_reference("prometheus-community/prometheus")
        False
    """
    if chart_name.lower().startswith(OCI_SCHEME):
        return True

    components = chart_name.strip("/").split("/")
    if len(components) < 2 or not all(components):
        return False
    return _is_registry_host(components[0])


def chart_basename(chart_name: str) -> str:
    """Return the final path segment of a chart name.

    ``prometheus-community/prometheus`` becomes ``prometheus``; trailing
    slashes are ignored.
    """
    trimmed = chart_name.rstrip("/")
    return trimmed.rsplit("/", 1)[-1] or chart_name


def resolve_repository_alias(
    repository_url: Optional[str],
    registry_aliases: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Replace ``repository_url`` by its configured alias target, if any."""
    if not repository_url or not registry_aliases:
        return repository_url
    return registry_aliases.get(repository_url, repository_url)


def _registry_dep_name(entry: ChartEntry, repository_url: Optional[str]) -> str:
    if is_container_registry_reference(entry.chart_name):
        return _remove_oci_scheme(entry.chart_name).strip("/")

    # Short chart name under an oci:// repository
    base = _remove_oci_scheme(repository_url or "").rstrip("/")
    return f"{base}/{chart_basename(entry.chart_name)}"


def normalize_chart(
    entry: ChartEntry,
    kind: ManifestKind,
    registry_aliases: Optional[Mapping[str, str]] = None,
) -> DependencyRecord:
    """Convert one chart entry into a :class:`DependencyRecord`.

    Args:
        entry: Chart entry read from the manifest.
        kind: Kind of the manifest that declared the entry.
        registry_aliases: Optional mapping of repository URL aliases to the
            URLs they stand for.

    Returns:
        A ``docker`` record named after the full registry path, or a
        ``helm`` record named after the chart with the repository URL as
        its only registry URL.
    """
    repository_url = resolve_repository_alias(entry.repository_url, registry_aliases)

    if is_container_registry_reference(entry.chart_name) or is_oci_repository(
        repository_url
    ):
        return DependencyRecord(
            dep_name=_registry_dep_name(entry, repository_url),
            current_value=entry.chart_version,
            datasource=Datasource.DOCKER,
            dep_type=kind.category,
        )

    return DependencyRecord(
        dep_name=chart_basename(entry.chart_name),
        current_value=entry.chart_version,
        datasource=Datasource.HELM,
        dep_type=kind.category,
        registry_urls=[repository_url] if repository_url else None,
    )
