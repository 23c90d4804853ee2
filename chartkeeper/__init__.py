"""
chartkeeper — Helm chart dependency extraction for Sveltos manifests.

chartkeeper reads Sveltos ``Profile``, ``ClusterProfile`` and
``EventTrigger`` resources and reports every Helm chart they deploy as a
normalized dependency record (name, version, datasource, category), ready
for a version-update engine to look up newer releases.

Example::

    >>> from chartkeeper import extract_package_file
    >>> result = extract_package_file(text, "clusterprofile.yaml")
"""

from __future__ import annotations

from chartkeeper.__version__ import __version__
from chartkeeper.core.extractor import extract_package_file

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "chartkeeper Contributors"
__license__ = "Apache-2.0"
__description__ = "Extract Helm chart dependencies from Sveltos manifests."

__all__ = [
    "__version__",
    "extract_package_file",
]
