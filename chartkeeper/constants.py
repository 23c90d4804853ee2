"""
Centralized constants for chartkeeper.

This module defines immutable values used across chartkeeper, including
the Sveltos API group, recognized manifest kinds, file discovery
defaults and logging formats. All values are intended to be read-only.
"""

from typing import Final, Sequence

# ---------------------------------------------------------------------------
# Sveltos manifests
# ---------------------------------------------------------------------------

#: API group every Sveltos ``apiVersion`` must belong to.
SVELTOS_API_GROUP: Final[str] = "config.projectsveltos.io"

#: Field holding the declared Helm charts, relative to ``spec``.
HELM_CHARTS_FIELD: Final[str] = "helmCharts"

#: URL scheme Sveltos uses for charts stored in OCI registries.
OCI_SCHEME: Final[str] = "oci://"

#: Hostname accepted as a registry host without a dot or port.
LOCALHOST: Final[str] = "localhost"

#: Marker separating YAML documents in a multi-document stream.
DOCUMENT_MARKER: Final[str] = "---"

# ---------------------------------------------------------------------------
# File discovery
# ---------------------------------------------------------------------------

#: Glob patterns searched when a directory is given to ``extract``.
DEFAULT_FILE_PATTERNS: Final[Sequence[str]] = ("*.yaml", "*.yml")

#: Directory names never descended into while searching for manifests.
IGNORED_DIRECTORIES: Final[Sequence[str]] = (".git", "node_modules", ".venv")

#: Maximum allowed file size (in bytes) when reading manifests.
MAX_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10 MB

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
