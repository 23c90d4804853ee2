"""
Utility helpers for chartkeeper.

This package provides reusable utilities used across chartkeeper:

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Filesystem helpers for reading and discovering manifests

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Filesystem utilities
# ---------------------------------------------------------------------------

from chartkeeper.utils.filesystem import find_manifest_files, safe_read_file

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from chartkeeper.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    level_from_verbosity,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from chartkeeper.utils.console import (
    colorize_datasource,
    get_raw_console,
    print_error,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)

__all__ = [
    # Console
    "print_error",
    "print_table",
    "print_success",
    "print_warning",
    "get_raw_console",
    "reconfigure_console",
    "colorize_datasource",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "is_logging_configured",
    "level_from_verbosity",
    # Filesystem
    "safe_read_file",
    "find_manifest_files",
]
