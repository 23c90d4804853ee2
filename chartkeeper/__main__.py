"""
Executable module for chartkeeper.

Running:
    python -m chartkeeper

is equivalent to:
    chartkeeper
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Report a CLI import failure on stderr."""
    sys.stderr.write("chartkeeper CLI could not be loaded.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from chartkeeper.__version__ import __version__

        sys.stderr.write(f"chartkeeper version: {__version__}\n")
    except ImportError:
        sys.stderr.write("chartkeeper version: <unknown>\n")
    sys.stderr.write("\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """Entrypoint for ``python -m chartkeeper``.

    Returns:
        Exit code returned by the CLI, or 1 if it cannot be imported.
    """
    try:
        # Imported lazily so click/rich are only loaded for CLI use
        from chartkeeper.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
