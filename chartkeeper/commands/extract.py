"""Extract command implementation for chartkeeper.

Reads Sveltos manifests from files or directories and reports the Helm
charts they declare.

Typical usage::

    # Scan the current directory for *.yaml / *.yml manifests
    $ chartkeeper extract

    # Specific files, machine-readable output
    $ chartkeeper extract clusterprofiles.yaml profiles/ --format json
"""

from __future__ import annotations

import sys
import json
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

import click

from chartkeeper.models import ExtractResult
from chartkeeper.exceptions import FileOperationError
from chartkeeper.core import extract_package_file
from chartkeeper.context import pass_context, ChartKeeperContext
from chartkeeper.utils import (
    get_logger,
    print_error,
    print_table,
    print_warning,
    safe_read_file,
    colorize_datasource,
    find_manifest_files,
)

logger = get_logger("commands.extract")


@click.command()
@click.argument(
    "paths",
    nargs=-1,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format.",
)
@click.option(
    "--recursive/--no-recursive",
    default=True,
    help="Search directories recursively.",
)
@pass_context
def extract(
    ctx: ChartKeeperContext,
    paths: Tuple[Path, ...],
    format: str,
    recursive: bool,
) -> None:
    """Extract Helm chart dependencies from Sveltos manifests.

    PATHS may be files or directories (default: the current directory).
    Directories are searched for files matching the configured
    ``file_patterns``. Files that are not Sveltos manifests are skipped
    silently.

    Exits 0 on success (even when nothing is found) and 1 when a file
    could not be read.
    """
    files = _collect_files(paths or (Path("."),), ctx.config.file_patterns, recursive)
    logger.info("Scanning %d file(s)", len(files))

    results: List[Tuple[Path, ExtractResult]] = []
    failed = 0

    for file in files:
        try:
            content = safe_read_file(file)
        except FileOperationError as exc:
            print_error(str(exc))
            failed += 1
            continue

        result = extract_package_file(content, str(file), ctx.config)
        if result is not None:
            results.append((file, result))

    if format.lower() == "json":
        click.echo(json.dumps(_to_json(results), indent=2))
    else:
        _print_results_table(results)

    sys.exit(1 if failed else 0)


def _collect_files(
    paths: Sequence[Path],
    patterns: Sequence[str],
    recursive: bool,
) -> List[Path]:
    """Expand directories into matching files, keeping explicit files as-is."""
    files: List[Path] = []
    seen = set()

    for path in paths:
        if path.is_dir():
            candidates = find_manifest_files(path, patterns=patterns, recursive=recursive)
        else:
            candidates = [path.resolve()]

        for candidate in candidates:
            if candidate not in seen:
                seen.add(candidate)
                files.append(candidate)

    return files


def _display_path(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def _to_json(results: Sequence[Tuple[Path, ExtractResult]]) -> List[Dict[str, Any]]:
    return [
        {"file": _display_path(file), **result.to_dict()} for file, result in results
    ]


def _print_results_table(results: Sequence[Tuple[Path, ExtractResult]]) -> None:
    if not results:
        print_warning("No Sveltos chart dependencies found")
        return

    rows: List[Dict[str, Any]] = []
    for file, result in results:
        for dep in result.deps:
            rows.append(
                {
                    "File": _display_path(file),
                    "Chart": dep.dep_name,
                    "Version": dep.current_value,
                    "Datasource": colorize_datasource(dep.datasource.value),
                    "Category": dep.dep_type.value,
                    "Registry": ", ".join(dep.registry_urls or []),
                }
            )

    print_table(
        rows,
        title="Sveltos chart dependencies",
        caption=f"{len(rows)} dependency(ies) in {len(results)} file(s)",
    )
