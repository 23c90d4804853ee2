"""Configuration file loader for chartkeeper.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``chartkeeper.toml`` — settings under ``[chartkeeper]`` table
- ``pyproject.toml`` — settings under ``[tool.chartkeeper]`` table

Discovery order:

1. Explicit path from ``--config`` or ``CHARTKEEPER_CONFIG``
2. ``chartkeeper.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.chartkeeper]`` section

Configuration precedence: defaults < config file < CLI args.

Example (``chartkeeper.toml``)::

    [chartkeeper]
    file_patterns = ["sveltos/*.yaml", "*.sveltos.yml"]

    [chartkeeper.registry_aliases]
    "@internal" = "https://charts.example.com/stable"
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

import tomli as tomllib

from chartkeeper.exceptions import ConfigError
from chartkeeper.utils.logger import get_logger
from chartkeeper.constants import DEFAULT_FILE_PATTERNS

logger = get_logger("config")


@dataclass
class ChartKeeperConfig:
    """Parsed and validated chartkeeper configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        file_patterns: Glob patterns used to pick manifest files when a
            directory is scanned.
        registry_aliases: Repository URL aliases. A chart whose
            ``repositoryURL`` equals a key is treated as coming from the
            mapped URL.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    file_patterns: List[str] = field(default_factory=lambda: list(DEFAULT_FILE_PATTERNS))
    registry_aliases: Dict[str, str] = field(default_factory=dict)

    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as a dictionary for debug logging."""
        return {
            "file_patterns": list(self.file_patterns),
            "registry_aliases": dict(self.registry_aliases),
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    chartkeeper_toml = cwd / "chartkeeper.toml"
    if chartkeeper_toml.is_file():
        logger.debug("Found chartkeeper.toml: %s", chartkeeper_toml)
        return chartkeeper_toml

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_chartkeeper_section(pyproject_toml):
        logger.debug("Found [tool.chartkeeper] in pyproject.toml: %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_chartkeeper_section(path: Path) -> bool:
    """Check whether ``pyproject.toml`` has a ``[tool.chartkeeper]`` table.

    An unreadable or invalid file simply counts as "no section".
    """
    try:
        raw = _read_toml(path)
    except ConfigError:
        return False
    return "chartkeeper" in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> ChartKeeperConfig:
    """Load and validate chartkeeper configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`ChartKeeperConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return ChartKeeperConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get("chartkeeper", {})
    else:
        section = raw.get("chartkeeper", {})

    if not section:
        logger.debug("Config file found but no chartkeeper section, using defaults")
        return ChartKeeperConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> ChartKeeperConfig:
    """Validate a ``[chartkeeper]`` / ``[tool.chartkeeper]`` table.

    Raises:
        ConfigError: Unknown keys or values of the wrong type.
    """
    config = ChartKeeperConfig()

    known_top = {"file_patterns", "registry_aliases"}

    unknown_top = set(section.keys()) - known_top
    if unknown_top:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown_top))}",
            config_path=config_path,
        )

    if "file_patterns" in section:
        val = section["file_patterns"]
        if not isinstance(val, list) or not all(
            isinstance(item, str) and item for item in val
        ):
            raise ConfigError(
                "file_patterns must be a list of non-empty strings",
                config_path=config_path,
                option="file_patterns",
            )
        config.file_patterns = list(val)

    if "registry_aliases" in section:
        val = section["registry_aliases"]
        if not isinstance(val, dict) or not all(
            isinstance(target, str) for target in val.values()
        ):
            raise ConfigError(
                "registry_aliases must be a table of strings",
                config_path=config_path,
                option="registry_aliases",
            )
        config.registry_aliases = dict(val)

    return config
