"""
Shared context object for chartkeeper CLI commands.

This module defines the global Click context used to share configuration
and runtime options across CLI subcommands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from chartkeeper.config import ChartKeeperConfig


class ChartKeeperContext:
    """Global context object for chartkeeper CLI commands.

    Attributes:
        config_path: Path to the configuration file in use, if any.
        config: Loaded configuration (defaults until the group callback runs).
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
    """

    __slots__ = ("config_path", "config", "verbose", "color")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.config: ChartKeeperConfig = ChartKeeperConfig()
        self.verbose: int = 0
        self.color: bool = True


#: Click decorator for injecting :class:`ChartKeeperContext` into commands.
pass_context = click.make_pass_decorator(ChartKeeperContext, ensure=True)
