"""Shared CLI helpers."""

from pathlib import Path
from typing import Any, Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(config: Optional[Path] = None, **options: Any) -> AnalysisConfig:
    """Build the configuration from CLI options; unset options are ``None``."""
    if options.get("verbose_results") is False:
        options["verbose_results"] = None
    return load_config(config_file=config, **options)
