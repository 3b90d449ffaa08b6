"""Configuration loading and management for maat-insight.

Every option the parsers and analyses recognize lives on
:class:`AnalysisConfig`, resolved once before anything runs. Sources are
merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.maat-insight.toml)
    3. Project config (./maat-insight.toml)
    4. Explicit config file
    5. Environment variables (MAAT_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(analysis="coupling", min_revs=1)
    >>> config.min_revs
    1
    >>> config.max_changeset_size
    30
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, fields
from datetime import date, datetime
from pathlib import Path
from typing import Any, Literal, Optional, Union, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

OutputFormat = Literal["csv", "table"]


@dataclass(frozen=True)
class AnalysisConfig:
    """Options consumed by the parsing and analysis core.

    Attributes:
        Selection:
            analysis: Name of the analysis to run
            vcs: Log format ("git", "git2", "svn", "hg", "p4", "tfs")

        Thresholds:
            min_revs: Minimum distinct revisions for an entity to be reported
            min_shared_revs: Minimum shared revisions for coupling, and
                minimum shared entities for communication
            min_coupling: Lower inclusive bound on coupling degree (percent)
            max_coupling: Upper inclusive bound on coupling degree (percent)
            max_changeset_size: Larger changesets are ignored for coupling

        Analysis-specific:
            verbose_results: Add revision counts to coupling output
            expression_to_match: Case-insensitive regex pre-filter for messages
            age_time_now: Reference date for code age (None = today)

        Input and transforms:
            input_encoding: Encoding used to decode the log file
            group_file: Regex => layer mapping file for layer grouping
            team_map_file: author,team CSV for team mapping
            temporal_period: Collapse same-day commits when set

        Output:
            rows: Maximum number of result rows to emit (None = all)
            output_format: "csv" or "table"
    """

    # Selection
    analysis: str = "authors"
    vcs: str = "git2"

    # Thresholds
    min_revs: int = 5
    min_shared_revs: int = 5
    min_coupling: int = 30
    max_coupling: int = 100
    max_changeset_size: int = 30

    # Analysis-specific
    verbose_results: bool = False
    expression_to_match: Optional[str] = None
    age_time_now: Optional[date] = None

    # Input and transforms
    input_encoding: str = "utf-8"
    group_file: Optional[str] = None
    team_map_file: Optional[str] = None
    temporal_period: Optional[str] = None

    # Output
    rows: Optional[int] = None
    output_format: OutputFormat = "csv"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if isinstance(self.age_time_now, str):
            try:
                object.__setattr__(self, "age_time_now", date.fromisoformat(self.age_time_now))
            except ValueError:
                raise InvalidConfigError(
                    "age_time_now", self.age_time_now, "use YYYY-MM-DD format"
                ) from None
        elif isinstance(self.age_time_now, datetime):
            # TOML local date-times; only the date matters for ages
            object.__setattr__(self, "age_time_now", self.age_time_now.date())
        elif self.age_time_now is not None and not isinstance(self.age_time_now, date):
            raise InvalidConfigError("age_time_now", self.age_time_now, "use YYYY-MM-DD format")

        for name in ("min_revs", "min_shared_revs"):
            if getattr(self, name) < 0:
                raise InvalidConfigError(name, getattr(self, name), "must be non-negative")

        for name in ("min_coupling", "max_coupling"):
            if not 0 <= getattr(self, name) <= 100:
                raise InvalidConfigError(name, getattr(self, name), "must be between 0 and 100")
        if self.min_coupling > self.max_coupling:
            raise InvalidConfigError(
                "min_coupling", self.min_coupling, "must not exceed max_coupling"
            )

        if self.max_changeset_size < 1:
            raise InvalidConfigError(
                "max_changeset_size", self.max_changeset_size, "must be at least 1"
            )

        if self.rows is not None and self.rows < 1:
            raise InvalidConfigError("rows", self.rows, "must be at least 1")

        if self.output_format not in ("csv", "table"):
            raise InvalidConfigError("output_format", self.output_format, "expected csv or table")

        if self.expression_to_match is not None:
            try:
                re.compile(self.expression_to_match)
            except re.error as e:
                raise InvalidConfigError("expression_to_match", self.expression_to_match, str(e))

    def reference_date(self) -> date:
        """Reference date for code age: ``age_time_now`` or today."""
        return self.age_time_now or date.today()


DEFAULT_CONFIG = AnalysisConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset flags do not mask file settings

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config source is invalid or missing
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".maat-insight.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "maat-insight.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from MAAT_* environment variables.

    ``MAAT_MIN_REVS=1`` sets ``min_revs``; every scalar field is supported.

    Returns:
        Dict of field_name -> parsed_value for any MAAT_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for f in fields(AnalysisConfig):
        env_key = f"MAAT_{f.name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hints[f.name])
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            result[f.name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if origin is Union and type(None) in args:
        type_hint = next(t for t in args if t is not type(None))
        origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # Dates stay strings; AnalysisConfig converts and validates them
    if type_hint is str or type_hint is date or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If TOML support is missing or parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
