"""Public API for maat-insight.

Example:
    >>> from maat_insight import run_analysis
    >>>
    >>> table = run_analysis("logfile.log", vcs="git2", analysis="coupling", min_revs=1)
    >>> table.columns
    ('entity', 'coupled', 'degree', 'average-revs')
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional, Union

from .analysis import get_analysis, run_named_analysis
from .config import AnalysisConfig, load_config
from .dataset import Dataset
from .logging_config import get_logger
from .models import ChangeRecord, ResultTable
from .parsers import get_parser
from .transforms import LayerGrouper, TeamMapper, group_by_day

logger = get_logger(__name__)


def parse_log(log_path: Union[str, Path], config: AnalysisConfig) -> list[ChangeRecord]:
    """Parse ``log_path`` with the parser for ``config.vcs``."""
    parser = get_parser(config.vcs, encoding=config.input_encoding)
    records = parser.parse_file(log_path)
    logger.info("Parsed %d change records from %s (%s)", len(records), log_path, config.vcs)
    return records


def apply_transforms(records: Iterable[ChangeRecord], config: AnalysisConfig) -> list[ChangeRecord]:
    """Layer grouping, then daily grouping, then team mapping, as configured."""
    records = list(records)

    if config.group_file:
        records = LayerGrouper.from_file(config.group_file).apply(records)
        logger.debug("Grouped entities into layers using %s", config.group_file)

    if config.temporal_period:
        before = len(records)
        records = group_by_day(records)
        logger.debug("Daily grouping: %d -> %d records", before, len(records))

    if config.team_map_file:
        records = TeamMapper.from_file(config.team_map_file).apply(records)
        logger.debug("Mapped authors to teams using %s", config.team_map_file)

    return records


def analyze_records(records: Iterable[ChangeRecord], config: AnalysisConfig) -> ResultTable:
    """Run ``config.analysis`` over already-parsed records."""
    table = run_named_analysis(Dataset(apply_transforms(records, config)), config)
    logger.info("%s: %d result rows", config.analysis, len(table))
    return table


def run_analysis(
    log_path: Union[str, Path],
    config: Optional[AnalysisConfig] = None,
    config_file: Optional[Path] = None,
    **overrides: Any,
) -> ResultTable:
    """Parse a VCS log and run one analysis over it.

    Args:
        log_path: Path to the log file
        config: Fully built configuration; when omitted it is loaded with
            :func:`~maat_insight.config.load_config`
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g. ``vcs="svn"``, ``min_revs=1``)

    Returns:
        The analysis result; ``config.rows`` is not applied here.

    Raises:
        MaatInsightError: If the configuration, log or transforms are invalid
    """
    if config is None:
        config = load_config(config_file=config_file, **overrides)

    # Resolve the analysis before reading a possibly large log
    get_analysis(config.analysis)
    return analyze_records(parse_log(log_path, config), config)
