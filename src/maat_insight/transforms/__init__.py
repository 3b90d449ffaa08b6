"""Record transforms applied between parsing and analysis."""

from .layer import LayerGrouper, LayerRule, parse_rules
from .team import TeamMapper, read_team_rows
from .temporal import group_by_day

__all__ = ["LayerGrouper", "LayerRule", "TeamMapper", "group_by_day", "parse_rules", "read_team_rows"]
