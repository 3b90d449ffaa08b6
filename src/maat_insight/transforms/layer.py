"""Map entities onto architectural layers with regex rules.

Grouping file format, one rule per line::

    # comment
    ^src/ui/      => UI
    ^src/.*Test   => Tests

The first matching rule wins; entities matching no rule keep their name.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

from ..exceptions import TransformConfigError
from ..logging_config import get_logger
from ..models import ChangeRecord

logger = get_logger(__name__)

RULE_SEPARATOR = "=>"


@dataclass(frozen=True)
class LayerRule:
    pattern: re.Pattern[str]
    layer: str


class LayerGrouper:
    """Rewrites each record's entity to the layer its path belongs to."""

    def __init__(self, rules: Iterable[LayerRule]):
        self.rules = tuple(rules)

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: str = "utf-8") -> LayerGrouper:
        path = Path(path)
        try:
            text = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise TransformConfigError(path, str(e)) from e
        return cls(parse_rules(text, source=path))

    def layer_of(self, entity: str) -> Optional[str]:
        for rule in self.rules:
            if rule.pattern.search(entity):
                return rule.layer
        return None

    def apply(self, records: Iterable[ChangeRecord]) -> list[ChangeRecord]:
        grouped = []
        for record in records:
            layer = self.layer_of(record.entity)
            grouped.append(record if layer is None else replace(record, entity=layer))
        return grouped


def parse_rules(text: str, source: Union[str, Path] = "<grouping>") -> list[LayerRule]:
    """Parse ``regex => layer`` lines; blank, comment and separator-less lines are ignored.

    Raises:
        TransformConfigError: If a pattern is not a valid regular expression
    """
    rules = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or RULE_SEPARATOR not in line:
            continue
        pattern, layer = (part.strip() for part in line.split(RULE_SEPARATOR, 1))
        try:
            rules.append(LayerRule(re.compile(pattern), layer))
        except re.error as e:
            raise TransformConfigError(Path(source), f"invalid pattern '{pattern}': {e}") from e

    logger.debug("Loaded %d layer rules from %s", len(rules), source)
    return rules
