"""Word frequencies in commit messages."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Iterator

from ..config import AnalysisConfig
from ..dataset import Dataset
from ..models import ResultTable

MESSAGE_COLUMNS = ("word", "frequency")

MIN_WORD_LENGTH = 3

# Tokens are split on non-alphanumerics, so contractions appear as their stems
STOP_WORDS = frozenset(
    """
    the and or but for with from that this will was are has have had been
    can could would should may might must shall not
    don doesn didn won wasn weren isn aren hasn haven
    """.split()
)

_TOKEN_SPLIT = re.compile(r"[^a-z0-9]+")


def tokenize(message: str) -> Iterator[str]:
    """Lowercased words of ``message`` without short words and stop words."""
    for token in _TOKEN_SPLIT.split(message.lower()):
        if len(token) >= MIN_WORD_LENGTH and token not in STOP_WORDS:
            yield token


def word_frequencies(messages: Iterable[str], expression: str | None = None) -> Counter:
    pattern = re.compile(expression, re.IGNORECASE) if expression else None
    counts: Counter = Counter()
    for message in messages:
        if pattern is not None and not pattern.search(message):
            continue
        counts.update(tokenize(message))
    return counts


def commit_messages(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """Most frequent words first; ties keep first-seen order.

    Messages are counted per record, so a commit touching several entities
    weighs accordingly.
    """
    counts = word_frequencies(
        (r.message for r in dataset if r.message),
        config.expression_to_match,
    )
    rows = sorted(counts.items(), key=lambda kv: -kv[1])
    return ResultTable(columns=MESSAGE_COLUMNS, rows=tuple(rows))
