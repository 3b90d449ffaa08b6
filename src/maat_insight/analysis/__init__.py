"""Analyses over a :class:`~maat_insight.dataset.Dataset`.

Every analysis is a plain function ``fn(dataset, config) -> ResultTable``
that never mutates its input and returns an empty table for empty input.
"""

from .registry import (
    ANALYSES,
    AnalysisFn,
    AnalysisKind,
    analysis_names,
    get_analysis,
    resolve_analysis,
    run_named_analysis,
)

__all__ = [
    "ANALYSES",
    "AnalysisFn",
    "AnalysisKind",
    "analysis_names",
    "get_analysis",
    "resolve_analysis",
    "run_named_analysis",
]
