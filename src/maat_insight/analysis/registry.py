"""The closed set of analyses and their lookup table."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Union

from ..config import AnalysisConfig
from ..dataset import Dataset
from ..exceptions import UnknownAnalysisError
from ..models import ResultTable
from .authors import authors, revisions
from .churn import (
    absolute_churn,
    author_churn,
    entity_churn,
    main_developer,
    ownership,
    refactoring_main_developer,
)
from .code_age import code_age
from .communication import communication
from .coupling import logical_coupling, sum_of_coupling
from .effort import entity_effort, fragmentation, main_developer_by_revisions
from .messages import commit_messages
from .summary import identity, summary

AnalysisFn = Callable[[Dataset, AnalysisConfig], ResultTable]


class AnalysisKind(str, Enum):
    AUTHORS = "authors"
    REVISIONS = "revisions"
    COUPLING = "coupling"
    SUM_OF_COUPLING = "soc"
    SUMMARY = "summary"
    IDENTITY = "identity"
    ABSOLUTE_CHURN = "abs-churn"
    AUTHOR_CHURN = "author-churn"
    ENTITY_CHURN = "entity-churn"
    ENTITY_OWNERSHIP = "entity-ownership"
    MAIN_DEV = "main-dev"
    REFACTORING_MAIN_DEV = "refactoring-main-dev"
    ENTITY_EFFORT = "entity-effort"
    MAIN_DEV_BY_REVS = "main-dev-by-revs"
    FRAGMENTATION = "fragmentation"
    COMMUNICATION = "communication"
    MESSAGES = "messages"
    AGE = "age"


ANALYSES: dict[AnalysisKind, AnalysisFn] = {
    AnalysisKind.AUTHORS: authors,
    AnalysisKind.REVISIONS: revisions,
    AnalysisKind.COUPLING: logical_coupling,
    AnalysisKind.SUM_OF_COUPLING: sum_of_coupling,
    AnalysisKind.SUMMARY: summary,
    AnalysisKind.IDENTITY: identity,
    AnalysisKind.ABSOLUTE_CHURN: absolute_churn,
    AnalysisKind.AUTHOR_CHURN: author_churn,
    AnalysisKind.ENTITY_CHURN: entity_churn,
    AnalysisKind.ENTITY_OWNERSHIP: ownership,
    AnalysisKind.MAIN_DEV: main_developer,
    AnalysisKind.REFACTORING_MAIN_DEV: refactoring_main_developer,
    AnalysisKind.ENTITY_EFFORT: entity_effort,
    AnalysisKind.MAIN_DEV_BY_REVS: main_developer_by_revisions,
    AnalysisKind.FRAGMENTATION: fragmentation,
    AnalysisKind.COMMUNICATION: communication,
    AnalysisKind.MESSAGES: commit_messages,
    AnalysisKind.AGE: code_age,
}


def analysis_names() -> list[str]:
    return [kind.value for kind in AnalysisKind]


def resolve_analysis(name: Union[str, AnalysisKind]) -> AnalysisKind:
    try:
        return AnalysisKind(name)
    except ValueError:
        raise UnknownAnalysisError(str(name), analysis_names()) from None


def get_analysis(name: Union[str, AnalysisKind]) -> AnalysisFn:
    """Look up an analysis function by name.

    Raises:
        UnknownAnalysisError: If ``name`` is not a known analysis
    """
    return ANALYSES[resolve_analysis(name)]


def run_named_analysis(dataset: Dataset, config: AnalysisConfig) -> ResultTable:
    """Run ``config.analysis`` over ``dataset``."""
    return get_analysis(config.analysis)(dataset, config)
