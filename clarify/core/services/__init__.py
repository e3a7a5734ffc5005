"""Service layer for business logic."""

from clarify.core.services.analysis import AnalysisReport, OptionResult, analyze
from clarify.core.services.decision import DecisionService
from clarify.core.services.suggestion import MergeStats, SuggestionService

__all__ = [
    "AnalysisReport",
    "DecisionService",
    "MergeStats",
    "OptionResult",
    "SuggestionService",
    "analyze",
]
