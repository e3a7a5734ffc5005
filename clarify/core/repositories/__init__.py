"""Repository layer for data access."""

from clarify.core.repositories.criterion import CriterionRepository
from clarify.core.repositories.decision import DecisionRepository
from clarify.core.repositories.evaluation import EvaluationRepository
from clarify.core.repositories.option import OptionRepository

__all__ = [
    "CriterionRepository",
    "DecisionRepository",
    "EvaluationRepository",
    "OptionRepository",
]
