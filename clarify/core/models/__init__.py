"""ORM models."""

from clarify.core.models.criterion import Criterion
from clarify.core.models.decision import Decision
from clarify.core.models.evaluation import Evaluation
from clarify.core.models.option import Option

__all__ = ["Criterion", "Decision", "Evaluation", "Option"]
