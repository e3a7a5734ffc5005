"""Evaluation model definition.

An evaluation holds the pros and cons of one option against one criterion.
(option, criterion) is a natural key: there is at most one row per pair.
"""

from uuid import UUID

from sqlalchemy import JSON, Column, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clarify.core.database.base import Base


class Evaluation(Base):
    """Pros/cons of an option for a criterion."""

    __tablename__ = "evaluations"
    __table_args__ = (
        UniqueConstraint("option_id", "criteria_id", name="uq_evaluation_option_criteria"),
    )

    decision_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("decisions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    option_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("options.id", ondelete="CASCADE"),
        nullable=False,
    )
    criteria_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("criteria.id", ondelete="CASCADE"),
        nullable=False,
    )

    # Lists of {"text": str, "impactScore": int}
    pros = Column(JSON, nullable=False, default=list)
    cons = Column(JSON, nullable=False, default=list)

    decision = relationship("Decision", back_populates="evaluations")
    option = relationship("Option")
    criterion = relationship("Criterion")

    def __repr__(self) -> str:
        return (
            f"<Evaluation(id={self.id}, option_id={self.option_id}, "
            f"criteria_id={self.criteria_id})>"
        )
