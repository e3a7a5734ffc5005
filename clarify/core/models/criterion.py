"""Criterion model definition."""

from uuid import UUID

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clarify.core.database.base import Base


class Criterion(Base):
    """An axis of evaluation. Weight 1-5 encodes relative importance."""

    __tablename__ = "criteria"
    __table_args__ = (
        CheckConstraint("weight >= 1 AND weight <= 5", name="ck_criteria_weight_range"),
    )

    decision_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("decisions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(200), nullable=False, index=True)
    weight = Column(Integer, nullable=False, default=3)

    decision = relationship("Decision", back_populates="criteria")

    def __repr__(self) -> str:
        return f"<Criterion(id={self.id}, name='{self.name}', weight={self.weight})>"
