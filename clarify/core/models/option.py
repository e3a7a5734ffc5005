"""Option model definition."""

from uuid import UUID

from sqlalchemy import Column, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from clarify.core.database.base import Base


class Option(Base):
    """One candidate choice for a decision."""

    __tablename__ = "options"

    decision_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("decisions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(200), nullable=False)
    summary = Column(Text, nullable=False, default="")

    decision = relationship("Decision", back_populates="options")

    def __repr__(self) -> str:
        return f"<Option(id={self.id}, name='{self.name}')>"
