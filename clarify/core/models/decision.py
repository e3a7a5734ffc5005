"""Decision model definition.

A decision is the root aggregate: options, criteria and evaluations all
hang off it and are deleted with it.
"""

from sqlalchemy import JSON, Column, String, Text
from sqlalchemy.orm import relationship

from clarify.core.database.base import Base


class Decision(Base):
    """A choice the user is trying to make."""

    __tablename__ = "decisions"

    owner_id = Column(String(255), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    tags = Column(JSON, nullable=False, default=list)  # Ordered list of strings

    # Relationships, in creation order so analysis tie-breaks are stable
    options = relationship(
        "Option",
        back_populates="decision",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Option.created_at",
        lazy="select",
    )
    criteria = relationship(
        "Criterion",
        back_populates="decision",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Criterion.created_at",
        lazy="select",
    )
    evaluations = relationship(
        "Evaluation",
        back_populates="decision",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Evaluation.created_at",
        lazy="select",
    )

    def __repr__(self) -> str:
        """String representation of the decision."""
        return f"<Decision(id={self.id}, title='{self.title}', owner='{self.owner_id}')>"
