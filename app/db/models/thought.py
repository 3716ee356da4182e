from sqlalchemy import Column, String, Text, Integer, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from app.db.base import BaseModel


class Thought(BaseModel):
    __tablename__ = "thoughts"

    message = Column(Text, nullable=False)
    hearts = Column(Integer, default=0, nullable=False)
    category = Column(String(100), default="General", nullable=False)

    # Relationships
    likes = relationship(
        "ThoughtLike",
        back_populates="thought",
        cascade="all, delete-orphan",
        order_by="ThoughtLike.created_at",
        lazy="selectin",
    )


class ThoughtLike(BaseModel):
    __tablename__ = "thought_likes"
    __table_args__ = (
        UniqueConstraint("thought_id", "user_id", name="uq_thought_likes_thought_user"),
    )

    thought_id = Column(
        Uuid(as_uuid=True), ForeignKey("thoughts.uuid", ondelete="CASCADE"), nullable=False, index=True
    )
    # Идентификатор вызывающего (строка), не внешний ключ на users
    user_id = Column(String(64), nullable=False, index=True)

    # Relationships
    thought = relationship("Thought", back_populates="likes")
