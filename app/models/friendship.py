from sqlalchemy import Column, Integer, DateTime, ForeignKey, CheckConstraint, Index
from sqlalchemy.sql import func

from app.core.database import Base


class Friendship(Base):
    """One directed edge; a friendship between A and B is the pair (A, B) + (B, A)"""
    __tablename__ = "friends"

    user_id = Column(
        Integer,
        ForeignKey("users.user_id", ondelete="RESTRICT"),
        primary_key=True,
    )
    friend_user_id = Column(
        Integer,
        ForeignKey("users.user_id", ondelete="RESTRICT"),
        primary_key=True,
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Constraints
    __table_args__ = (
        CheckConstraint("user_id <> friend_user_id", name="ck_friends_not_self"),
        Index("ix_friends_friend_user_id", "friend_user_id"),
    )

    def __repr__(self):
        return f"<Friendship(user_id={self.user_id}, friend_user_id={self.friend_user_id})>"
