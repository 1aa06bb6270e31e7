"""
Post Entity

A link/text submission owned by the user who created it.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel


def utcnow_millis() -> datetime:
    # Cursors carry milliseconds, so creation times are stored at that precision
    now = datetime.utcnow()
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class Post(SQLModel, table=True):
    """
    Post entity.

    Business Rules:
    - creator_id references the user whose session created the post
    - Listed newest first (created_at descending)
    - points starts at 0
    """

    __tablename__ = "posts"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    text: str
    points: int = Field(default=0)

    creator_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow_millis, sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_post_created_at", "created_at"),)
