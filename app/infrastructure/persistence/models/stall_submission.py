"""Stall submission ORM model. Payload is the opaque display record."""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Index, String, UniqueConstraint, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.infrastructure.persistence.database import Base


class StallSubmission(Base):
    """Submitted stall. Table: stall_submissions. Unique per (owner_email, stall_slug)."""

    __tablename__ = "stall_submissions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    owner_email: Mapped[str] = mapped_column(String, nullable=False, index=True)
    stall_slug: Mapped[str] = mapped_column(String, nullable=False)
    payload: Mapped[Any] = mapped_column(JSONB, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint(
            "owner_email",
            "stall_slug",
            name="uq_stall_submissions_owner_slug",
        ),
        Index("ix_stall_submissions_created_at", "created_at"),
    )
