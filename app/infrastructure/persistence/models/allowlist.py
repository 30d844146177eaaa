"""Allowlist ORM models: approved owner emails and approved club emails."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base


class AllowedOwner(Base):
    """Individually approved stall owner. Table: allowed_owners. Presence = membership."""

    __tablename__ = "allowed_owners"

    email: Mapped[str] = mapped_column(String, primary_key=True)


class AllowedClub(Base):
    """Approved club account. Table: allowed_clubs. Presence = membership."""

    __tablename__ = "allowed_clubs"

    email: Mapped[str] = mapped_column(String, primary_key=True)
