"""Per-user dashboard and theme preference models.

Both tables hold at most one row per ``user_id``; writes go through an
``INSERT ... ON CONFLICT (user_id) DO UPDATE`` so the unique constraint is
what the upsert conflicts on.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Boolean, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from payroll_admin.models.base import Base, JSONType, TimestampMixin, UpdatedAtMixin


class DashboardConfig(Base, TimestampMixin, UpdatedAtMixin):
    """Dashboard layout for one user."""

    __tablename__ = "dashboard_config"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String, nullable=False)
    layout: Mapped[Any | None] = mapped_column(JSONType, nullable=True)
    user_preferences: Mapped[Any | None] = mapped_column(JSONType, nullable=True)

    __table_args__ = (UniqueConstraint("user_id", name="dashboard_config_user_unique"),)


class ThemePreference(Base, TimestampMixin, UpdatedAtMixin):
    """Theme settings for one user."""

    __tablename__ = "theme_preferences"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String, nullable=False)
    dark_mode: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    theme_color: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (UniqueConstraint("user_id", name="theme_preferences_user_unique"),)
