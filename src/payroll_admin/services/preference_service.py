"""Per-user dashboard configuration and theme preferences.

Saves are a single ``INSERT ... ON CONFLICT (user_id) DO UPDATE`` statement,
so concurrent saves for one user cannot produce a second row or interleave
a lookup with a write.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from sqlalchemy import func, select

from payroll_admin.database import upsert_insert
from payroll_admin.models import DashboardConfig, ThemePreference
from payroll_admin.services.base import BaseService, present

logger = logging.getLogger(__name__)

UserRecordT = TypeVar("UserRecordT", DashboardConfig, ThemePreference)


class UserPreferenceService(BaseService):
    """Shared upsert keyed on user_id."""

    async def get_for_user(
        self, model: type[UserRecordT], user_id: str
    ) -> UserRecordT | None:
        return await self.fetch_one_or_none(select(model).where(model.user_id == user_id))

    async def upsert_for_user(
        self,
        model: type[UserRecordT],
        user_id: str | None,
        values: dict[str, Any],
    ) -> UserRecordT:
        """Insert the row for user_id, or update the supplied fields of it.

        Fields left as None are written on insert but not overwritten on
        update; updated_at is stamped on every update.
        """
        async with self.translate_errors():
            stmt = upsert_insert(self.session, model).values(user_id=user_id, **values)
            changes = {key: stmt.excluded[key] for key in present(values)}
            changes["updated_at"] = func.now()
            stmt = stmt.on_conflict_do_update(index_elements=["user_id"], set_=changes)

            result = await self.session.scalars(
                stmt.returning(model),
                execution_options={"populate_existing": True},
            )
            record = result.one()
            await self.session.commit()

        logger.debug("Saved %s for user %s", model.__tablename__, user_id)
        return record


class DashboardConfigService(UserPreferenceService):
    """Dashboard layout per user."""

    async def get_config(self, user_id: str) -> DashboardConfig | None:
        return await self.get_for_user(DashboardConfig, user_id)

    async def save_config(
        self,
        *,
        user_id: str | None,
        layout: Any = None,
        user_preferences: Any = None,
    ) -> DashboardConfig:
        return await self.upsert_for_user(
            DashboardConfig,
            user_id,
            {"layout": layout, "user_preferences": user_preferences},
        )


class ThemePreferenceService(UserPreferenceService):
    """Theme settings per user."""

    async def get_preferences(self, user_id: str) -> ThemePreference | None:
        return await self.get_for_user(ThemePreference, user_id)

    async def save_preferences(
        self,
        *,
        user_id: str | None,
        dark_mode: bool | None = None,
        theme_color: str | None = None,
    ) -> ThemePreference:
        return await self.upsert_for_user(
            ThemePreference,
            user_id,
            {"dark_mode": dark_mode, "theme_color": theme_color},
        )
