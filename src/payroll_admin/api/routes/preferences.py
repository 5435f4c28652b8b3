"""Dashboard configuration and theme preference endpoints.

GET returns ``null`` when the user has nothing saved yet; PUT upserts.
"""

from typing import Annotated

from fastapi import APIRouter, Path

from payroll_admin.api.dependencies import DashboardConfigs, ThemePreferences
from payroll_admin.api.schemas import (
    DashboardConfigResponse,
    DashboardConfigSave,
    ThemePreferenceResponse,
    ThemePreferenceSave,
)

router = APIRouter(tags=["preferences"])


@router.get("/dashboard-config/{user_id}", response_model=DashboardConfigResponse | None)
async def get_dashboard_config(
    service: DashboardConfigs,
    user_id: Annotated[str, Path()],
) -> DashboardConfigResponse | None:
    config = await service.get_config(user_id)
    if config is None:
        return None
    return DashboardConfigResponse.model_validate(config)


@router.put("/dashboard-config", response_model=DashboardConfigResponse)
async def save_dashboard_config(
    service: DashboardConfigs,
    payload: DashboardConfigSave,
) -> DashboardConfigResponse:
    config = await service.save_config(**payload.model_dump())
    return DashboardConfigResponse.model_validate(config)


@router.get("/theme-preferences/{user_id}", response_model=ThemePreferenceResponse | None)
async def get_theme_preferences(
    service: ThemePreferences,
    user_id: Annotated[str, Path()],
) -> ThemePreferenceResponse | None:
    preferences = await service.get_preferences(user_id)
    if preferences is None:
        return None
    return ThemePreferenceResponse.model_validate(preferences)


@router.put("/theme-preferences", response_model=ThemePreferenceResponse)
async def save_theme_preferences(
    service: ThemePreferences,
    payload: ThemePreferenceSave,
) -> ThemePreferenceResponse:
    preferences = await service.save_preferences(**payload.model_dump())
    return ThemePreferenceResponse.model_validate(preferences)
