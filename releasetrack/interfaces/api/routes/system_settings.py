"""Routes for the application-wide notification switches."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from releasetrack.application.use_cases.system_settings import (
    get_system_settings as get_system_settings_uc,
    update_system_settings as update_system_settings_uc,
)
from releasetrack.infrastructure.database import get_db
from releasetrack.interfaces.api.schemas import SystemSettingsRead, SystemSettingsUpdate

router = APIRouter(prefix="/system-settings", tags=["system_settings"])


@router.get("/", response_model=SystemSettingsRead)
def read_system_settings(db: Session = Depends(get_db)) -> SystemSettingsRead:
    return SystemSettingsRead.model_validate(get_system_settings_uc(db))


@router.put("/", response_model=SystemSettingsRead)
def update_system_settings(
    settings_in: SystemSettingsUpdate, db: Session = Depends(get_db)
) -> SystemSettingsRead:
    """Turn notification kinds on or off for every user."""

    values = settings_in.model_dump(exclude_unset=True, exclude_none=True)
    try:
        updated = update_system_settings_uc(db, values)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return SystemSettingsRead.model_validate(updated)


__all__ = ["router"]
