from fastapi import APIRouter, Body, HTTPException

from bowl.domain.Settings import AppSettings
from bowl.infra.Settings_Repository import SettingsRepository
from bowl.infra.storage import write_lock
from bowl.logic.scheduling.delivery import (date_to_ymd, parse_paused_dates, parse_ymd,
                                           toggle_paused_date)
from bowl.utilities.validators import SettingsInput

router = APIRouter(prefix="/api/settings")


def load_settings() -> AppSettings:
    return SettingsRepository().load()


@router.get("")
def get_settings():
    return load_settings().to_dict()


@router.put("")
def update_settings(payload: SettingsInput):
    settings = AppSettings(
        delivery_weekday=payload.delivery_weekday,
        order_cutoff_weekday=payload.order_cutoff_weekday,
        order_cutoff_hour=payload.order_cutoff_hour,
        order_cutoff_minute=payload.order_cutoff_minute,
        paused_delivery_dates=payload.paused_delivery_dates,
        repeat_factor=payload.repeat_factor,
    )
    return SettingsRepository().save(settings).to_dict()


@router.post("/paused-dates/toggle")
def toggle_paused(date: str = Body(..., embed=True)):
    """Pause a delivery date, or un-pause it when already paused (admin calendar click)."""
    try:
        ymd = date_to_ymd(parse_ymd(date))
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date (expected YYYY-MM-DD)")
    repo = SettingsRepository()
    with write_lock:
        settings = repo.load()
        settings.paused_delivery_dates = parse_paused_dates(
            toggle_paused_date(settings.paused_delivery_dates, ymd))
        return repo.save(settings).to_dict()
