from fastapi import APIRouter, Depends

from futcerto.core.config import Settings
from futcerto.dependencies import get_app_settings
from futcerto.services.court_service import CAPACITY_BRACKETS, PRICE_BRACKETS
from futcerto.services.slots import SLOT_START_TIMES

router = APIRouter(prefix="/config", tags=["config"])


@router.get("/map")
def map_config(settings: Settings = Depends(get_app_settings)) -> dict:
    return {"access_token": settings.MAP_ACCESS_TOKEN}


@router.get("/booking")
def booking_config() -> dict:
    """Options the booking and filter widgets render."""

    return {
        "slots": list(SLOT_START_TIMES),
        "price_filters": PRICE_BRACKETS,
        "capacity_filters": CAPACITY_BRACKETS,
    }
