from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field as PydanticField,
    TypeAdapter,
    ValidationError,
    field_validator,
)

_url_adapter = TypeAdapter(AnyHttpUrl)


class CourtResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    location: str
    price_per_hour: float
    max_players: int
    latitude: float
    longitude: float
    image_url: Optional[str] = None
    manager_id: Optional[str] = None


class ManagedCourtSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    location: str
    price_per_hour: float


class CourtUpdate(BaseModel):
    name: Optional[str] = PydanticField(None, min_length=3, max_length=200)
    location: Optional[str] = PydanticField(None, min_length=5, max_length=300)
    price_per_hour: Optional[float] = PydanticField(None, gt=0)
    max_players: Optional[int] = PydanticField(None, gt=0)
    image_url: Optional[str] = None

    @field_validator("image_url")
    @classmethod
    def _validate_image_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if value == "":
            return ""
        try:
            _url_adapter.validate_python(value)
        except ValidationError as exc:
            raise ValueError("URL da imagem inválida.") from exc
        return value


class SlotResponse(BaseModel):
    start_time: str
    end_time: str
    label: str


class CourtSlotsResponse(BaseModel):
    court_id: int
    booking_date: date
    slots: list[SlotResponse]
