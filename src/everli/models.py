"""Pydantic models for Everli API responses and the records built from them."""

from __future__ import annotations

import datetime
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
)


class Store(BaseModel):
    """A partner store reachable from a delivery location."""

    id: str | None = None
    location_id: str | None = None
    name: str | None = None
    image: str | None = None
    color: str | None = None
    type: int | None = None
    address: str | None = None
    province: str | None = None
    is_new: int | None = None
    city: str | None = None
    postal_code: str | None = None
    country: str | None = None
    area: str | None = None


class Slot(BaseModel):
    """A bookable delivery window. Cost is in EUR."""

    time: str | None = None
    cost: float | None = None


class Availability(BaseModel):
    """Valid delivery slots of one store for one day."""

    date: datetime.date | None = None
    slots: list[Slot] = Field(default_factory=list)


# Upstream shapes. Only the fields we read are declared; the rest is ignored.
# Leaves that are missing, null or of the wrong type parse as None.


def _none_on_error(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    try:
        return handler(value)
    except ValidationError:
        return None


Lenient = WrapValidator(_none_on_error)

OptStr = Annotated[str | None, Lenient]
OptInt = Annotated[int | None, Lenient]
OptFloat = Annotated[float | None, Lenient]
OptBool = Annotated[bool | None, Lenient]
OptDate = Annotated[datetime.date | None, Lenient]


class UpstreamModel(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)


class SignInUser(UpstreamModel):
    user_id: OptStr = None
    auth_token: str = Field(min_length=1)


class SignInData(UpstreamModel):
    user: SignInUser


class SignInResponse(UpstreamModel):
    """Body returned by the sign-in endpoint."""

    data: SignInData


class InitData(UpstreamModel):
    next_link: OptStr = None


class InitResponse(UpstreamModel):
    """Body returned by the init endpoint."""

    data: InitData


class StoreLabel(UpstreamModel):
    value: OptStr = None
    color: OptStr = None


class StoreTrackingData(UpstreamModel):
    location_id: OptStr = None
    store_type: OptInt = None
    store_address: OptStr = None
    store_province: OptStr = None
    store_new_flag: OptInt = None
    store_city: OptStr = None
    store_postal_code: OptStr = None
    store_country: OptStr = None
    store_area: OptStr = None


class StoreTracking(UpstreamModel):
    event_name: OptStr = None
    data: Annotated[StoreTrackingData | None, Lenient] = None


class StoreEntry(UpstreamModel):
    """A single store widget inside a widget group."""

    id: OptStr = None
    name: OptStr = None
    image: OptStr = None
    label: Annotated[
        list[Annotated[StoreLabel | None, Lenient]] | None, Lenient
    ] = None
    tracking: Annotated[
        list[Annotated[StoreTracking | None, Lenient]] | None, Lenient
    ] = None


class WidgetGroup(UpstreamModel):
    widget_type: OptStr = None
    title: OptStr = None
    stores: Annotated[
        list[Annotated[StoreEntry | None, Lenient]] | None, Lenient
    ] = Field(default=None, alias="list")


class StoresData(UpstreamModel):
    body: Annotated[
        list[Annotated[WidgetGroup | None, Lenient]] | None, Lenient
    ] = None


class StoresResponse(UpstreamModel):
    """Body returned by the stores endpoint."""

    data: StoresData


class HourEntry(UpstreamModel):
    valid: OptBool = None
    time: OptStr = None
    cost: OptFloat = None


class DayEntry(UpstreamModel):
    date: OptDate = None
    hours: Annotated[
        list[Annotated[HourEntry | None, Lenient]] | None, Lenient
    ] = None


class AvailabilityData(UpstreamModel):
    store_name: OptStr = None
    data: Annotated[
        list[Annotated[DayEntry | None, Lenient]] | None, Lenient
    ] = None


class AvailabilityResponse(UpstreamModel):
    """Body returned by the availability endpoint."""

    data: AvailabilityData
