from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Optional
from datetime import datetime
from haulhub.core.enums import JobStatus
from haulhub.schemas.quote import PriceQuote


class Location(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    address: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class JobCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    title: str = Field(min_length=1)
    description: Optional[str] = None
    poster_id: str = Field(min_length=1)
    pickup: Location
    dropoff: Location
    distance: Any = None
    weight: Any = None
    is_rush: bool = False
    vehicle_type: Optional[str] = "car"
    region: Optional[str] = "us"


class HaulerAction(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    hauler_id: str = Field(min_length=1)


class JobOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    id: str
    poster_id: str
    title: str
    description: Optional[str] = None
    pickup: Location
    dropoff: Location
    distance: float
    weight: float
    is_rush: bool
    vehicle_type: Optional[str] = None
    region: str
    price_usd: float
    local_currency_price: float
    price: PriceQuote
    status: JobStatus
    claimed_by: Optional[str] = None
    posted_at: datetime
    claimed_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
