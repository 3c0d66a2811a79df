import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from haulhub.core.enums import JobStatus
from haulhub.schemas.job import Location
from haulhub.schemas.quote import PriceQuote


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Job:
    poster_id: str
    title: str
    pickup: Location
    dropoff: Location
    distance: float
    weight: float
    is_rush: bool
    region: str
    price: PriceQuote
    description: Optional[str] = None
    vehicle_type: Optional[str] = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    status: JobStatus = JobStatus.CREATED
    claimed_by: Optional[str] = None
    posted_at: datetime = field(default_factory=_now)
    claimed_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def price_usd(self) -> float:
        return self.price.price_usd

    @property
    def local_currency_price(self) -> float:
        return self.price.local_currency_price

    def claim(self, hauler_id: str) -> None:
        self.claimed_by = hauler_id
        self.status = JobStatus.IN_PROGRESS
        self.claimed_at = _now()

    def complete(self) -> None:
        self.status = JobStatus.COMPLETED
        self.completed_at = _now()
