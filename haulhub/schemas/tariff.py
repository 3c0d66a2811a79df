from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class RegionTariff(BaseModel):
    """Pricing parameters for one region. All money amounts are USD."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel, loc_by_alias=False)

    region_code: str = Field(min_length=1)
    name: str
    currency_code: str
    currency_symbol: str

    base_rate: float = Field(gt=0)
    base_distance: float = Field(ge=0)
    base_weight: float = Field(ge=0)

    distance_increment: float = Field(ge=0)
    weight_increment: float = Field(ge=0)
    distance_step: float = Field(gt=0)
    weight_step: float = Field(gt=0)

    rush_multiplier: float = Field(ge=1)
    eco_discount: float = Field(ge=0, lt=1)

    # display limits only, never enforced by the engine
    max_distance: float = Field(gt=0)
    max_weight: float = Field(gt=0)

    uses_imperial: bool = False
    exchange_rate: float = Field(gt=0)

    @computed_field(alias="distanceUnit")
    @property
    def distance_unit(self) -> str:
        return "mi" if self.uses_imperial else "km"

    @computed_field(alias="weightUnit")
    @property
    def weight_unit(self) -> str:
        return "lbs" if self.uses_imperial else "kg"


class RegionOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    code: str
    name: str
    currency_code: str
    currency_symbol: str
    distance_unit: str
    weight_unit: str
    max_distance: float
    max_weight: float
