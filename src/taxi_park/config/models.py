from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- DATASET ---------------------


class TripModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    driver: str
    passengers: list[str] = Field(default_factory=list)
    duration: int  # minutes
    cost: float
    discount: float | None = None

    @field_validator("duration", "cost")
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v

    @field_validator("passengers")
    @classmethod
    def _unique(cls, v: list[str]) -> list[str]:
        if len(set(v)) != len(v):
            raise ValueError("passengers must not repeat within a trip")
        return v


class ParkModel(BaseModel):
    """A park spelled out as plain data; trips refer to people by name."""

    model_config = ConfigDict(extra="forbid")
    drivers: list[str] = Field(default_factory=list)
    passengers: list[str] = Field(default_factory=list)
    trips: list[TripModel] = Field(default_factory=list)


class GeneratorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    drivers: int = 10
    passengers: int = 30
    trips: int = 200
    max_passengers: int = 4
    max_duration: int = 60  # minutes
    fare_per_minute: float = 0.5
    discount_p: float = 0.3
    discounts: list[float] = Field(default_factory=lambda: [0.1, 0.2, 0.3, 0.4])

    @field_validator("drivers", "passengers", "trips", "max_duration", "fare_per_minute")
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v

    @model_validator(mode="after")
    def _check_shape(self):
        if self.trips and not self.drivers:
            raise ValueError("trips need at least one driver")
        if not 0.0 <= self.discount_p <= 1.0:
            raise ValueError("discount_p must be within [0, 1]")
        if self.discount_p > 0 and not self.discounts:
            raise ValueError("discounts must not be empty when discount_p > 0")
        if self.max_passengers < 0:
            raise ValueError("max_passengers must be >= 0")
        return self


# ----------------- QUERIES ---------------------


class FakeDriversQueryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["fake_drivers"] = "fake_drivers"
    name: str = "fake_drivers"


class FaithfulPassengersQueryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["faithful_passengers"] = "faithful_passengers"
    name: str = "faithful_passengers"
    min_trips: int = 1


class FrequentPassengersQueryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["frequent_passengers"] = "frequent_passengers"
    name: str = "frequent_passengers"
    driver: str


class SmartPassengersQueryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["smart_passengers"] = "smart_passengers"
    name: str = "smart_passengers"


class DurationPeriodQueryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["duration_period"] = "duration_period"
    name: str = "duration_period"
    width: int = 10

    @field_validator("width")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("width must be > 0")
        return v


class ParetoQueryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["pareto"] = "pareto"
    name: str = "pareto"
    top_share: float = 0.2
    income_share: float = 0.8

    @field_validator("top_share", "income_share")
    def _share(cls, v: float, info: ValidationInfo) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"{info.field_name} must be within [0, 1]")
        return v


QueryUnion = Annotated[
    FakeDriversQueryModel
    | FaithfulPassengersQueryModel
    | FrequentPassengersQueryModel
    | SmartPassengersQueryModel
    | DurationPeriodQueryModel
    | ParetoQueryModel,
    Field(discriminator="kind"),
]


def _all_queries() -> list:
    return [
        FakeDriversQueryModel(),
        FaithfulPassengersQueryModel(),
        SmartPassengersQueryModel(),
        DurationPeriodQueryModel(),
        ParetoQueryModel(),
    ]


# ------------------------------------------------------------------


class ReportModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    seed: int = 0
    log: LogModel = LogModel()
    park: ParkModel | None = None
    generator: GeneratorModel | None = None
    queries: list[QueryUnion] = Field(default_factory=_all_queries)

    @model_validator(mode="after")
    def _one_source(self):
        if (self.park is None) == (self.generator is None):
            raise ValueError("exactly one of 'park' or 'generator' must be given")
        return self
