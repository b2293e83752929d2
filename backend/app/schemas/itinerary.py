from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.data.currency import parse_price_text


class BudgetBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    transport: Decimal
    stay: Decimal
    food: Decimal
    activities: Decimal

    @property
    def total(self) -> Decimal:
        return self.transport + self.stay + self.food + self.activities


class DayPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1)
    title: str
    morning: str
    afternoon: str
    evening: str
    estimated_cost: float = Field(ge=0)

    @field_validator("estimated_cost", mode="before")
    @classmethod
    def clean_cost(cls, v):
        # Models sometimes answer "₹5,000" instead of 5000
        if isinstance(v, str):
            return parse_price_text(v)
        return v


class Itinerary(BaseModel):
    model_config = ConfigDict(frozen=True)

    days: list[DayPlan]
    tips: list[str] = []
    best_attractions: list[str] = []
    budget_breakdown: BudgetBreakdown
