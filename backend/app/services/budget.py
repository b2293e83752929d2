"""Deterministic four-way budget split."""

from decimal import Decimal

from app.data.currency import to_money
from app.exceptions import ValidationError
from app.schemas.itinerary import BudgetBreakdown

TRANSPORT_SHARE = Decimal("0.40")
STAY_SHARE = Decimal("0.35")
FOOD_SHARE = Decimal("0.15")
ACTIVITIES_SHARE = Decimal("0.10")


def compute_budget_breakdown(budget: Decimal | float | int | str) -> BudgetBreakdown:
    """Split a budget 40/35/15/10 across transport, stay, food and activities.

    Each share is rounded to the cent, so the parts sum to the budget within 0.02.
    """
    amount = Decimal(str(budget))
    if not amount.is_finite():
        raise ValidationError(f"Budget must be a finite amount, got {amount}")
    return BudgetBreakdown(
        transport=to_money(amount * TRANSPORT_SHARE),
        stay=to_money(amount * STAY_SHARE),
        food=to_money(amount * FOOD_SHARE),
        activities=to_money(amount * ACTIVITIES_SHARE),
    )
