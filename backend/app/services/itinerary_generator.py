"""Itinerary generator — LLM day-by-day plan combined with the fixed budget split."""

import json
import logging
import re
from decimal import Decimal, InvalidOperation

from pydantic import ValidationError as PydanticValidationError

from app.config import Settings
from app.data.currency import currency_symbol
from app.exceptions import ConfigurationError, GenerationParseError, ValidationError
from app.schemas.itinerary import BudgetBreakdown, DayPlan, Itinerary
from app.services.budget import compute_budget_breakdown
from app.services.llm_client import LLMClient

logger = logging.getLogger(__name__)

MIN_BUDGET = Decimal("1000")

# Output-token allowance: a fixed base for tips and attractions plus room per day
BASE_MAX_TOKENS = 4000
TOKENS_PER_DAY = 400
MAX_TOKENS_CAP = 16000

SYSTEM_PROMPT = (
    "You are an expert {region} travel planner. "
    "Always respond with valid JSON only, no markdown or extra text."
)

_CODE_FENCE = re.compile(r"```(?:json)?\s*|\s*```", re.IGNORECASE)


def _string_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def strip_code_fences(text: str) -> str:
    """Remove markdown code-fence markup around (or inside) a model response."""
    return _CODE_FENCE.sub("", text).strip()


def _sequence_days(plans: list[DayPlan]) -> list[DayPlan]:
    """Order days by their index and renumber them 1..N when the model skips or repeats one."""
    ordered = sorted(plans, key=lambda p: p.day)
    indices = [p.day for p in ordered]
    if indices != list(range(1, len(ordered) + 1)):
        logger.warning(f"Model returned day indices {[p.day for p in plans]}, renumbering 1..{len(ordered)}")
        ordered = [p.model_copy(update={"day": position}) for position, p in enumerate(ordered, start=1)]
    return ordered


def max_output_tokens(days: int) -> int:
    """Token cap for an itinerary answer, growing with the trip length."""
    return min(max(BASE_MAX_TOKENS, 1000 + TOKENS_PER_DAY * days), MAX_TOKENS_CAP)


class ItineraryGenerator:
    """Turns (destination, days, budget) into a validated Itinerary.

    Failures are never masked: a missing key, a provider error or an
    unparseable answer all propagate to the caller.
    """

    def __init__(self, llm: LLMClient, region: str = "India", currency: str = "INR"):
        self._llm = llm
        self._region = region
        self._currency = currency

    @classmethod
    def from_settings(cls, settings: Settings) -> "ItineraryGenerator":
        return cls(
            llm=LLMClient.from_settings(settings),
            region=settings.market_region,
            currency=settings.search_currency,
        )

    async def generate(self, destination: str, days: int, budget: Decimal | float | int) -> Itinerary:
        """Generate an itinerary.

        Raises:
            ValidationError: days < 1 or budget < 1000.
            ConfigurationError: no LLM key configured.
            GenerationProviderError: the LLM call failed.
            GenerationParseError: the LLM answer is not a usable itinerary.
        """
        try:
            budget = Decimal(str(budget))
        except (InvalidOperation, ValueError, TypeError) as e:
            raise ValidationError(f"Budget is not a number: {budget!r}") from e
        if not budget.is_finite():
            raise ValidationError(f"Budget must be a finite amount, got {budget}")
        if days < 1:
            raise ValidationError("Trip must last at least one day")
        if budget < MIN_BUDGET:
            raise ValidationError(f"Budget must be at least {MIN_BUDGET}")

        breakdown = compute_budget_breakdown(budget)

        if not self._llm.configured:
            raise ConfigurationError("LLM API key is not configured")

        logger.info(f"Generating itinerary for {destination}: {days} days, budget {budget}")
        raw = await self._llm.complete(
            system=SYSTEM_PROMPT.format(region=self._region),
            user=self._build_prompt(destination, days, budget),
            max_tokens=max_output_tokens(days),
            json_mode=True,
        )

        payload = self._parse_payload(raw)
        return self._build_itinerary(payload, days, breakdown)

    async def close(self):
        await self._llm.close()

    def _build_prompt(self, destination: str, days: int, budget: Decimal) -> str:
        symbol = currency_symbol(self._currency)
        return f"""Create a detailed {days}-day travel itinerary for {destination}, {self._region} with a budget of {symbol}{budget:,.0f}.

Include:
- Day-wise breakdown with morning, afternoon, and evening activities
- Top attractions and their estimated costs
- Local food recommendations
- Transportation tips
- Budget allocation (40% transport, 35% stay, 15% food, 10% activities)
- Best times to visit each place
- Cultural tips and important information

Format the response as a structured JSON with the following schema:
{{
  "days": [
    {{
      "day": 1,
      "title": "Day title",
      "morning": "Activity description",
      "afternoon": "Activity description",
      "evening": "Activity description",
      "estimated_cost": 5000
    }}
  ],
  "budget_breakdown": {{
    "transport": 40000,
    "stay": 35000,
    "food": 15000,
    "activities": 10000
  }},
  "tips": ["Tip 1", "Tip 2"],
  "best_attractions": ["Attraction 1", "Attraction 2"]
}}

Return exactly {days} entries in "days"."""

    @staticmethod
    def _parse_payload(raw: str) -> dict:
        text = strip_code_fences(raw or "")
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse itinerary response: {text[:200]!r}")
            raise GenerationParseError("Failed to parse itinerary") from e
        if not isinstance(payload, dict):
            raise GenerationParseError("Itinerary response is not a JSON object")
        return payload

    @staticmethod
    def _build_itinerary(payload: dict, days: int, breakdown: BudgetBreakdown) -> Itinerary:
        raw_days = payload.get("days")
        if not isinstance(raw_days, list) or not raw_days:
            raise GenerationParseError("Itinerary response has no days")

        if len(raw_days) != days:
            logger.warning(f"Requested {days} days, model returned {len(raw_days)}")

        if "budget_breakdown" in payload:
            # Informational only; the stored split always comes from compute_budget_breakdown
            logger.debug(f"Ignoring model budget breakdown: {payload['budget_breakdown']}")

        try:
            plans = []
            for position, entry in enumerate(raw_days, start=1):
                if not isinstance(entry, dict):
                    raise GenerationParseError(f"Day {position} is not an object")
                data = dict(entry)
                if data.get("day") is None:
                    data["day"] = position
                plans.append(DayPlan.model_validate(data))

            plans = _sequence_days(plans)
            return Itinerary(
                days=plans,
                tips=_string_list(payload.get("tips")),
                best_attractions=_string_list(payload.get("best_attractions")),
                budget_breakdown=breakdown,
            )
        except (PydanticValidationError, TypeError) as e:
            raise GenerationParseError(f"Invalid itinerary day: {e}") from e
