"""
Three-tier price estimation for an assembled project.

Tiers, each tried only when the previous one produced nothing usable:
1. Explicit budget stated by the user (``budget_range``)
2. Generation-based estimate from the whole project state
3. Keyword base-price table over category and description

The chain never raises. ``None`` is returned only when there is no
project state at all.

Usage:
    estimator = PriceEstimator(generator)
    estimator.estimate({"budget_range": "entre 2000 et 5000 euros"})
    # -> PriceEstimate(min=2000, max=5000, source=PriceSource.BUDGET)
"""

from collections.abc import Mapping
from typing import Any, Optional

from intake_engine.config import GenerationProfile, settings
from intake_engine.generation.base import TextGenerator, safe_generate
from intake_engine.logging_context import get_session_logger
from intake_engine.prompts.prompt_templates import build_estimation_prompt
from intake_engine.prompts.system_prompts import ESTIMATOR_SYSTEM_PROMPT
from intake_engine.schemas.field_schema import FieldId
from intake_engine.schemas.project_schema import PriceEstimate, PriceSource
from intake_engine.utils import extract_integers, fold_text

logger = get_session_logger(__name__)

# Ordered: the first keyword found wins, not the best match.
KEYWORD_BASE_PRICES: list[tuple[str, int]] = [
    ("plomberie", 300),
    ("électricité", 400),
    ("peinture", 600),
    ("carrelage", 1200),
    ("cuisine", 5000),
    ("salle de bain", 3000),
    ("rénovation", 2000),
]

# Single-number budget spread (percent) by magnitude
SMALL_BUDGET_LIMIT = 1000
MEDIUM_BUDGET_LIMIT = 10000
SMALL_BUDGET_SPREAD = 30
MEDIUM_BUDGET_SPREAD = 20
LARGE_BUDGET_SPREAD = 15

# Band around a single generated number (percent of the value)
GENERATED_LOW_PCT = 80
GENERATED_HIGH_PCT = 120

# Band around a keyword base price (percent of the base)
KEYWORD_LOW_PCT = 70
KEYWORD_HIGH_PCT = 150


def _band(value: int, low_pct: int, high_pct: int) -> tuple[int, int]:
    """Floor the low bound and ceil the high bound of a percentage band."""
    low = (value * low_pct) // 100
    high = -((-value * high_pct) // 100)
    return low, high


def _budget_spread(value: int) -> int:
    if value < SMALL_BUDGET_LIMIT:
        return SMALL_BUDGET_SPREAD
    if value < MEDIUM_BUDGET_LIMIT:
        return MEDIUM_BUDGET_SPREAD
    return LARGE_BUDGET_SPREAD


def _field_text(project_state: Mapping[str, Any], field_id: FieldId) -> str:
    value = project_state.get(field_id.value)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def reference_price_ranges() -> list[tuple[str, int, int]]:
    """Keyword table as (work type, low, high) anchors for the estimation prompt."""
    return [
        (keyword, *_band(base_price, KEYWORD_LOW_PCT, KEYWORD_HIGH_PCT))
        for keyword, base_price in KEYWORD_BASE_PRICES
    ]


def match_base_price(text: str, default: int) -> int:
    """Return the base price of the first keyword found in ``text``."""
    folded = fold_text(text)
    for keyword, base_price in KEYWORD_BASE_PRICES:
        if fold_text(keyword) in folded:
            return base_price
    return default


class PriceEstimator:
    """Derives a price range from the accumulated project state."""

    def __init__(
        self,
        generator: TextGenerator,
        profile: Optional[GenerationProfile] = None,
        default_base_price: Optional[int] = None,
    ) -> None:
        self._generator = generator
        self._profile = profile or settings.profiles.estimate
        self._default_base_price = default_base_price or settings.pricing.default_base_price

    def estimate(self, project_state: Optional[Mapping[str, Any]]) -> Optional[PriceEstimate]:
        """Return the first usable tier's estimate, or None without a project state."""
        if project_state is None:
            return None

        estimate = self._from_budget(project_state)
        if estimate is None:
            estimate = self._from_generation(project_state)
        if estimate is None:
            estimate = self._from_keywords(project_state)
        logger.info(
            "Price estimate %d-%d %s (%s tier)",
            estimate.min, estimate.max, settings.marketplace.currency, estimate.source.value,
        )
        return estimate

    def _from_budget(self, project_state: Mapping[str, Any]) -> Optional[PriceEstimate]:
        budget = _field_text(project_state, FieldId.BUDGET_RANGE)
        if not budget:
            return None

        numbers = extract_integers(budget)
        if len(numbers) >= 2:
            low, high = numbers[0], numbers[1]
            return PriceEstimate(min=min(low, high), max=max(low, high), source=PriceSource.BUDGET)
        if len(numbers) == 1:
            spread = _budget_spread(numbers[0])
            low, high = _band(numbers[0], 100 - spread, 100 + spread)
            return PriceEstimate(min=low, max=high, source=PriceSource.BUDGET)

        logger.debug("No number in budget %r, estimating instead", budget)
        return None

    def _from_generation(self, project_state: Mapping[str, Any]) -> Optional[PriceEstimate]:
        reply = safe_generate(
            self._generator,
            ESTIMATOR_SYSTEM_PROMPT,
            build_estimation_prompt(project_state, reference_price_ranges()),
            self._profile,
            operation="estimate_price",
        )
        if reply is None:
            return None

        numbers = extract_integers(reply)
        if len(numbers) >= 2:
            return PriceEstimate(min=numbers[0], max=numbers[1], source=PriceSource.GENERATION)
        if len(numbers) == 1:
            low, high = _band(numbers[0], GENERATED_LOW_PCT, GENERATED_HIGH_PCT)
            return PriceEstimate(min=low, max=high, source=PriceSource.GENERATION)

        logger.warning("Unparseable price estimate reply: %r", reply)
        return None

    def _from_keywords(self, project_state: Mapping[str, Any]) -> PriceEstimate:
        text = " ".join([
            _field_text(project_state, FieldId.PROJECT_CATEGORY),
            _field_text(project_state, FieldId.PROJECT_DESCRIPTION),
        ])
        base_price = match_base_price(text, self._default_base_price)
        low, high = _band(base_price, KEYWORD_LOW_PCT, KEYWORD_HIGH_PCT)
        return PriceEstimate(min=low, max=high, source=PriceSource.KEYWORD)
