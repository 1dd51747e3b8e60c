from intake_engine.pricing.price_estimator import (
    KEYWORD_BASE_PRICES,
    PriceEstimator,
    match_base_price,
    reference_price_ranges,
)

__all__ = ["PriceEstimator", "KEYWORD_BASE_PRICES", "match_base_price", "reference_price_ranges"]
