"""
Centralized configuration with environment variable overrides.

Marketplace wording, generation model settings, per-operation sampling
profiles and pricing defaults are configurable here. Component logic
reads them from the ``settings`` singleton instead of hardcoding them.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from intake_engine.logging_context import install_session_id_filter

load_dotenv()

logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


@dataclass(frozen=True)
class MarketplaceConfig:
    """Marketplace-specific wording injected into generation prompts."""

    name: str = os.getenv("MARKETPLACE_NAME", "Reenove")
    market_region: str = os.getenv("MARKET_REGION", "France")
    currency: str = os.getenv("CURRENCY", "EUR")
    reply_language: str = os.getenv("REPLY_LANGUAGE", "French")


@dataclass(frozen=True)
class GenerationConfig:
    """Settings for the production text generation client."""

    llm_model: str = os.getenv("LLM_MODEL", "gpt-4o")
    timeout_sec: float = _safe_float("GENERATION_TIMEOUT_SEC", "20.0")
    max_retries: int = _safe_int("GENERATION_MAX_RETRIES", "0")


@dataclass(frozen=True)
class GenerationProfile:
    """Sampling temperature and token budget for one kind of generation call."""

    temperature: float
    max_tokens: int


def _profile(prefix: str, temperature: str, max_tokens: str) -> GenerationProfile:
    return GenerationProfile(
        temperature=_safe_float(f"{prefix}_TEMPERATURE", temperature),
        max_tokens=_safe_int(f"{prefix}_MAX_TOKENS", max_tokens),
    )


@dataclass(frozen=True)
class ProfileConfig:
    """Per-operation generation profiles."""

    normalize: GenerationProfile = field(default_factory=lambda: _profile("NORMALIZE", "0.3", "300"))
    resolve: GenerationProfile = field(default_factory=lambda: _profile("RESOLVE", "0.2", "200"))
    estimate: GenerationProfile = field(default_factory=lambda: _profile("ESTIMATE", "0.4", "100"))
    decide: GenerationProfile = field(default_factory=lambda: _profile("DECIDE", "0.4", "200"))
    intent: GenerationProfile = field(default_factory=lambda: _profile("INTENT", "0.3", "50"))
    question: GenerationProfile = field(default_factory=lambda: _profile("QUESTION", "0.7", "150"))
    response: GenerationProfile = field(default_factory=lambda: _profile("RESPONSE", "0.7", "200"))

    def items(self) -> list[tuple[str, GenerationProfile]]:
        return [
            ("NORMALIZE", self.normalize),
            ("RESOLVE", self.resolve),
            ("ESTIMATE", self.estimate),
            ("DECIDE", self.decide),
            ("INTENT", self.intent),
            ("QUESTION", self.question),
            ("RESPONSE", self.response),
        ]


@dataclass(frozen=True)
class PricingConfig:
    """Price estimation defaults."""

    default_base_price: int = _safe_int("DEFAULT_BASE_PRICE", "500")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    marketplace: MarketplaceConfig = field(default_factory=MarketplaceConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    profiles: ProfileConfig = field(default_factory=ProfileConfig)
    pricing: PricingConfig = field(default_factory=PricingConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


LOG_FORMAT = "%(asctime)s [%(name)s] [%(session_id)s] %(levelname)s: %(message)s"


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    for prefix, profile in config.profiles.items():
        if not 0.0 <= profile.temperature <= 2.0:
            raise ValueError(
                f"{prefix}_TEMPERATURE must be between 0.0 and 2.0, got {profile.temperature}"
            )
        if profile.max_tokens < 1:
            raise ValueError(
                f"{prefix}_MAX_TOKENS must be >= 1, got {profile.max_tokens}"
            )
    if config.generation.timeout_sec <= 0:
        raise ValueError(
            f"GENERATION_TIMEOUT_SEC must be > 0, got {config.generation.timeout_sec}"
        )
    if config.generation.max_retries < 0:
        raise ValueError(
            f"GENERATION_MAX_RETRIES must be >= 0, got {config.generation.max_retries}"
        )
    if config.pricing.default_base_price < 1:
        raise ValueError(
            f"DEFAULT_BASE_PRICE must be >= 1, got {config.pricing.default_base_price}"
        )


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    install_session_id_filter()
    logger.info("Configuration loaded for '%s'", config.marketplace.name)
    return config


# Singleton instance
settings = load_config()
