from intake_engine.generation.base import (
    GenerationError,
    TextGenerator,
    safe_generate,
)
from intake_engine.generation.openai_generator import OpenAIGenerator

__all__ = [
    "GenerationError",
    "TextGenerator",
    "safe_generate",
    "OpenAIGenerator",
]
