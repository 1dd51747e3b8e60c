"""Project state and price estimate models."""

from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, model_validator

from intake_engine.schemas.field_schema import (
    FIELD_DEFINITIONS,
    FIELD_IDS,
    FieldDefinition,
    get_field,
    is_canonical_field,
)


class PriceSource(str, Enum):
    """Which estimation tier produced a price range."""

    BUDGET = "budget"
    GENERATION = "generation"
    KEYWORD = "keyword"


class PriceEstimate(BaseModel):
    """Price range in whole currency units, always with min <= max."""

    min: int
    max: int
    source: Optional[PriceSource] = None

    @model_validator(mode="after")
    def _order_bounds(self) -> "PriceEstimate":
        if self.min > self.max:
            self.min, self.max = self.max, self.min
        return self

    def as_range(self) -> dict[str, int]:
        return {"min": self.min, "max": self.max}


class ProjectState(Mapping):
    """
    Accumulated field id -> canonical value mapping for one conversation.

    Fields are written one at a time and can be overwritten by a later
    turn, never removed. Iteration follows intake order.
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._values: dict[str, str] = {}
        for field_id, value in (initial or {}).items():
            self.set(field_id, value)

    def set(self, field_id: str, value: str) -> None:
        """Set a field value.

        Raises:
            UnknownFieldError: If ``field_id`` is not a canonical field.
            TypeError: If ``value`` is not a string.
        """
        defn = get_field(field_id)
        if not isinstance(value, str):
            raise TypeError(
                f"Value for {defn.id.value} must be a string, got {type(value).__name__}"
            )
        self._values[defn.id.value] = value

    def __getitem__(self, field_id: str) -> str:
        key = get_field(field_id).id.value if is_canonical_field(field_id) else field_id
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return (fid for fid in FIELD_IDS if fid in self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ProjectState({dict(self)!r})"

    def missing_fields(self) -> list[FieldDefinition]:
        """Fields not yet filled, in intake order."""
        return [defn for defn in FIELD_DEFINITIONS if defn.id.value not in self._values]

    def to_dict(self) -> dict[str, str]:
        return dict(self)


def _render_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value).strip()


def render_project_context(project_state: Optional[Mapping[str, Any]]) -> str:
    """Render filled fields as label-qualified lines for generation prompts.

    Keys outside the canonical set are kept under their raw name.
    """
    if not project_state:
        return "(no information collected yet)"
    lines: list[str] = []
    for key, value in project_state.items():
        rendered = _render_value(value) if value is not None else ""
        if not rendered:
            continue
        label = get_field(key).label if is_canonical_field(key) else str(key)
        key_text = key.value if isinstance(key, Enum) else str(key)
        lines.append(f"- {label} ({key_text}): {rendered}")
    return "\n".join(lines) if lines else "(no information collected yet)"
