from intake_engine.engine import IntakeEngine
from intake_engine.schemas.conversation_schema import Decision, DialogueAction, Turn, UserIntent
from intake_engine.schemas.field_schema import FIELD_IDS, FieldId, UnknownFieldError
from intake_engine.schemas.project_schema import PriceEstimate, ProjectState

__all__ = [
    "IntakeEngine",
    "Decision",
    "DialogueAction",
    "Turn",
    "UserIntent",
    "FIELD_IDS",
    "FieldId",
    "UnknownFieldError",
    "PriceEstimate",
    "ProjectState",
]
