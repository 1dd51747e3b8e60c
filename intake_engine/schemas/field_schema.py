"""
Static registry of the project intake fields.

The canonical field list lives here and nowhere else: the decision
engine, the normalizer, the question generator and the price estimator
all read field ids, labels and normalization rules from this module.

Usage:
    defn = get_field("project_location")
    defn.label           # "Localisation du projet"
    defn.kind            # FieldKind.LOCATION
    defn.normalization_rule
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FieldId(str, Enum):
    """Canonical intake field identifiers, in intake order."""

    PROJECT_CATEGORY = "project_category"
    SERVICE_TYPE = "service_type"
    PROJECT_DESCRIPTION = "project_description"
    PROJECT_LOCATION = "project_location"
    PROJECT_URGENCY = "project_urgency"
    BUDGET_RANGE = "budget_range"
    SPECIFIC_MATERIALS = "specific_materials"
    ACCESSIBILITY_NEEDS = "accessibility_needs"
    TIMELINE_CONSTRAINTS = "timeline_constraints"
    ADDITIONAL_SERVICES = "additional_services"
    SPECIFIC_PREFERENCES = "specific_preferences"
    PHOTOS_UPLOADED = "photos_uploaded"


class FieldKind(str, Enum):
    """Semantic class of a field, used to pick its normalization rule."""

    FREE_TEXT = "free_text"
    LOCATION = "location"
    CHOICE = "choice"
    CURRENCY_RANGE = "currency_range"


class UnknownFieldError(ValueError):
    """Raised when a caller passes a field id outside the canonical set."""


_KIND_RULES: dict[FieldKind, str] = {
    FieldKind.FREE_TEXT: (
        "Extract the substantive content and state it directly for this field, "
        "as a short factual statement."
    ),
    FieldKind.LOCATION: (
        "Remove leading prepositions (à, en, dans, au, aux, sur). "
        'Answer "City, Country" when a city is given, otherwise just "Country". '
        "Fix capitalization (Paris, France - never paris, france)."
    ),
    FieldKind.CHOICE: (
        "Keep the chosen option EXACTLY as labelled. Do not reword, translate, "
        "shorten or expand it."
    ),
    FieldKind.CURRENCY_RANGE: (
        "Keep exactly the amount or range format the user chose, with its currency."
    ),
}


@dataclass(frozen=True)
class FieldDefinition:
    """Schema for a single intake field."""

    id: FieldId
    label: str
    kind: FieldKind
    help_prompt: str
    examples: tuple[str, ...] = ()
    normalization_rule: Optional[str] = None

    @property
    def rule(self) -> str:
        """Field-specific canonicalization instruction."""
        return self.normalization_rule or _KIND_RULES[self.kind]


FIELD_DEFINITIONS: list[FieldDefinition] = [
    FieldDefinition(
        id=FieldId.PROJECT_CATEGORY,
        label="Catégorie du projet",
        kind=FieldKind.CHOICE,
        help_prompt="Dans quel domaine se situe votre projet de rénovation ?",
        examples=("Plomberie", "Électricité", "Peinture", "Menuiserie"),
    ),
    FieldDefinition(
        id=FieldId.SERVICE_TYPE,
        label="Type de service",
        kind=FieldKind.CHOICE,
        help_prompt="Quel type de travaux souhaitez-vous réaliser précisément ?",
        examples=("Remplacement de robinet", "Installation prise électrique", "Peinture salon"),
    ),
    FieldDefinition(
        id=FieldId.PROJECT_DESCRIPTION,
        label="Description du projet",
        kind=FieldKind.FREE_TEXT,
        help_prompt="Décrivez-moi en détail votre projet et vos attentes.",
        examples=(
            "Changer le robinet de cuisine qui fuit",
            "Repeindre le salon en blanc cassé",
        ),
        normalization_rule=(
            "Rewrite suggestion-style, hypothetical or example phrasing as a direct "
            "declarative description of the project "
            '(e.g. "Rénovation complète de salle de bain avec douche italienne").'
        ),
    ),
    FieldDefinition(
        id=FieldId.PROJECT_LOCATION,
        label="Localisation du projet",
        kind=FieldKind.LOCATION,
        help_prompt="Dans quelle ville se situe votre projet ?",
        examples=("Paris, France", "Lyon, France", "Belgique"),
    ),
    FieldDefinition(
        id=FieldId.PROJECT_URGENCY,
        label="Urgence du projet",
        kind=FieldKind.CHOICE,
        help_prompt="Dans quels délais souhaitez-vous réaliser ces travaux ?",
        examples=(
            "Très urgent (moins de 2 semaines)",
            "Urgent (moins d'1 mois)",
            "Normal (1-3 mois)",
            "Pas pressé (plus de 3 mois)",
        ),
    ),
    FieldDefinition(
        id=FieldId.BUDGET_RANGE,
        label="Budget approximatif",
        kind=FieldKind.CURRENCY_RANGE,
        help_prompt="Quel budget approximatif envisagez-vous pour ces travaux ?",
        examples=("Moins de 500 €", "Entre 1000 et 3000 €", "Environ 10000 €"),
    ),
    FieldDefinition(
        id=FieldId.SPECIFIC_MATERIALS,
        label="Matériaux spécifiques",
        kind=FieldKind.FREE_TEXT,
        help_prompt="Avez-vous des préférences particulières pour les matériaux ou finitions ?",
        examples=("Bois massif", "PVC blanc", "Peinture mat", "Sans préférence"),
    ),
    FieldDefinition(
        id=FieldId.ACCESSIBILITY_NEEDS,
        label="Besoins d'accessibilité",
        kind=FieldKind.FREE_TEXT,
        help_prompt="Y a-t-il des contraintes particulières pour accéder au lieu des travaux ?",
        examples=("3ème étage sans ascenseur", "Parking difficile", "Aucune contrainte"),
    ),
    FieldDefinition(
        id=FieldId.TIMELINE_CONSTRAINTS,
        label="Contraintes de planning",
        kind=FieldKind.FREE_TEXT,
        help_prompt="Avez-vous des préférences d'horaires ou de jours pour les travaux ?",
        examples=("Uniquement en semaine", "Weekend possible", "Éviter les vacances scolaires"),
    ),
    FieldDefinition(
        id=FieldId.ADDITIONAL_SERVICES,
        label="Services additionnels",
        kind=FieldKind.FREE_TEXT,
        help_prompt="Souhaitez-vous des services complémentaires (nettoyage, évacuation des gravats...) ?",
        examples=("Nettoyage de fin de chantier", "Évacuation des gravats"),
    ),
    FieldDefinition(
        id=FieldId.SPECIFIC_PREFERENCES,
        label="Préférences particulières",
        kind=FieldKind.FREE_TEXT,
        help_prompt="Avez-vous d'autres exigences particulières pour ce projet ?",
        examples=("Matériaux écologiques", "Garantie longue durée"),
    ),
    FieldDefinition(
        id=FieldId.PHOTOS_UPLOADED,
        label="Photos du projet",
        kind=FieldKind.FREE_TEXT,
        help_prompt="Pouvez-vous partager quelques photos de l'état actuel ?",
        examples=("Vue d'ensemble de la pièce", "Détails techniques"),
    ),
]

_DEFINITIONS_BY_ID: dict[str, FieldDefinition] = {
    defn.id.value: defn for defn in FIELD_DEFINITIONS
}

FIELD_IDS: tuple[str, ...] = tuple(defn.id.value for defn in FIELD_DEFINITIONS)


def is_canonical_field(field_id: object) -> bool:
    """Check whether ``field_id`` names one of the canonical intake fields."""
    if isinstance(field_id, FieldId):
        return True
    return isinstance(field_id, str) and field_id in _DEFINITIONS_BY_ID


def get_field(field_id: str) -> FieldDefinition:
    """Look up a field definition.

    Raises:
        UnknownFieldError: If ``field_id`` is not a canonical field id.
    """
    key = field_id.value if isinstance(field_id, FieldId) else field_id
    if not isinstance(key, str) or key not in _DEFINITIONS_BY_ID:
        raise UnknownFieldError(
            f"Unknown field: {field_id!r}. Valid fields: {list(FIELD_IDS)}"
        )
    return _DEFINITIONS_BY_ID[key]


def get_label(field_id: str) -> str:
    """Human-readable label for a field id."""
    return get_field(field_id).label
