"""Dynamic prompt construction for each intake operation."""

import json
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from intake_engine.config import settings
from intake_engine.schemas.conversation_schema import DialogueAction, Turn, UserIntent
from intake_engine.schemas.field_schema import FIELD_DEFINITIONS, FieldDefinition, FieldKind
from intake_engine.schemas.project_schema import render_project_context


def build_normalization_prompt(
    defn: FieldDefinition,
    raw_value: str,
    last_suggestions: Optional[str],
    project_context: str,
) -> str:
    """Build the field-aware cleaning instruction for one raw user value."""
    return "\n".join([
        f'Field to fill: "{defn.id.value}" ({defn.label})',
        f'Raw user reply: "{raw_value}"',
        f'Suggestions or clarifications previously given: "{last_suggestions or ""}"',
        "Project so far:",
        project_context or "(no information collected yet)",
        "",
        f"Determine the real value to store for \"{defn.id.value}\".",
        "If the reply confirms suggestions, extract their content and restate it for this field.",
        f"FIELD RULE: {defn.rule}",
        "",
        "Answer ONLY with the final value for this field.",
    ])


def build_resolution_prompt(user_input: str, suggestions_text: str) -> str:
    """Build the instruction mapping a confirmation onto offered suggestions."""
    return "\n".join([
        "The user is confirming some of the suggestions I offered.",
        "",
        "Suggestions offered:",
        f'"{suggestions_text}"',
        "",
        f'User confirmation: "{user_input}"',
        "",
        "EXTRACTION RULES:",
        '1. "les 3 points", "tous", "les suggestions" -> return ALL suggested content.',
        '2. A specific number ("le point 2", "la première") -> return only that item.',
        '3. A partial selection ("les deux premiers") -> return the matching items.',
        "4. Return only the content, without numbering and without the confirmation words.",
        "",
        "EXAMPLES:",
        '- "1. Plomberie 2. Électricité 3. Chauffage" + "les 3 points" -> "Plomberie, Électricité, Chauffage"',
        '- "1. Urgent 2. Modéré 3. Pas pressé" + "le point 2" -> "Modéré"',
        "",
        "Answer ONLY with the extracted content, items separated by commas.",
    ])


def build_estimation_prompt(
    project_state: Mapping[str, Any],
    reference_prices: Sequence[tuple[str, int, int]] = (),
) -> str:
    """Build the price-range request from the label-qualified project state.

    ``reference_prices`` holds (work type, low, high) market anchors.
    """
    mkt = settings.marketplace
    references = [f"- {work}: {low}-{high} {mkt.currency}" for work, low, high in reference_prices]
    if references:
        references = ["", "REFERENCE PRICES (typical ranges):", *references]
    return "\n".join([
        "Estimate the cost of this renovation project.",
        "",
        "PROJECT DATA:",
        render_project_context(project_state),
        "",
        "RULES:",
        f"- Use realistic current market rates in {mkt.market_region} for each category of work described.",
        "- Take complexity, urgency and location into account.",
        f"- Give a range (min-max) in {mkt.currency} with a reasonable spread.",
        *references,
        "",
        'Answer ONLY with two numbers separated by a dash, for example "800-2500".',
    ])


def build_decision_prompt(project_state: Mapping[str, Any], last_turn: Turn) -> str:
    """Build the next-action request, listing field ids and actions verbatim."""
    actions = [action.value for action in DialogueAction]
    fields = [f"- {defn.id.value} ({defn.label})" for defn in FIELD_DEFINITIONS]
    return "\n".join([
        "Current project state:",
        render_project_context(project_state),
        "",
        "Last interaction:",
        json.dumps(last_turn.model_dump(), ensure_ascii=False),
        "",
        "Possible actions:",
        "- ask_next: ask the next logical question",
        "- clarify: clarify or dig into the current point",
        "- suggest: propose ideas or examples",
        "- validate: restate the collected value for confirmation",
        "- free_talk: talk freely to help the user",
        "",
        "AVAILABLE FIELDS (use EXACTLY these ids):",
        *fields,
        "",
        "Choose the single most useful action and the field it targets (null for free talk).",
        "Use ONLY the field ids listed above in target_field. Never invent one.",
        "",
        "Answer in JSON with exactly this structure:",
        '{"action": "<one of ' + ", ".join(actions) + '>", '
        '"target_field": "<field id or null>", "reasoning": "<short explanation>"}',
    ])


def build_intent_prompt(user_input: str, context: str, recent_context: str) -> str:
    """Build the intent classification request."""
    intents = "\n".join(f"- {intent.value}" for intent in UserIntent)
    return "\n".join([
        f'User reply: "{user_input}"',
        f"Context: {context}",
        f"Recent memory: {recent_context}",
        "",
        "POSSIBLE INTENTS:",
        intents,
        "",
        "If the user refers back to earlier suggestions (\"les 3 points sont justes\",",
        "\"le point 2 est bon\", \"ces suggestions sont parfaites\", numbers such as",
        "\"le premier\" or \"les deux\"), the intent is validates_suggestions.",
        "",
        "Answer ONLY with the detected intent identifier.",
    ])


def build_question_prompt(defn: FieldDefinition, project_state: Mapping[str, Any]) -> str:
    """Build the request for a natural question collecting one field."""
    lines = [
        "Collect the following information:",
        f"- Field: {defn.id.value}",
        f"- Label: {defn.label}",
        f"- Kind: {defn.kind.value}",
        f"- Purpose: {defn.help_prompt}",
    ]
    if defn.examples:
        lines.append(f"- Examples: {', '.join(defn.examples)}")
    lines += [
        "",
        "Project so far:",
        render_project_context(project_state),
        "",
        "RULES:",
        "- 2 to 3 sentences maximum, natural and encouraging tone.",
        "- No markdown.",
        "- Adapt the question to what has already been collected.",
    ]
    if defn.kind == FieldKind.CHOICE:
        lines.append("- Briefly mention the main options.")
    lines += ["", "Answer ONLY with the question."]
    return "\n".join(lines)


def build_response_prompt(prompt: str, project_context: str) -> str:
    """Build a free-form reply request grounded in the project so far."""
    return "\n".join([
        "PROJECT CONTEXT:",
        project_context or "(no information collected yet)",
        "",
        "MESSAGE TO ANSWER:",
        prompt,
    ])
