"""Shared text helpers used across the intake engine."""

import re
import unicodedata

# A digit run, or French-style groups of three split by (narrow) no-break or plain spaces
_INT_RE = re.compile(r"(?<!\d)\d{1,3}(?:[ \u00a0\u202f]\d{3})+(?!\d)|\d+")
_GROUP_SEPARATORS_RE = re.compile(r"[ \u00a0\u202f]")


def fold_text(value: str) -> str:
    """Lower-case a string and strip diacritics for keyword matching.

    Examples:
        >>> fold_text("Électricité")
        'electricite'
        >>> fold_text("  Salle de Bain ")
        'salle de bain'
    """
    decomposed = unicodedata.normalize("NFKD", value.strip().lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def extract_integers(text: str) -> list[int]:
    """Return every integer in ``text``, in order of appearance.

    Space-separated thousands groups ("2 000", "12 500") count as one number.

    Examples:
        >>> extract_integers("entre 2000 et 5000 euros")
        [2000, 5000]
        >>> extract_integers("entre 2 000 et 5 000 €")
        [2000, 5000]
        >>> extract_integers("pas de budget")
        []
    """
    return [int(_GROUP_SEPARATORS_RE.sub("", match)) for match in _INT_RE.findall(text)]
