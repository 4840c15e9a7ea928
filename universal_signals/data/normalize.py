"""Shared text normalization for free-form identifiers coming from data feeds.

Provider feeds label the same sport in many ways (``"Basketball - NBA"``,
``"basketball_nba"``, ``"Mixed Martial Arts"``, ``"ice&#8209;hockey"``).
Keyword matching is done against a single canonical form so the classifier
never has to care which feed a match came from.
"""

from __future__ import annotations

import html as _html
import re
import unicodedata
from typing import Optional


def normalize_sport_key(value: Optional[str]) -> str:
    """Reduce a sport or league label to the key the keyword table is matched against.

    Every run of punctuation or whitespace becomes one ``_`` and the result is
    lowercase ASCII, so multi-word keywords such as ``mixed_martial`` or
    ``ice_hockey`` match however a feed spaces or hyphenates them. League
    suffixes survive (``basketball_nba`` stays as is); only the classifier
    decides what a prefix means. Accented labels from non-English feeds fold
    to their plain letters, and entity-escaped labels are decoded first.

        >>> normalize_sport_key("Mixed Martial Arts")
        'mixed_martial_arts'
        >>> normalize_sport_key("Ice-Hockey / NHL")
        'ice_hockey_nhl'
        >>> normalize_sport_key("Fútbol  (LaLiga)")
        'futbol_laliga'
    """
    if not value:
        return ""
    s = _html.unescape(str(value))
    # drop accents
    s = unicodedata.normalize("NFKD", s)
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    return re.sub(r"[^a-z0-9]+", "_", s.lower()).strip("_")


def normalize_form_string(form: Optional[str]) -> str:
    """Uppercase a recent-form string and drop whitespace/separators.

    Feeds sometimes send ``"w-w-l"`` or ``"W W L"``; only the result
    characters matter for rating.

    Example: ``"w-d l"`` → ``"WDL"``
    """
    if not form:
        return ""
    return re.sub(r"[\s,\-|/]", "", str(form)).upper()
