"""
Universal signals normalization.

Every sport maps into the same five signals (form, strength edge, tempo,
efficiency edge, availability impact) plus a clarity-based confidence.
Downstream prompts only ever see the short labels, never raw stats, so the
analysis reads the same whether the match is a soccer fixture or a UFC bout.
"""

import json
import logging
from typing import Iterable, List, Optional

from .calculators.availability import calculate_availability_impact
from .calculators.confidence import (
    EDGE_CLARITY_PERCENTAGE,
    FORM_CLARITY_GAP,
    STABLE_AVAILABILITY_LEVELS,
    calculate_confidence,
)
from .calculators.efficiency import calculate_efficiency_edge
from .calculators.form import calculate_form_rating, form_rating_to_label, form_trend
from .calculators.strength import calculate_strength_edge
from .calculators.tempo import calculate_tempo
from .models.match import InjuryDetail, RawMatchInput
from .models.signals import (
    AvailabilityDisplay,
    EdgeDisplay,
    EfficiencyDisplay,
    FormDisplay,
    SignalsDisplay,
    TempoDisplay,
    UniversalSignals,
)
from .models.sport import detect_sport, get_sport_config

logger = logging.getLogger(__name__)

TEMPO_LABELS = {
    "high": "Fast-Paced",
    "medium": "Medium",
    "low": "Controlled",
}

AVAILABILITY_LABELS = {
    "low": "Low",
    "medium": "Medium",
    "high": "High",
    "critical": "Critical",
}

SIDE_LABELS = {"home": "Home", "away": "Away"}


def _injury_list(details: Optional[List[InjuryDetail]], names: List[str]) -> List[InjuryDetail]:
    if details is not None:
        return list(details)
    return [InjuryDetail(player=name) for name in names]


def normalize_to_universal_signals(match: RawMatchInput) -> UniversalSignals:
    """
    Convert raw match data into universal signals.

    Pure and total: every input, however sparse, yields a complete bundle.

    Args:
        match: Raw statistics for one match

    Returns:
        UniversalSignals with prompt labels, display detail and confidence
    """
    sport_type = detect_sport(match.sport)
    config = get_sport_config(sport_type)

    home_rating = calculate_form_rating(match.home_form, config.has_draw)
    away_rating = calculate_form_rating(match.away_form, config.has_draw)
    trend = form_trend(home_rating, away_rating)

    edge = calculate_strength_edge(match, config)
    tempo = calculate_tempo(match.home_stats, match.away_stats, config)
    efficiency = calculate_efficiency_edge(match.home_stats, match.away_stats, config)
    availability = calculate_availability_impact(match)

    if trend == "home_better":
        form_label = f"{match.home_team} stronger"
    elif trend == "away_better":
        form_label = f"{match.away_team} stronger"
    else:
        form_label = "Balanced"

    if edge.direction == "even":
        edge_label = "Even"
    else:
        edge_label = f"{SIDE_LABELS[edge.direction]} +{edge.percentage}%"

    tempo_label = TEMPO_LABELS[tempo]

    if efficiency.winner == "balanced":
        efficiency_label = "Balanced"
    else:
        efficiency_label = f"{SIDE_LABELS[efficiency.winner]} {efficiency.aspect}"

    availability_label = AVAILABILITY_LABELS[availability.level]
    if availability.note:
        availability_display_label = f"{availability_label} – {availability.note}"
    else:
        availability_display_label = availability_label

    confidence = calculate_confidence(
        form_clear=abs(home_rating - away_rating) >= FORM_CLARITY_GAP,
        edge_clear=edge.percentage >= EDGE_CLARITY_PERCENTAGE,
        efficiency_clear=efficiency.winner != "balanced",
        availability_stable=availability.level in STABLE_AVAILABILITY_LEVELS,
    )

    logger.debug(
        "Universal signals for %s vs %s (%s): form=%s edge=%s confidence=%s",
        match.home_team,
        match.away_team,
        sport_type.value,
        form_label,
        edge_label,
        confidence.tier,
    )

    display = SignalsDisplay(
        form=FormDisplay(
            home=form_rating_to_label(home_rating),
            away=form_rating_to_label(away_rating),
            trend=trend,
            label=form_label,
        ),
        edge=EdgeDisplay(
            direction=edge.direction,
            percentage=edge.percentage,
            label=edge_label,
        ),
        tempo=TempoDisplay(level=tempo, label=tempo_label),
        efficiency=EfficiencyDisplay(
            winner=efficiency.winner,
            aspect=efficiency.aspect,
            label=efficiency_label,
        ),
        availability=AvailabilityDisplay(
            level=availability.level,
            note=availability.note,
            label=availability_display_label,
            home_injuries=_injury_list(match.home_injury_details, match.home_injuries),
            away_injuries=_injury_list(match.away_injury_details, match.away_injuries),
        ),
    )

    return UniversalSignals(
        form=form_label,
        strength_edge=edge_label,
        tempo=tempo_label,
        efficiency_edge=efficiency_label,
        availability_impact=availability_label,
        display=display,
        confidence=confidence.tier,
        clarity_score=confidence.score,
    )


def normalize_many(matches: Iterable[RawMatchInput]) -> List[UniversalSignals]:
    """Normalize a batch of matches, preserving order."""
    return [normalize_to_universal_signals(match) for match in matches]


def format_signals_for_ai(signals: UniversalSignals) -> str:
    """
    Serialize the five label fields as indented JSON for a model prompt.

    The display structure is never included.
    """
    return json.dumps(signals.ai_fields(), indent=2, ensure_ascii=False)


def get_signal_summary(signals: UniversalSignals) -> str:
    """One-line summary for logs and quick context."""
    return (
        f"Form: {signals.form} | Edge: {signals.strength_edge} | Tempo: {signals.tempo} | "
        f"Efficiency: {signals.efficiency_edge} | Availability: {signals.availability_impact}"
    )
