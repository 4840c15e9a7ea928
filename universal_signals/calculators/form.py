"""Weighted recent-form rating."""

from typing import Optional

# Most recent result first.
FORM_WEIGHTS = (1.5, 1.3, 1.1, 1.0, 0.9)

NEUTRAL_FORM_RATING = 50.0
STRONG_FORM_THRESHOLD = 60.0
WEAK_FORM_THRESHOLD = 40.0

# Rating gap (in points) before one side's form is called better.
FORM_TREND_MARGIN = 10.0


def calculate_form_rating(form: Optional[str], has_draw: bool) -> float:
    """
    Rate a recent-form string on a 0-100 scale.

    A win is worth 3 (1 in sports without draws), a draw 1 when the sport
    allows draws, anything else 0. Only the first five results count, and
    every one of them counts toward the maximum.

    Args:
        form: Result characters, most recent first (e.g. "WWLDW")
        has_draw: Whether the sport awards draws

    Returns:
        Achieved share of the maximum weighted points, times 100
    """
    if not form:
        return NEUTRAL_FORM_RATING

    win_points = 3 if has_draw else 1
    points = 0.0
    max_possible = 0.0

    for result, weight in zip(form.upper(), FORM_WEIGHTS):
        max_possible += win_points * weight
        if result == "W":
            points += win_points * weight
        elif result == "D" and has_draw:
            points += 1 * weight

    return (points / max_possible) * 100 if max_possible > 0 else NEUTRAL_FORM_RATING


def form_rating_to_label(rating: float) -> str:
    """Map a form rating to strong / neutral / weak."""
    if rating >= STRONG_FORM_THRESHOLD:
        return "strong"
    if rating <= WEAK_FORM_THRESHOLD:
        return "weak"
    return "neutral"


def form_trend(home_rating: float, away_rating: float) -> str:
    """Which side is in better form: home_better, away_better or balanced."""
    if home_rating > away_rating + FORM_TREND_MARGIN:
        return "home_better"
    if away_rating > home_rating + FORM_TREND_MARGIN:
        return "away_better"
    return "balanced"
