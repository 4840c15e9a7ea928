"""Multi-factor strength edge between the two sides."""

import math
from dataclasses import dataclass

import numpy as np

from .form import calculate_form_rating
from ..models.match import RawMatchInput
from ..models.sport import SportConfig

STRENGTH_WEIGHTS = {
    "form": 0.40,
    "win_rate": 0.20,
    "head_to_head": 0.10,
}

# The scoring differential's weight lives in its per-unit scale; point totals
# run an order of magnitude above goal totals.
SCORING_SCALE_POINTS = 0.008
SCORING_SCALE_GOALS = 0.015

MIN_H2H_GAMES = 3
MAX_EDGE = 20.0
EVEN_THRESHOLD = 2.0
DEFAULT_WIN_RATE = 0.5


@dataclass(frozen=True)
class StrengthEdge:
    direction: str  # home | away | even
    percentage: int  # 0..MAX_EDGE


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def raw_strength_edge(match: RawMatchInput, config: SportConfig) -> float:
    """
    Unclamped edge in percentage points; positive favours the home side.

    Sums the weighted form, win-rate, scoring and head-to-head differentials
    plus the sport's base home advantage, then scales by 100.
    """
    home, away = match.home_stats, match.away_stats

    home_form = calculate_form_rating(match.home_form, config.has_draw)
    away_form = calculate_form_rating(match.away_form, config.has_draw)
    form_factor = (home_form - away_form) / 100 * STRENGTH_WEIGHTS["form"]

    home_win_rate = home.per_game(home.wins, default=DEFAULT_WIN_RATE)
    away_win_rate = away.per_game(away.wins, default=DEFAULT_WIN_RATE)
    win_rate_factor = (home_win_rate - away_win_rate) * STRENGTH_WEIGHTS["win_rate"]

    home_diff = home.per_game(home.scored - home.conceded)
    away_diff = away.per_game(away.scored - away.conceded)
    scale = SCORING_SCALE_POINTS if config.scoring_unit == "points" else SCORING_SCALE_GOALS
    scoring_factor = (home_diff - away_diff) * scale

    h2h = match.h2h
    if h2h.total >= MIN_H2H_GAMES:
        h2h_factor = (h2h.home_wins - h2h.away_wins) / h2h.total * STRENGTH_WEIGHTS["head_to_head"]
    else:
        h2h_factor = 0.0

    return (form_factor + win_rate_factor + scoring_factor + h2h_factor + config.home_advantage) * 100


def calculate_strength_edge(match: RawMatchInput, config: SportConfig) -> StrengthEdge:
    """
    Bounded strength edge for a match.

    Args:
        match: Raw match input
        config: Config of the detected sport

    Returns:
        StrengthEdge with percentage clamped to [0, 20]; magnitudes under 2
        are reported as even
    """
    clamped = float(np.clip(raw_strength_edge(match, config), -MAX_EDGE, MAX_EDGE))

    if abs(clamped) < EVEN_THRESHOLD:
        return StrengthEdge(direction="even", percentage=0)

    return StrengthEdge(
        direction="home" if clamped > 0 else "away",
        percentage=_round_half_up(abs(clamped)),
    )
