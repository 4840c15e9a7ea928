"""Offensive / defensive efficiency edge."""

from dataclasses import dataclass

from ..models.match import TeamSeasonStats
from ..models.sport import SportConfig

# Conceding rate assumed for a side with no games: worst possible defence.
UNPLAYED_CONCEDED_RATE = 999.0

# One aspect must exceed the other by this factor to be called primary.
ASPECT_DOMINANCE = 1.5


@dataclass(frozen=True)
class EfficiencyEdge:
    winner: str  # home | away | balanced
    aspect: str  # offense | defense | both | none


def calculate_efficiency_edge(
    home: TeamSeasonStats,
    away: TeamSeasonStats,
    config: SportConfig,
) -> EfficiencyEdge:
    """
    Find which side holds the per-game efficiency advantage and where.

    Args:
        home: Home season aggregates
        away: Away season aggregates
        config: Config of the detected sport (for the significance threshold)

    Returns:
        EfficiencyEdge; balanced/none when the combined edge is below threshold
    """
    offense_edge = home.per_game(home.scored) - away.per_game(away.scored)
    # Positive means home concedes less.
    defense_edge = (
        away.per_game(away.conceded, default=UNPLAYED_CONCEDED_RATE)
        - home.per_game(home.conceded, default=UNPLAYED_CONCEDED_RATE)
    )
    total_edge = offense_edge + defense_edge

    if abs(total_edge) < config.efficiency_threshold:
        return EfficiencyEdge(winner="balanced", aspect="none")

    if abs(offense_edge) > abs(defense_edge) * ASPECT_DOMINANCE:
        aspect = "offense"
    elif abs(defense_edge) > abs(offense_edge) * ASPECT_DOMINANCE:
        aspect = "defense"
    else:
        aspect = "both"

    return EfficiencyEdge(winner="home" if total_edge > 0 else "away", aspect=aspect)
