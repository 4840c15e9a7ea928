"""Expected match pace."""

from ..models.match import TeamSeasonStats
from ..models.sport import SportConfig


def expected_scoring_rate(home: TeamSeasonStats, away: TeamSeasonStats) -> float:
    """Mean of both sides' per-game scoring and conceding rates."""
    rates = (
        home.per_game(home.scored),
        away.per_game(away.scored),
        home.per_game(home.conceded),
        away.per_game(away.conceded),
    )
    return sum(rates) / len(rates)


def calculate_tempo(home: TeamSeasonStats, away: TeamSeasonStats, config: SportConfig) -> str:
    """
    Classify expected pace as low, medium or high.

    Both attacks and both defences feed in: two open defences make a fast
    game as surely as two strong attacks.
    """
    expected = expected_scoring_rate(home, away)
    if expected < config.tempo_low:
        return "low"
    if expected > config.tempo_high:
        return "high"
    return "medium"
