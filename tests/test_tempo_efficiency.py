"""Tests for tempo classification and the efficiency edge."""

import numpy as np
import pytest

from universal_signals.calculators.efficiency import calculate_efficiency_edge
from universal_signals.calculators.tempo import calculate_tempo, expected_scoring_rate
from universal_signals.models.match import TeamSeasonStats
from universal_signals.models.sport import SPORT_CONFIGS, SportType

SOCCER = SPORT_CONFIGS[SportType.SOCCER]
BASKETBALL = SPORT_CONFIGS[SportType.BASKETBALL]

TEMPO_ORDER = {"low": 0, "medium": 1, "high": 2}


def _per_game(scored, conceded, played=10):
    return TeamSeasonStats(played=played, scored=scored, conceded=conceded)


# ---------------------------------------------------------------------------
# Tempo
# ---------------------------------------------------------------------------


class TestTempo:
    def test_expected_rate_averages_four_rates(self):
        home = _per_game(20, 5)
        away = _per_game(5, 20)
        assert expected_scoring_rate(home, away) == pytest.approx(1.25)

    @pytest.mark.parametrize(
        "goals, expected",
        [(10, "low"), (13, "medium"), (20, "medium"), (25, "high")],
    )
    def test_soccer_thresholds(self, goals, expected):
        stats = _per_game(goals, goals)
        assert calculate_tempo(stats, stats, SOCCER) == expected

    def test_basketball_uses_points(self):
        stats = _per_game(1100, 1100)
        assert calculate_tempo(stats, stats, BASKETBALL) == "medium"
        stats = _per_game(1200, 1180)
        assert calculate_tempo(stats, stats, BASKETBALL) == "high"

    def test_no_games_is_low(self):
        empty = TeamSeasonStats()
        assert calculate_tempo(empty, empty, SOCCER) == "low"

    @pytest.mark.parametrize("sport", list(SportType))
    def test_monotonic_in_scoring_rate(self, sport):
        config = SPORT_CONFIGS[sport]
        rng = np.random.default_rng(7)
        for _ in range(200):
            played = int(rng.integers(1, 30))
            base = rng.integers(0, 130 * played, size=4)
            bump = rng.integers(0, 40 * played, size=4)
            before = calculate_tempo(
                _per_game(int(base[0]), int(base[2]), played),
                _per_game(int(base[1]), int(base[3]), played),
                config,
            )
            after = calculate_tempo(
                _per_game(int(base[0] + bump[0]), int(base[2] + bump[2]), played),
                _per_game(int(base[1] + bump[1]), int(base[3] + bump[3]), played),
                config,
            )
            assert TEMPO_ORDER[after] >= TEMPO_ORDER[before]


# ---------------------------------------------------------------------------
# Efficiency
# ---------------------------------------------------------------------------


class TestEfficiencyEdge:
    def test_identical_sides_are_balanced(self):
        stats = _per_game(15, 12)
        edge = calculate_efficiency_edge(stats, stats, SOCCER)
        assert edge.winner == "balanced"
        assert edge.aspect == "none"

    def test_home_offense(self):
        edge = calculate_efficiency_edge(_per_game(20, 10), _per_game(10, 10), SOCCER)
        assert (edge.winner, edge.aspect) == ("home", "offense")

    def test_home_defense(self):
        edge = calculate_efficiency_edge(_per_game(10, 5), _per_game(10, 15), SOCCER)
        assert (edge.winner, edge.aspect) == ("home", "defense")

    def test_both_aspects(self):
        edge = calculate_efficiency_edge(_per_game(15, 5), _per_game(10, 10), SOCCER)
        assert (edge.winner, edge.aspect) == ("home", "both")

    def test_away_edge(self):
        edge = calculate_efficiency_edge(_per_game(10, 10), _per_game(20, 10), SOCCER)
        assert (edge.winner, edge.aspect) == ("away", "offense")

    def test_below_threshold_is_balanced(self):
        # Total edge 0.1 goals/game < 0.15
        edge = calculate_efficiency_edge(_per_game(11, 10), _per_game(10, 10), SOCCER)
        assert edge.winner == "balanced"

    def test_threshold_is_inclusive_for_a_winner(self):
        # Offense +2, defense +1 points/game: total exactly 3
        edge = calculate_efficiency_edge(
            _per_game(110, 105, played=1),
            _per_game(108, 106, played=1),
            BASKETBALL,
        )
        assert (edge.winner, edge.aspect) == ("home", "offense")

    def test_unplayed_side_counts_as_worst_defence(self):
        edge = calculate_efficiency_edge(TeamSeasonStats(), _per_game(12, 12), SOCCER)
        assert (edge.winner, edge.aspect) == ("away", "defense")

    def test_both_unplayed_is_balanced(self):
        edge = calculate_efficiency_edge(TeamSeasonStats(), TeamSeasonStats(), SOCCER)
        assert edge.winner == "balanced"
