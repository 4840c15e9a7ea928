"""Tests for the multi-factor strength edge."""

import numpy as np
import pytest

from universal_signals.calculators.strength import (
    EVEN_THRESHOLD,
    MAX_EDGE,
    _round_half_up,
    calculate_strength_edge,
    raw_strength_edge,
)
from universal_signals.models.match import HeadToHead, RawMatchInput, TeamSeasonStats
from universal_signals.models.sport import SPORT_CONFIGS, SportType

SOCCER = SPORT_CONFIGS[SportType.SOCCER]
MMA = SPORT_CONFIGS[SportType.MMA]


def _match(
    home_stats=None,
    away_stats=None,
    home_form="",
    away_form="",
    h2h=None,
    sport="soccer",
) -> RawMatchInput:
    return RawMatchInput(
        sport=sport,
        home_team="Home FC",
        away_team="Away FC",
        home_form=home_form,
        away_form=away_form,
        home_stats=home_stats or TeamSeasonStats(),
        away_stats=away_stats or TeamSeasonStats(),
        h2h=h2h or HeadToHead(),
    )


@pytest.fixture
def dominant_home():
    """Unbeaten home side against a pointless away side."""
    return _match(
        home_stats=TeamSeasonStats(played=10, wins=10, draws=0, losses=0, scored=20, conceded=5),
        away_stats=TeamSeasonStats(played=10, wins=0, draws=0, losses=10, scored=5, conceded=20),
        home_form="WWWWW",
        away_form="LLLLL",
    )


# ---------------------------------------------------------------------------
# Clamp
# ---------------------------------------------------------------------------


class TestClamp:
    def test_dominant_home_hits_ceiling(self, dominant_home):
        # 0.40 + 0.20 + 3.0 * 0.015 + 0.04 = 0.685
        assert raw_strength_edge(dominant_home, SOCCER) == pytest.approx(68.5)
        edge = calculate_strength_edge(dominant_home, SOCCER)
        assert edge.direction == "home"
        assert edge.percentage == 20

    def test_dominant_away_hits_ceiling(self):
        match = _match(
            home_stats=TeamSeasonStats(played=10, wins=0, losses=10, scored=5, conceded=20),
            away_stats=TeamSeasonStats(played=10, wins=10, losses=0, scored=20, conceded=5),
            home_form="LLLLL",
            away_form="WWWWW",
        )
        edge = calculate_strength_edge(match, SOCCER)
        assert edge.direction == "away"
        assert edge.percentage == 20


# ---------------------------------------------------------------------------
# Even / home advantage
# ---------------------------------------------------------------------------


class TestEvenAndHomeAdvantage:
    @pytest.fixture
    def mirrored_stats(self):
        stats = TeamSeasonStats(played=10, wins=5, draws=2, losses=3, scored=14, conceded=11)
        return stats, stats

    def test_identical_sides_without_home_advantage_are_even(self, mirrored_stats):
        home, away = mirrored_stats
        match = _match(home, away, home_form="WDWDW", away_form="WDWDW", sport="ufc")
        edge = calculate_strength_edge(match, MMA)
        assert edge.direction == "even"
        assert edge.percentage == 0

    def test_identical_sides_get_home_advantage(self, mirrored_stats):
        home, away = mirrored_stats
        match = _match(home, away, home_form="WDWDW", away_form="WDWDW")
        edge = calculate_strength_edge(match, SOCCER)
        assert edge.direction == "home"
        assert edge.percentage == 4

    def test_small_lean_is_reported_even(self):
        # Away win rate 0.05 higher -> raw edge -1.0
        match = _match(
            home_stats=TeamSeasonStats(played=20, wins=0),
            away_stats=TeamSeasonStats(played=20, wins=1),
        )
        assert raw_strength_edge(match, MMA) == pytest.approx(-1.0)
        edge = calculate_strength_edge(match, MMA)
        assert edge.direction == "even"
        assert edge.percentage == 0

    def test_no_games_played_uses_neutral_win_rate(self):
        match = _match(
            home_stats=TeamSeasonStats(played=0, wins=0),
            away_stats=TeamSeasonStats(played=0, wins=0),
        )
        assert raw_strength_edge(match, MMA) == pytest.approx(0.0)

    def test_one_side_unplayed(self):
        match = _match(
            home_stats=TeamSeasonStats(played=0),
            away_stats=TeamSeasonStats(played=10, wins=10),
        )
        # (0.5 - 1.0) * 0.20
        assert raw_strength_edge(match, MMA) == pytest.approx(-10.0)


# ---------------------------------------------------------------------------
# Head-to-head
# ---------------------------------------------------------------------------


class TestHeadToHead:
    def test_ignored_below_three_games(self):
        match = _match(h2h=HeadToHead(total=2, home_wins=2))
        assert calculate_strength_edge(match, MMA).direction == "even"

    def test_applied_from_three_games(self):
        match = _match(h2h=HeadToHead(total=3, home_wins=3))
        edge = calculate_strength_edge(match, MMA)
        assert edge.direction == "home"
        assert edge.percentage == 10

    def test_away_dominated_history(self):
        match = _match(h2h=HeadToHead(total=4, home_wins=0, away_wins=4))
        edge = calculate_strength_edge(match, MMA)
        assert edge.direction == "away"
        assert edge.percentage == 10


# ---------------------------------------------------------------------------
# Scoring scale
# ---------------------------------------------------------------------------


class TestScoringScale:
    def test_points_sports_use_smaller_scale(self):
        home = TeamSeasonStats(played=1, scored=10, conceded=0)
        away = TeamSeasonStats(played=1, scored=0, conceded=0)
        match = _match(home, away)
        basketball = SPORT_CONFIGS[SportType.BASKETBALL]
        # Factors other than scoring cancel; subtract the home advantage.
        scoring_only_points = raw_strength_edge(match, basketball) - basketball.home_advantage * 100
        scoring_only_goals = raw_strength_edge(match, SOCCER) - SOCCER.home_advantage * 100
        assert scoring_only_points == pytest.approx(10 * 0.008 * 100)
        assert scoring_only_goals == pytest.approx(10 * 0.015 * 100)


def test_round_half_up():
    assert _round_half_up(2.5) == 3
    assert _round_half_up(3.5) == 4
    assert _round_half_up(2.49) == 2
    assert _round_half_up(19.5) == 20


def test_inconsistent_record_does_not_raise():
    match = _match(
        home_stats=TeamSeasonStats(played=2, wins=5, draws=3, losses=4, scored=1, conceded=9),
        away_stats=TeamSeasonStats(played=1, wins=0, losses=7),
    )
    edge = calculate_strength_edge(match, SOCCER)
    assert 0 <= edge.percentage <= MAX_EDGE


# ---------------------------------------------------------------------------
# Properties over a random grid
# ---------------------------------------------------------------------------


def _random_match(rng, sport):
    def stats():
        played = int(rng.integers(0, 40))
        wins = int(rng.integers(0, played + 1))
        draws = int(rng.integers(0, played - wins + 1))
        return TeamSeasonStats(
            played=played,
            wins=wins,
            draws=draws,
            losses=played - wins - draws,
            scored=int(rng.integers(0, 120 * max(played, 1))),
            conceded=int(rng.integers(0, 120 * max(played, 1))),
        )

    def form():
        return "".join(rng.choice(list("WDL"), size=int(rng.integers(0, 6))))

    total = int(rng.integers(0, 10))
    home_wins = int(rng.integers(0, total + 1))
    return _match(
        home_stats=stats(),
        away_stats=stats(),
        home_form=form(),
        away_form=form(),
        h2h=HeadToHead(total=total, home_wins=home_wins, away_wins=total - home_wins),
        sport=sport.value,
    )


@pytest.mark.parametrize("sport", list(SportType))
def test_edge_bounds_hold_for_random_inputs(sport):
    rng = np.random.default_rng(2026)
    config = SPORT_CONFIGS[sport]
    for _ in range(300):
        match = _random_match(rng, sport)
        raw = raw_strength_edge(match, config)
        edge = calculate_strength_edge(match, config)

        assert 0 <= edge.percentage <= MAX_EDGE
        assert (edge.direction == "even") == (edge.percentage == 0)
        if abs(raw) < EVEN_THRESHOLD:
            assert edge.direction == "even"
        else:
            assert edge.direction == ("home" if raw > 0 else "away")
