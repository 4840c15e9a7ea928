"""Raw match input model consumed by the normalization engine."""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from ..data.normalize import normalize_form_string


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first present key; upstream payloads mix snake_case and camelCase."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _as_int(data: Mapping[str, Any], *keys: str) -> int:
    value = _pick(data, *keys, default=0)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Field '{keys[0]}' must be an integer, got {value!r}") from None


def _as_mapping(value: Any, name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"'{name}' must be an object, got {type(value).__name__}")
    return value


def _as_list(value: Any, name: str) -> List[Any]:
    """Read a list field; a lone string is one entry, not a sequence of letters."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"'{name}' must be a list, got {type(value).__name__}")
    return list(value)


def _as_names(value: Any, name: str) -> List[str]:
    return [str(item) for item in _as_list(value, name) if item is not None]


@dataclass(frozen=True)
class TeamSeasonStats:
    """Season aggregates for one side."""

    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    scored: int = 0  # goals, points or rounds depending on sport
    conceded: int = 0

    def per_game(self, total: int, default: float = 0.0) -> float:
        """Per-game rate of ``total``, or ``default`` when no games were played."""
        return total / self.played if self.played > 0 else default

    def to_dict(self) -> dict:
        """Convert stats to dictionary."""
        return {
            "played": self.played,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "scored": self.scored,
            "conceded": self.conceded,
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "TeamSeasonStats":
        """Create stats from dictionary."""
        data = _as_mapping(data, "stats")
        return cls(
            played=_as_int(data, "played"),
            wins=_as_int(data, "wins"),
            draws=_as_int(data, "draws"),
            losses=_as_int(data, "losses"),
            scored=_as_int(data, "scored"),
            conceded=_as_int(data, "conceded"),
        )


@dataclass(frozen=True)
class HeadToHead:
    """Historical results between the two sides."""

    total: int = 0
    home_wins: int = 0
    away_wins: int = 0
    draws: int = 0

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "home_wins": self.home_wins,
            "away_wins": self.away_wins,
            "draws": self.draws,
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "HeadToHead":
        data = _as_mapping(data, "h2h")
        return cls(
            total=_as_int(data, "total"),
            home_wins=_as_int(data, "home_wins", "homeWins"),
            away_wins=_as_int(data, "away_wins", "awayWins"),
            draws=_as_int(data, "draws"),
        )


@dataclass(frozen=True)
class InjuryDetail:
    """A single absence as reported by an injury feed."""

    player: str
    position: Optional[str] = None
    reason: Optional[str] = None
    details: Optional[str] = None

    def to_dict(self) -> dict:
        result = {"player": self.player}
        for key in ("position", "reason", "details"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result

    @classmethod
    def from_dict(cls, data: Any) -> "InjuryDetail":
        if isinstance(data, str):
            return cls(player=data)
        data = _as_mapping(data, "injury")
        return cls(
            player=str(_pick(data, "player", default="")),
            position=_pick(data, "position"),
            reason=_pick(data, "reason"),
            details=_pick(data, "details"),
        )


@dataclass(frozen=True)
class RawMatchInput:
    """
    Everything the engine needs to know about one upcoming match.

    ``wins + draws + losses <= played`` is assumed for both sides but not
    enforced; the calculators stay total if a feed breaks it.

    Instances are immutable but not hashable: the absence fields are lists.
    """

    __hash__ = None

    sport: str
    home_team: str
    away_team: str
    home_form: str = ""  # most recent result first, e.g. "WWLDW"
    away_form: str = ""
    home_stats: TeamSeasonStats = field(default_factory=TeamSeasonStats)
    away_stats: TeamSeasonStats = field(default_factory=TeamSeasonStats)
    h2h: HeadToHead = field(default_factory=HeadToHead)
    home_injuries: List[str] = field(default_factory=list)
    away_injuries: List[str] = field(default_factory=list)
    home_key_out: List[str] = field(default_factory=list)  # key players definitely out
    away_key_out: List[str] = field(default_factory=list)
    home_injury_details: Optional[List[InjuryDetail]] = None
    away_injury_details: Optional[List[InjuryDetail]] = None

    def to_dict(self) -> dict:
        """Convert match input to dictionary."""
        result = {
            "sport": self.sport,
            "home_team": self.home_team,
            "away_team": self.away_team,
            "home_form": self.home_form,
            "away_form": self.away_form,
            "home_stats": self.home_stats.to_dict(),
            "away_stats": self.away_stats.to_dict(),
            "h2h": self.h2h.to_dict(),
            "home_injuries": list(self.home_injuries),
            "away_injuries": list(self.away_injuries),
            "home_key_out": list(self.home_key_out),
            "away_key_out": list(self.away_key_out),
        }
        if self.home_injury_details is not None:
            result["home_injury_details"] = [d.to_dict() for d in self.home_injury_details]
        if self.away_injury_details is not None:
            result["away_injury_details"] = [d.to_dict() for d in self.away_injury_details]
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RawMatchInput":
        """
        Create match input from dictionary.

        Accepts both snake_case keys and the camelCase keys produced by the
        upstream aggregation layer (``homeTeam``, ``homeStats``, ``homeKeyOut``).

        Raises:
            ValueError: If the payload or a nested block is not an object, an
                absence field is not a list, or a numeric field cannot be read
                as an integer
        """
        data = _as_mapping(data, "match")

        def _details(*keys: str) -> Optional[List[InjuryDetail]]:
            raw = _pick(data, *keys)
            if raw is None:
                return None
            return [InjuryDetail.from_dict(item) for item in _as_list(raw, keys[0])]

        return cls(
            sport=str(_pick(data, "sport", default="")),
            home_team=str(_pick(data, "home_team", "homeTeam", default="Home")),
            away_team=str(_pick(data, "away_team", "awayTeam", default="Away")),
            home_form=normalize_form_string(_pick(data, "home_form", "homeForm")),
            away_form=normalize_form_string(_pick(data, "away_form", "awayForm")),
            home_stats=TeamSeasonStats.from_dict(_pick(data, "home_stats", "homeStats")),
            away_stats=TeamSeasonStats.from_dict(_pick(data, "away_stats", "awayStats")),
            h2h=HeadToHead.from_dict(_pick(data, "h2h")),
            home_injuries=_as_names(_pick(data, "home_injuries", "homeInjuries"), "home_injuries"),
            away_injuries=_as_names(_pick(data, "away_injuries", "awayInjuries"), "away_injuries"),
            home_key_out=_as_names(_pick(data, "home_key_out", "homeKeyOut"), "home_key_out"),
            away_key_out=_as_names(_pick(data, "away_key_out", "awayKeyOut"), "away_key_out"),
            home_injury_details=_details("home_injury_details", "homeInjuryDetails"),
            away_injury_details=_details("away_injury_details", "awayInjuryDetails"),
        )
