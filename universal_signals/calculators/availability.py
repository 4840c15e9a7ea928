"""Roster absence severity."""

from dataclasses import dataclass
from typing import List, Optional

from ..models.match import RawMatchInput

CRITICAL_KEY_OUT = 3
HIGH_KEY_OUT = 1
HIGH_INJURIES = 5
MEDIUM_INJURIES = 2


@dataclass(frozen=True)
class AvailabilityImpact:
    level: str  # low | medium | high | critical
    note: Optional[str] = None


def _first_named(*players: List[str]) -> Optional[str]:
    # Only the head of each side's list is considered, home side first.
    for side in players:
        if side and side[0]:
            return side[0]
    return None


def calculate_availability_impact(match: RawMatchInput) -> AvailabilityImpact:
    """
    Ordinal severity of absences across both sides; first matching rule wins.

    Availability feeds are sparse and uneven across sports, so this counts
    rather than weighs: key players out dominate, then raw injury volume.
    """
    total_key_out = len(match.home_key_out) + len(match.away_key_out)
    total_injuries = len(match.home_injuries) + len(match.away_injuries)

    if total_key_out >= CRITICAL_KEY_OUT:
        return AvailabilityImpact(level="critical", note="Multiple key absences")

    if total_key_out >= HIGH_KEY_OUT or total_injuries >= HIGH_INJURIES:
        key_player = _first_named(match.home_key_out, match.away_key_out)
        note = f"{key_player} out" if key_player else "Significant absences"
        return AvailabilityImpact(level="high", note=note)

    if total_injuries >= MEDIUM_INJURIES:
        return AvailabilityImpact(level="medium")

    return AvailabilityImpact(level="low")
