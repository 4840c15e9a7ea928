"""Sport-agnostic normalization of raw match statistics into universal signals."""

from .models.match import HeadToHead, InjuryDetail, RawMatchInput, TeamSeasonStats
from .models.signals import UniversalSignals
from .models.sport import SPORT_CONFIGS, SportConfig, SportType, detect_sport
from .normalizer import (
    format_signals_for_ai,
    get_signal_summary,
    normalize_many,
    normalize_to_universal_signals,
)

__all__ = [
    "HeadToHead",
    "InjuryDetail",
    "RawMatchInput",
    "TeamSeasonStats",
    "UniversalSignals",
    "SPORT_CONFIGS",
    "SportConfig",
    "SportType",
    "detect_sport",
    "format_signals_for_ai",
    "get_signal_summary",
    "normalize_many",
    "normalize_to_universal_signals",
]
