"""Output model: the normalized signal bundle and its UI display variant."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .match import InjuryDetail

# Only these fields are ever serialized into a model prompt.
AI_FIELDS = ("form", "strength_edge", "tempo", "efficiency_edge", "availability_impact")


@dataclass(frozen=True)
class FormDisplay:
    home: str  # strong | neutral | weak
    away: str
    trend: str  # home_better | away_better | balanced
    label: str


@dataclass(frozen=True)
class EdgeDisplay:
    direction: str  # home | away | even
    percentage: int  # 0..20
    label: str


@dataclass(frozen=True)
class TempoDisplay:
    level: str  # low | medium | high
    label: str


@dataclass(frozen=True)
class EfficiencyDisplay:
    winner: str  # home | away | balanced
    aspect: str  # offense | defense | both | none
    label: str


@dataclass(frozen=True)
class AvailabilityDisplay:
    level: str  # low | medium | high | critical
    note: Optional[str]
    label: str
    home_injuries: List[InjuryDetail] = field(default_factory=list)
    away_injuries: List[InjuryDetail] = field(default_factory=list)


@dataclass(frozen=True)
class SignalsDisplay:
    """Richer per-signal detail for charts and badges."""

    form: FormDisplay
    edge: EdgeDisplay
    tempo: TempoDisplay
    efficiency: EfficiencyDisplay
    availability: AvailabilityDisplay

    def to_dict(self) -> dict:
        return {
            "form": {
                "home": self.form.home,
                "away": self.form.away,
                "trend": self.form.trend,
                "label": self.form.label,
            },
            "edge": {
                "direction": self.edge.direction,
                "percentage": self.edge.percentage,
                "label": self.edge.label,
            },
            "tempo": {
                "level": self.tempo.level,
                "label": self.tempo.label,
            },
            "efficiency": {
                "winner": self.efficiency.winner,
                "aspect": self.efficiency.aspect,
                "label": self.efficiency.label,
            },
            "availability": {
                "level": self.availability.level,
                "note": self.availability.note,
                "label": self.availability.label,
                "home_injuries": [d.to_dict() for d in self.availability.home_injuries],
                "away_injuries": [d.to_dict() for d in self.availability.away_injuries],
            },
        }


@dataclass(frozen=True)
class UniversalSignals:
    """
    Sport-agnostic summary of a match.

    The five string fields are what a downstream prompt sees; ``display``
    carries the structured detail for UI rendering. ``confidence`` and
    ``clarity_score`` describe how decisive the signals are, not which side
    they favour.
    """

    form: str
    strength_edge: str
    tempo: str
    efficiency_edge: str
    availability_impact: str
    display: SignalsDisplay
    confidence: str  # high | medium | low
    clarity_score: int  # 0..100

    def ai_fields(self) -> Dict[str, str]:
        """Return only the five label fields, in prompt order."""
        return {name: getattr(self, name) for name in AI_FIELDS}

    def to_dict(self) -> dict:
        """Convert signals to a JSON-ready dictionary."""
        result = self.ai_fields()
        result["display"] = self.display.to_dict()
        result["confidence"] = self.confidence
        result["clarity_score"] = self.clarity_score
        return result
