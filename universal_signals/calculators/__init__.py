"""Per-signal calculators. Each one is a pure function of its inputs."""

from .availability import AvailabilityImpact, calculate_availability_impact
from .confidence import Confidence, calculate_confidence, confidence_tier
from .efficiency import EfficiencyEdge, calculate_efficiency_edge
from .form import calculate_form_rating, form_rating_to_label, form_trend
from .strength import StrengthEdge, calculate_strength_edge, raw_strength_edge
from .tempo import calculate_tempo, expected_scoring_rate

__all__ = [
    "AvailabilityImpact",
    "calculate_availability_impact",
    "Confidence",
    "calculate_confidence",
    "confidence_tier",
    "EfficiencyEdge",
    "calculate_efficiency_edge",
    "calculate_form_rating",
    "form_rating_to_label",
    "form_trend",
    "StrengthEdge",
    "calculate_strength_edge",
    "raw_strength_edge",
    "calculate_tempo",
    "expected_scoring_rate",
]
