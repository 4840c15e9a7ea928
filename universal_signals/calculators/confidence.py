"""Signal clarity score and confidence tier."""

from dataclasses import dataclass

CLARITY_WEIGHTS = {
    "form": 25,
    "edge": 30,
    "efficiency": 25,
    "availability": 20,
}

HIGH_CONFIDENCE_SCORE = 70
MEDIUM_CONFIDENCE_SCORE = 45

# Decisiveness cut-offs used by the orchestrator.
FORM_CLARITY_GAP = 10.0
EDGE_CLARITY_PERCENTAGE = 4
STABLE_AVAILABILITY_LEVELS = frozenset({"low", "medium"})


@dataclass(frozen=True)
class Confidence:
    tier: str  # high | medium | low
    score: int  # 0..100


def confidence_tier(score: int) -> str:
    """Map a clarity score to high / medium / low."""
    if score >= HIGH_CONFIDENCE_SCORE:
        return "high"
    if score >= MEDIUM_CONFIDENCE_SCORE:
        return "medium"
    return "low"


def calculate_confidence(
    form_clear: bool,
    edge_clear: bool,
    efficiency_clear: bool,
    availability_stable: bool,
) -> Confidence:
    """
    Score how decisive the signals are, independent of which side they favour.

    Args:
        form_clear: Form ratings differ by at least 10 points
        edge_clear: Strength edge is at least 4%
        efficiency_clear: Efficiency edge is not balanced
        availability_stable: Availability impact is low or medium

    Returns:
        Confidence with a 0-100 score
    """
    flags = {
        "form": form_clear,
        "edge": edge_clear,
        "efficiency": efficiency_clear,
        "availability": availability_stable,
    }
    score = sum(CLARITY_WEIGHTS[name] for name, flag in flags.items() if flag)
    return Confidence(tier=confidence_tier(score), score=score)
