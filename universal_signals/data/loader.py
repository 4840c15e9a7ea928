"""Load match inputs from JSON and export normalized signals."""

import json
import logging
from typing import List, Sequence

import numpy as np
import pandas as pd

from ..models.match import RawMatchInput
from ..models.signals import UniversalSignals

logger = logging.getLogger(__name__)

FRAME_COLUMNS = [
    "sport",
    "home_team",
    "away_team",
    "form",
    "strength_edge",
    "tempo",
    "efficiency_edge",
    "availability_impact",
    "edge_direction",
    "edge_percentage",
    "signed_edge",
    "tempo_level",
    "efficiency_winner",
    "efficiency_aspect",
    "availability_level",
    "confidence",
    "clarity_score",
]


class SignalsLoader:
    """Reads match inputs from JSON files and writes signal bundles back out."""

    @staticmethod
    def load_matches_from_json(file_path: str) -> List[RawMatchInput]:
        """
        Load match inputs from a JSON file.

        Args:
            file_path: Path to a JSON file holding ``{"matches": [...]}`` or a bare list

        Returns:
            List of RawMatchInput objects

        Raises:
            ValueError: If the document or any match record is malformed
        """
        with open(file_path, "r") as f:
            data = json.load(f)

        if isinstance(data, dict):
            records = data.get("matches", [])
            if not isinstance(records, list):
                raise ValueError(f"'matches' in {file_path} must be a list, got {type(records).__name__}")
        elif isinstance(data, list):
            records = data
        else:
            raise ValueError(f"Expected an object or list in {file_path}, got {type(data).__name__}")

        matches = []
        for index, record in enumerate(records):
            try:
                matches.append(RawMatchInput.from_dict(record))
            except ValueError as e:
                raise ValueError(f"Match #{index} in {file_path}: {e}") from e

        logger.info("Loaded %d matches from %s", len(matches), file_path)
        return matches

    @staticmethod
    def save_signals_to_json(
        matches: Sequence[RawMatchInput],
        signals: Sequence[UniversalSignals],
        file_path: str,
    ) -> None:
        """
        Save signal bundles to a JSON file, each paired with its teams.

        Args:
            matches: Inputs the signals were computed from
            signals: Signals in the same order as ``matches``
            file_path: Output file path
        """
        if len(matches) != len(signals):
            raise ValueError(f"Got {len(matches)} matches but {len(signals)} signal bundles")

        payload = {
            "signals": [
                {
                    "sport": match.sport,
                    "home_team": match.home_team,
                    "away_team": match.away_team,
                    "signals": bundle.to_dict(),
                }
                for match, bundle in zip(matches, signals)
            ]
        }
        with open(file_path, "w") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        logger.info("Saved %d signal bundles to %s", len(signals), file_path)

    @staticmethod
    def create_sample_data(file_path: str) -> None:
        """
        Write a sample input file with one match per sport.

        Args:
            file_path: Output file path
        """
        sample = {
            "matches": [
                {
                    "sport": "soccer_epl",
                    "home_team": "Arsenal",
                    "away_team": "Chelsea",
                    "home_form": "WWDWL",
                    "away_form": "LDWLL",
                    "home_stats": {"played": 20, "wins": 13, "draws": 4, "losses": 3, "scored": 41, "conceded": 17},
                    "away_stats": {"played": 20, "wins": 7, "draws": 6, "losses": 7, "scored": 28, "conceded": 27},
                    "h2h": {"total": 6, "home_wins": 3, "away_wins": 1, "draws": 2},
                    "home_injuries": ["Saka"],
                    "away_injuries": ["James", "Fofana"],
                },
                {
                    "sport": "basketball_nba",
                    "home_team": "Boston Celtics",
                    "away_team": "Miami Heat",
                    "home_form": "WWWLW",
                    "away_form": "LWLWL",
                    "home_stats": {"played": 40, "wins": 30, "draws": 0, "losses": 10, "scored": 4720, "conceded": 4400},
                    "away_stats": {"played": 40, "wins": 21, "draws": 0, "losses": 19, "scored": 4380, "conceded": 4360},
                    "h2h": {"total": 4, "home_wins": 3, "away_wins": 1, "draws": 0},
                    "away_key_out": ["Jimmy Butler"],
                },
                {
                    "sport": "americanfootball_nfl",
                    "home_team": "Kansas City Chiefs",
                    "away_team": "Buffalo Bills",
                    "home_form": "WWLWW",
                    "away_form": "WWWWL",
                    "home_stats": {"played": 12, "wins": 9, "draws": 0, "losses": 3, "scored": 290, "conceded": 220},
                    "away_stats": {"played": 12, "wins": 9, "draws": 0, "losses": 3, "scored": 320, "conceded": 240},
                    "h2h": {"total": 2, "home_wins": 1, "away_wins": 1, "draws": 0},
                },
                {
                    "sport": "icehockey_nhl",
                    "home_team": "Edmonton Oilers",
                    "away_team": "Florida Panthers",
                    "home_form": "WLWLW",
                    "away_form": "WWLWW",
                    "home_stats": {"played": 30, "wins": 17, "draws": 0, "losses": 13, "scored": 98, "conceded": 88},
                    "away_stats": {"played": 30, "wins": 19, "draws": 0, "losses": 11, "scored": 95, "conceded": 80},
                    "h2h": {"total": 3, "home_wins": 1, "away_wins": 2, "draws": 0},
                },
                {
                    "sport": "mma_mixed_martial_arts",
                    "home_team": "Fighter A",
                    "away_team": "Fighter B",
                    "home_form": "WWWLW",
                    "away_form": "WLWWL",
                    "home_stats": {"played": 15, "wins": 12, "draws": 0, "losses": 3, "scored": 30, "conceded": 12},
                    "away_stats": {"played": 18, "wins": 12, "draws": 1, "losses": 5, "scored": 40, "conceded": 25},
                },
            ]
        }
        with open(file_path, "w") as f:
            json.dump(sample, f, indent=2)


def signals_to_frame(
    matches: Sequence[RawMatchInput],
    signals: Sequence[UniversalSignals],
) -> pd.DataFrame:
    """
    Flatten signal bundles into one row per match for dashboards and exports.

    ``signed_edge`` is the edge percentage signed towards the home side
    (negative when the away side is favoured).
    """
    if len(matches) != len(signals):
        raise ValueError(f"Got {len(matches)} matches but {len(signals)} signal bundles")

    rows = []
    for match, bundle in zip(matches, signals):
        display = bundle.display
        row = {"sport": match.sport, "home_team": match.home_team, "away_team": match.away_team}
        row.update(bundle.ai_fields())
        row.update({
            "edge_direction": display.edge.direction,
            "edge_percentage": display.edge.percentage,
            "tempo_level": display.tempo.level,
            "efficiency_winner": display.efficiency.winner,
            "efficiency_aspect": display.efficiency.aspect,
            "availability_level": display.availability.level,
            "confidence": bundle.confidence,
            "clarity_score": bundle.clarity_score,
        })
        rows.append(row)

    frame = pd.DataFrame(rows, columns=[c for c in FRAME_COLUMNS if c != "signed_edge"])
    direction_sign = np.select(
        [frame["edge_direction"] == "home", frame["edge_direction"] == "away"],
        [1, -1],
        default=0,
    )
    frame["signed_edge"] = (frame["edge_percentage"].astype(int) * direction_sign).astype(int)
    return frame[FRAME_COLUMNS]
