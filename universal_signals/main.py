"""Main CLI interface for universal signals normalization."""

import argparse
import logging
import sys

from .data.loader import SignalsLoader, signals_to_frame
from .normalizer import get_signal_summary, normalize_many


def normalize_matches(args):
    """Normalize every match in an input file."""
    print(f"Loading matches from {args.input}...")

    try:
        matches = SignalsLoader.load_matches_from_json(args.input)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        print(f"Error loading data: {e}")
        return 1

    print(f"Loaded {len(matches)} matches")

    signals = normalize_many(matches)

    print(f"\n{'='*60}")
    print("UNIVERSAL SIGNALS")
    print(f"{'='*60}\n")

    for match, bundle in zip(matches, signals):
        print(f"{match.home_team} vs {match.away_team} [{bundle.confidence}, clarity {bundle.clarity_score}]")
        print(f"   {get_signal_summary(bundle)}")

    print(f"\nSaving signals to {args.output}...")
    if args.format == "csv":
        signals_to_frame(matches, signals).to_csv(args.output, index=False)
    else:
        SignalsLoader.save_signals_to_json(matches, signals, args.output)
    print("✓ Done!")

    return 0


def create_sample(args):
    """Create sample data file."""
    print(f"Creating sample data at {args.output}...")
    SignalsLoader.create_sample_data(args.output)
    print("✓ Sample data created!")
    print("\nYou can now normalize it with:")
    print(f"  universal-signals normalize --input {args.output} --output signals.json")
    return 0


def main(argv=None):
    """Main entry point."""
    # Accepted before or after the subcommand.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable debug logging",
    )

    parser = argparse.ArgumentParser(
        description="Normalize raw match statistics into sport-agnostic signals",
        parents=[common],
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    normalize_parser = subparsers.add_parser("normalize", parents=[common], help="Normalize matches from a JSON file")
    normalize_parser.add_argument("--input", "-i", required=True, help="Input JSON file with matches")
    normalize_parser.add_argument("--output", "-o", default="signals.json", help="Output file")
    normalize_parser.add_argument(
        "--format",
        choices=["json", "csv"],
        default="json",
        help="Output format: full signal bundles (json) or one flat row per match (csv)",
    )

    sample_parser = subparsers.add_parser("sample", parents=[common], help="Create sample input data")
    sample_parser.add_argument("--output", "-o", default="sample_matches.json", help="Output JSON file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "normalize":
        return normalize_matches(args)
    elif args.command == "sample":
        return create_sample(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
