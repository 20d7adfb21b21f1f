import argparse
import json
import sys
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from subtaste.core.config import APP_VERSION, settings
from subtaste.core.exceptions import TaxonomyError
from subtaste.core.logging import setup_logging
from subtaste.services.engine import TasteEngine
from subtaste.services.taxonomy_loader import default_taxonomy, load_taxonomy, load_taxonomy_file


def read_profiles(path: Path) -> list[dict]:
    """Profiles from a JSON array, a single JSON object, or JSON lines."""
    text = path.read_text(encoding="utf-8").strip()
    if not text:
        return []
    if text[0] in "[{":
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            data = None
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            return [data]
    return [json.loads(line) for line in text.splitlines() if line.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score taste profiles against a taxonomy.")
    parser.add_argument("profiles", type=Path, help="JSON or JSONL file of profiles")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--taxonomy", help="Built-in taxonomy name (default from settings)")
    source.add_argument("--taxonomy-file", type=Path, help="JSON taxonomy file")
    parser.add_argument("--workers", type=int, default=None, help="Batch worker threads")
    parser.add_argument("--indent", type=int, default=None, help="Pretty-print output")
    parser.add_argument("--version", action="version", version=f"subtaste {APP_VERSION}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if settings.APP_ENV == "development" else settings.LOG_LEVEL)

    try:
        if args.taxonomy_file:
            taxonomy = load_taxonomy_file(args.taxonomy_file)
        elif args.taxonomy:
            taxonomy = load_taxonomy(args.taxonomy)
        else:
            taxonomy = default_taxonomy()
    except TaxonomyError as e:
        logger.error(str(e))
        return 2

    try:
        profiles = read_profiles(args.profiles)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read profiles from {args.profiles}: {e}")
        return 1

    engine = TasteEngine(taxonomy)
    try:
        reports = engine.evaluate_many(profiles, max_workers=args.workers)
    except ValidationError as e:
        logger.error(f"Invalid profile input: {e}")
        return 1

    json.dump([report.model_dump(mode="json") for report in reports], sys.stdout, indent=args.indent)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
