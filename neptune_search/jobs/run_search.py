"""CLI job to run a provider search from the terminal."""

import argparse
import json
import logging
from typing import List, Optional

from neptune_search.core.catalog import get_catalog
from neptune_search.core.config import ConfigError, get_settings
from neptune_search.models import SearchResponse
from neptune_search.pipeline import build_summarizer, run_search
from neptune_search.search.engine import SearchEngine

logger = logging.getLogger(__name__)


def format_results(engine: SearchEngine, response: SearchResponse, *, explain: bool = False, limit: Optional[int] = None) -> str:
    lines: List[str] = [response.summary, ""]
    providers = response.providers if limit is None else response.providers[:limit]
    for rank, provider in enumerate(providers, start=1):
        lines.append(
            f"{rank:>2}. {provider.name} [{provider.category}] {provider.location} "
            f"score={provider.neptune_score} rating={provider.rating} price={provider.price_range}"
        )
        if explain:
            breakdown = engine.scorer.score_breakdown(provider, response.query, response.category)
            lines.append("    " + " ".join(f"{factor}={value:.2f}" for factor, value in breakdown.items()))
    return "\n".join(lines)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search local service providers")
    parser.add_argument("query", help="Free-text request, e.g. 'plumbers in Austin under $100'")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Print the JSON response body")
    parser.add_argument("--no-ai", dest="no_ai", action="store_true", help="Skip Gemini and use the built-in summary")
    parser.add_argument("--explain", action="store_true", help="Show the sub-scores behind each Neptune Score")
    parser.add_argument("--limit", type=_positive_int, help="Maximum number of providers to print")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ConfigError as exc:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
        logger.error("Configuration error: %s", exc)
        raise SystemExit(2) from exc

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s - %(message)s")

    engine = SearchEngine(get_catalog())
    try:
        response = run_search(args.query, engine=engine, summarizer=build_summarizer(use_ai=not args.no_ai))
    except ValueError as exc:
        logger.error("Invalid query: %s", exc)
        raise SystemExit(2) from exc
    except Exception as exc:  # pragma: no cover - CLI fallback
        logger.error("Search failed: %s", exc, exc_info=True)
        raise SystemExit(1) from exc

    if args.as_json:
        print(json.dumps(response.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(format_results(engine, response, explain=args.explain, limit=args.limit))


if __name__ == "__main__":
    main()
