import argparse
import asyncio
import json
import logging
import sys

from job_scraper.config.settings import settings
from job_scraper.core.errors import ScraperError
from job_scraper.core.models import ExtractionMode, ScrapeOptions
from job_scraper.core.service import ScraperService

# Configure logging (stderr, so stdout carries only the JSON result)
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract a normalized job posting record from a URL."
    )
    parser.add_argument("url", nargs="?", help="Job posting URL")
    parser.add_argument(
        "--method",
        choices=[mode.value for mode in ExtractionMode],
        default=ExtractionMode.AUTO.value,
        help="Extraction strategy (default: auto)",
    )
    parser.add_argument("--model", default=None, help="LLM model for the AI strategy")
    parser.add_argument(
        "--skip-cache", action="store_true", help="Ignore cached results"
    )
    parser.add_argument(
        "--supported-domains",
        action="store_true",
        help="Print domains with a portal-specific extractor and exit",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Print which strategies apply to the URL and exit",
    )
    args = parser.parse_args(argv)
    if not args.url and not args.supported_domains:
        parser.error("a URL is required")
    return args


async def main(argv=None) -> int:
    """
    Main entry point. Returns the process exit status.
    """
    args = parse_args(argv)
    service = ScraperService()

    try:
        if args.supported_domains:
            print(json.dumps({"domains": service.supported_domains()}, indent=2))
            return 0

        if args.check:
            print(json.dumps(service.can_scrape_report(args.url), indent=2))
            return 0

        options = ScrapeOptions(
            skip_cache=args.skip_cache,
            mode=ExtractionMode(args.method),
            ai_model=args.model,
        )
        try:
            record = await service.scrape(args.url, options)
        except ScraperError as e:
            logger.error(f"Extraction failed: {e.message}")
            print(json.dumps(e.to_dict(), indent=2), file=sys.stderr)
            return 1

        print(json.dumps(record.to_wire(), indent=2, ensure_ascii=False))
        return 0
    finally:
        await service.aclose()


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        pass
