"""
Command line interface.

    tornado-stats --url "http://www.spc.noaa.gov/climo/online/monthly/newm.html"
    python -m tornado_stats --url ...

Fetches the page, scans the monthly table and prints the dataset as JSON.
Handled failures (fetch errors, missing table, malformed rows) print a
message and exit 0; anything else propagates.
"""

from typing import List, Optional
import argparse
import json
import logging

from .config import configure_logging
from .errors import FetchError, TornadoStatsError
from .ingestion.fetcher import fetch_page
from .processing.table_parser import process

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="tornado-stats",
        description="Scrape monthly tornado counts, deaths and killer tornadoes from a statistics page.",
    )
    ap.add_argument("--url", required=True, help="Page containing the monthly tornado table")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging()

    try:
        body = fetch_page(args.url)
    except FetchError as exc:
        logger.error(str(exc))
        print(exc.message)
        return 0

    try:
        dataset = process(body)
    except TornadoStatsError as exc:
        logger.error(f"Could not read the tornado table from {args.url}: {exc}")
        print(f"Error: {exc}")
        return 0

    print(json.dumps(dataset.as_dict(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
