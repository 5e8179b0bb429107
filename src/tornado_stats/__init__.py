"""
tornado_stats
=============

Scrapes the monthly tornado statistics table (count, deaths, killer
tornadoes for four years) from a single HTML page.

- Fetching lives in `tornado_stats/ingestion/fetcher.py`.
- Table scanning lives in `tornado_stats/processing/table_parser.py`.
- The command line entry point is `tornado_stats/cli.py`.
"""

__version__ = "0.1.0"
