#!/usr/bin/env python3
"""
Team Performance Dashboard
Shows team contribution rankings and per-member activity for a date range.
"""

import os
import sys
import logging
from dotenv import load_dotenv

from team_performance.config import load_config
from team_performance.dashboard import Dashboard, LoginRequired

# Configure logging (can be overridden by LOG_LEVEL environment variable)
log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format='%(asctime)s %(levelname)s: %(message)s',
    datefmt='%m/%d/%Y %I:%M:%S %p'
)


def main():
    """Main entry point for the script."""
    # Load environment variables from .env file if it exists
    load_dotenv()

    print("Team Performance Dashboard")
    print("="*80)

    config = load_config()

    # Page to open, e.g. /member/octocat?from=01%2F08%2F2025&to=25%2F08%2F2025
    if 'DASHBOARD_URL' not in os.environ:
        url_input = input("\nEnter page to open [default: /]: ").strip()
        if url_input:
            config.initial_url = url_input

    logging.info(f"Using statistics API at {config.api_base_url}")

    dashboard = Dashboard(config)
    try:
        dashboard.run()
    except LoginRequired as e:
        logging.error(str(e))
        sys.exit(1)
    except ValueError as e:
        logging.error(f"Cannot open {config.initial_url}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
