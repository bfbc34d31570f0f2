"""
Dashboard configuration loaded from environment variables.

Values can also come from a .env file; the entry script calls load_dotenv()
before load_config().
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .date_codec import is_display_date
from .models import DateRange

DEFAULT_API_BASE_URL = "https://performance-github.onrender.com"
PAGE_SIZE = 10
DEFAULT_DATE_RANGE = DateRange("28/07/2025", "25/08/2025")
DEFAULT_LANGUAGE = 'english'
SUPPORTED_LANGUAGES = ('english', 'vietnamese')


@dataclass
class DashboardConfig:
    """Settings shared by the API client, controllers and renderer."""
    api_base_url: str = DEFAULT_API_BASE_URL
    page_size: int = PAGE_SIZE
    default_date_range: DateRange = DEFAULT_DATE_RANGE
    language: str = DEFAULT_LANGUAGE
    timeout: Optional[float] = None
    retries: int = 0
    discard_stale_responses: bool = False
    initial_url: str = '/'
    cookies: Dict[str, str] = field(default_factory=dict)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ('true', '1', 'yes')


def _parse_int(env: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = env.get(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logging.warning(f"Invalid {name} value '{raw}', using default: {default}")
        return default
    if value < minimum:
        logging.warning(f"{name} must be >= {minimum}, using default: {default}")
        return default
    return value


def parse_cookie_header(header: str) -> Dict[str, str]:
    """Parse a 'name=value; other=value' cookie string."""
    cookies = {}
    for chunk in header.split(';'):
        if '=' not in chunk:
            continue
        name, value = chunk.split('=', 1)
        if name.strip():
            cookies[name.strip()] = value.strip()
    return cookies


def load_config(env: Mapping[str, str] = None) -> DashboardConfig:
    """Build a DashboardConfig from environment variables.

    Invalid values are logged and replaced with their defaults.
    """
    env = os.environ if env is None else env
    config = DashboardConfig()

    base_url = env.get('STATS_API_BASE_URL', '').strip()
    if base_url:
        config.api_base_url = base_url.rstrip('/')

    config.page_size = _parse_int(env, 'DASHBOARD_PAGE_SIZE', PAGE_SIZE, minimum=1)
    config.retries = _parse_int(env, 'STATS_API_RETRIES', 0, minimum=0)

    default_from = env.get('DASHBOARD_DEFAULT_FROM', DEFAULT_DATE_RANGE.start).strip()
    default_to = env.get('DASHBOARD_DEFAULT_TO', DEFAULT_DATE_RANGE.end).strip()
    if is_display_date(default_from) and is_display_date(default_to):
        config.default_date_range = DateRange(default_from, default_to)
    else:
        logging.warning(
            f"Invalid default date range '{default_from}' - '{default_to}', "
            f"using {DEFAULT_DATE_RANGE.start} - {DEFAULT_DATE_RANGE.end}"
        )

    language = env.get('DASHBOARD_LANGUAGE', DEFAULT_LANGUAGE).strip().lower()
    if language not in SUPPORTED_LANGUAGES:
        logging.warning(f"Invalid language '{language}', using '{DEFAULT_LANGUAGE}'")
        language = DEFAULT_LANGUAGE
    config.language = language

    timeout = env.get('STATS_API_TIMEOUT', '').strip()
    if timeout:
        try:
            config.timeout = float(timeout)
        except ValueError:
            logging.warning(f"Invalid STATS_API_TIMEOUT value '{timeout}', requests will not time out")

    config.discard_stale_responses = _parse_bool(env.get('DISCARD_STALE_RESPONSES', 'false'))
    config.initial_url = env.get('DASHBOARD_URL', '/').strip() or '/'
    config.cookies = parse_cookie_header(env.get('DASHBOARD_COOKIES', ''))

    return config
