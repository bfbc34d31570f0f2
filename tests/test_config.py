"""
Unit tests for environment configuration
"""

from team_performance.config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_DATE_RANGE,
    PAGE_SIZE,
    load_config,
    parse_cookie_header,
)
from team_performance.models import DateRange


class TestLoadConfig:
    """Test cases for load_config."""

    def test_defaults(self):
        config = load_config({})

        assert config.api_base_url == DEFAULT_API_BASE_URL
        assert config.page_size == PAGE_SIZE == 10
        assert config.default_date_range == DEFAULT_DATE_RANGE == DateRange('28/07/2025', '25/08/2025')
        assert config.language == 'english'
        assert config.timeout is None
        assert config.retries == 0
        assert config.discard_stale_responses is False
        assert config.initial_url == '/'
        assert config.cookies == {}

    def test_values_from_env(self):
        config = load_config({
            'STATS_API_BASE_URL': 'http://localhost:3000/',
            'DASHBOARD_PAGE_SIZE': '25',
            'DASHBOARD_DEFAULT_FROM': '01/08/2025',
            'DASHBOARD_DEFAULT_TO': '31/08/2025',
            'DASHBOARD_LANGUAGE': 'Vietnamese',
            'STATS_API_TIMEOUT': '2.5',
            'STATS_API_RETRIES': '3',
            'DISCARD_STALE_RESPONSES': 'yes',
            'DASHBOARD_URL': '/member/namphph',
            'DASHBOARD_COOKIES': 'isLoggedIn=true; theme=dark',
        })

        assert config.api_base_url == 'http://localhost:3000'
        assert config.page_size == 25
        assert config.default_date_range == DateRange('01/08/2025', '31/08/2025')
        assert config.language == 'vietnamese'
        assert config.timeout == 2.5
        assert config.retries == 3
        assert config.discard_stale_responses is True
        assert config.initial_url == '/member/namphph'
        assert config.cookies == {'isLoggedIn': 'true', 'theme': 'dark'}

    def test_invalid_values_fall_back(self, caplog):
        config = load_config({
            'DASHBOARD_PAGE_SIZE': 'ten',
            'STATS_API_RETRIES': '-1',
            'DASHBOARD_DEFAULT_FROM': '2025-08-01',
            'DASHBOARD_LANGUAGE': 'german',
            'STATS_API_TIMEOUT': 'soon',
        })

        assert config.page_size == PAGE_SIZE
        assert config.retries == 0
        assert config.default_date_range == DEFAULT_DATE_RANGE
        assert config.language == 'english'
        assert config.timeout is None
        assert 'DASHBOARD_PAGE_SIZE' in caplog.text


class TestParseCookieHeader:
    def test_ignores_malformed_chunks(self):
        assert parse_cookie_header('a=1; junk; =2; b = x=y') == {'a': '1', 'b': 'x=y'}
