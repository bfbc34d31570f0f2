"""Statistics API client for team performance and member activity data."""

import logging
from typing import List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import DEFAULT_API_BASE_URL
from .date_codec import to_query_param
from .models import DateRange, Member, MemberActivity

PERFORMANCE_ENDPOINT = '/stat/member-performance'
ACTIVITIES_ENDPOINT = '/stat/member-activities'

PERFORMANCE_FETCH_FAILED = "Failed to fetch member performance data"
ACTIVITY_FETCH_FAILED = "Failed to fetch member activity data"
INVALID_RESPONSE_FORMAT = "Invalid response format"
GENERIC_ERROR = "An error occurred"


class FetchError(Exception):
    """Base class for failures while fetching statistics."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class HttpError(FetchError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class FormatError(FetchError):
    """The response envelope lacks a truthy status flag or a data payload."""


class UnknownError(FetchError):
    """Any other failure, including network errors and undecodable bodies."""


class StatsAPIClient:
    """Handles requests to the statistics service."""

    def __init__(self, base_url: str = DEFAULT_API_BASE_URL, timeout: Optional[float] = None,
                 retries: int = 0):
        """Initialize the statistics API client.

        Args:
            base_url: Root URL of the statistics service
            timeout: Request timeout in seconds (None waits indefinitely)
            retries: Retries for 5xx answers and connection errors
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

        adapter = HTTPAdapter(
            max_retries=Retry(
                total=retries,
                backoff_factor=0.3,
                status_forcelist=[500, 502, 503, 504],
                raise_on_status=False
            )
        )
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)
        self.session.headers.update({'Accept': 'application/json'})

        logging.info(f"Initialized statistics API client for {self.base_url}")

    def build_url(self, endpoint: str, date_range: DateRange, username: str = None) -> str:
        """Build a request URL with URL-encoded query values.

        Display dates are encoded verbatim, so 28/07/2025 becomes 28%2F07%2F2025.
        """
        query = []
        if username is not None:
            query.append(f"username={to_query_param(username)}")
        query.append(f"from={to_query_param(date_range.start)}")
        query.append(f"to={to_query_param(date_range.end)}")
        return f"{self.base_url}{endpoint}?{'&'.join(query)}"

    def _get_data(self, url: str, failure_message: str):
        """GET a URL and unwrap the response envelope.

        Raises:
            HttpError: On a non-success HTTP status
            FormatError: When the envelope has no truthy status or no data
            UnknownError: On network failures or an undecodable body
        """
        logging.debug(f"Fetching {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise UnknownError(str(e) or GENERIC_ERROR) from e

        if not response.ok:
            logging.error(f"Request to {url} failed with status {response.status_code}")
            raise HttpError(failure_message, response.status_code)

        try:
            result = response.json()
        except ValueError as e:
            raise UnknownError(str(e) or GENERIC_ERROR) from e

        if not isinstance(result, dict) or not result.get('status'):
            raise FormatError(INVALID_RESPONSE_FORMAT)

        # An empty list or object is still a valid payload
        data = result.get('data')
        if data is None or (not data and not isinstance(data, (list, dict))):
            raise FormatError(INVALID_RESPONSE_FORMAT)

        return data

    def get_member_performance(self, date_range: DateRange) -> List[Member]:
        """Fetch the ranked team performance list for a date range."""
        url = self.build_url(PERFORMANCE_ENDPOINT, date_range)
        data = self._get_data(url, PERFORMANCE_FETCH_FAILED)
        if not isinstance(data, list):
            raise FormatError(INVALID_RESPONSE_FORMAT)
        members = [Member.from_api(item) for item in data]
        logging.debug(f"Fetched {len(members)} members")
        return members

    def get_member_activities(self, username: str, date_range: DateRange) -> MemberActivity:
        """Fetch commits, pull requests and reviews of one member for a date range."""
        url = self.build_url(ACTIVITIES_ENDPOINT, date_range, username=username)
        data = self._get_data(url, ACTIVITY_FETCH_FAILED)
        if not isinstance(data, dict):
            raise FormatError(INVALID_RESPONSE_FORMAT)
        return MemberActivity.from_api(data)
