"""Team Performance Dashboard - rankings and member activity from a statistics API."""

from .models import DateRange, Member, Commit, PullRequest, Review, MemberActivity
from .api_client import StatsAPIClient, FetchError, HttpError, FormatError, UnknownError
from .fetcher import ActivityFetcher, FetchResult
from .pagination import PageSlice, slice_page
from .controller import Tab, ViewState, ViewController, Location, update
from .dashboard import Dashboard
from .output import ConsoleRenderer

__all__ = [
    'DateRange',
    'Member',
    'Commit',
    'PullRequest',
    'Review',
    'MemberActivity',
    'StatsAPIClient',
    'FetchError',
    'HttpError',
    'FormatError',
    'UnknownError',
    'ActivityFetcher',
    'FetchResult',
    'PageSlice',
    'slice_page',
    'Tab',
    'ViewState',
    'ViewController',
    'Location',
    'update',
    'Dashboard',
    'ConsoleRenderer',
]
