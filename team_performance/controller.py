"""View state and controllers for the dashboard and member detail routes.

State changes go through the pure ``update(state, action)`` reducer. The
controllers wrap it with the side effects: issuing fetches and keeping the
URL query string in sync with the active date range.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union
from urllib.parse import parse_qsl, quote, unquote, urlsplit

from .config import DEFAULT_DATE_RANGE, PAGE_SIZE, DashboardConfig
from .date_codec import is_display_date, to_query_param
from .fetcher import ActivityFetcher, FetchResult
from .models import DateRange, Member, MemberActivity
from .pagination import PageSlice, slice_page, total_pages
from .rankings import podium_order

DASHBOARD_PATH = '/'
MEMBER_PATH_PREFIX = '/member/'


class Tab(str, Enum):
    COMMITS = 'commits'
    PULL_REQUESTS = 'pull_requests'
    REVIEWS = 'reviews'


@dataclass(frozen=True)
class ViewState:
    """Everything a rendered view reads. Replaced, never mutated."""
    date_range: DateRange = DEFAULT_DATE_RANGE
    active_tab: Tab = Tab.COMMITS
    commits_page: int = 1
    pull_requests_page: int = 1
    reviews_page: int = 1
    loading: bool = False
    error: Optional[str] = None
    data: Any = None
    latest_seq: int = 0
    page_size: int = PAGE_SIZE
    discard_stale_responses: bool = False

    def page_for(self, tab: Tab) -> int:
        return getattr(self, f"{Tab(tab).value}_page")

    def items_for(self, tab: Tab) -> list:
        """Activity list behind a tab; empty until member activity is loaded."""
        if not isinstance(self.data, MemberActivity):
            return []
        return list(getattr(self.data, Tab(tab).value))

    def page_slice(self, tab: Tab = None) -> PageSlice:
        tab = self.active_tab if tab is None else Tab(tab)
        return slice_page(self.items_for(tab), self.page_for(tab), self.page_size)

    @property
    def members(self) -> List[Member]:
        return list(self.data) if isinstance(self.data, list) else []


# Actions

@dataclass(frozen=True)
class SelectTab:
    tab: Tab


@dataclass(frozen=True)
class ChangeDateRange:
    date_range: DateRange


@dataclass(frozen=True)
class GoToPage:
    tab: Tab
    page: int


@dataclass(frozen=True)
class NextPage:
    pass


@dataclass(frozen=True)
class PreviousPage:
    pass


@dataclass(frozen=True)
class FetchStarted:
    seq: int


@dataclass(frozen=True)
class FetchSucceeded:
    seq: int
    data: Any


@dataclass(frozen=True)
class FetchFailed:
    seq: int
    message: str


Action = Union[SelectTab, ChangeDateRange, GoToPage, NextPage, PreviousPage,
               FetchStarted, FetchSucceeded, FetchFailed]


def _reset_pages(state: ViewState, **changes) -> ViewState:
    return replace(state, commits_page=1, pull_requests_page=1, reviews_page=1, **changes)


def _with_page(state: ViewState, tab: Tab, page: int) -> ViewState:
    pages = total_pages(len(state.items_for(tab)), state.page_size)
    page = max(1, min(page, pages))
    return replace(state, **{f"{Tab(tab).value}_page": page})


def _is_stale(state: ViewState, seq: int) -> bool:
    return state.discard_stale_responses and seq < state.latest_seq


def update(state: ViewState, action: Action) -> ViewState:
    """Return the state that results from applying an action."""
    if isinstance(action, SelectTab):
        # Every tab change resets all three cursors, not only the new tab's
        return _reset_pages(state, active_tab=Tab(action.tab))
    if isinstance(action, ChangeDateRange):
        return _reset_pages(state, date_range=action.date_range)
    if isinstance(action, GoToPage):
        return _with_page(state, action.tab, action.page)
    if isinstance(action, NextPage):
        return _with_page(state, state.active_tab, state.page_for(state.active_tab) + 1)
    if isinstance(action, PreviousPage):
        return _with_page(state, state.active_tab, state.page_for(state.active_tab) - 1)
    if isinstance(action, FetchStarted):
        return replace(state, loading=True, error=None, latest_seq=max(state.latest_seq, action.seq))
    if isinstance(action, FetchSucceeded):
        if _is_stale(state, action.seq):
            logging.debug(f"Ignoring stale response #{action.seq}")
            return state
        return _reset_pages(state, loading=False, error=None, data=action.data)
    if isinstance(action, FetchFailed):
        if _is_stale(state, action.seq):
            logging.debug(f"Ignoring stale failure #{action.seq}")
            return state
        # Data from an earlier successful fetch is kept
        return replace(state, loading=False, error=action.message)
    raise TypeError(f"Unknown action: {action!r}")


class Location:
    """In-memory browser location with replace/push history semantics."""

    def __init__(self, url: str = DASHBOARD_PATH):
        self.history: List[str] = [url]

    @property
    def url(self) -> str:
        return self.history[-1]

    @property
    def path(self) -> str:
        return urlsplit(self.url).path or DASHBOARD_PATH

    @property
    def query(self) -> Dict[str, str]:
        return dict(parse_qsl(urlsplit(self.url).query))

    def push(self, url: str):
        self.history.append(url)

    def replace(self, url: str):
        self.history[-1] = url

    def back(self) -> str:
        if len(self.history) > 1:
            self.history.pop()
        return self.url


def build_url(path: str, query: Dict[str, str]) -> str:
    if not query:
        return path
    encoded = '&'.join(f"{to_query_param(k)}={to_query_param(v)}" for k, v in query.items())
    return f"{path}?{encoded}"


def member_path(username: str) -> str:
    return f"{MEMBER_PATH_PREFIX}{quote(username, safe='')}"


def parse_route(path: str) -> Tuple[str, Optional[str]]:
    """Split a path into (route name, username).

    Raises:
        ValueError: For paths that are neither the dashboard nor a member page
    """
    if path in ('', DASHBOARD_PATH):
        return 'dashboard', None
    if path.startswith(MEMBER_PATH_PREFIX):
        username = unquote(path[len(MEMBER_PATH_PREFIX):].strip('/'))
        if username and '/' not in username:
            return 'member', username
    raise ValueError(f"Unknown route: {path}")


def initial_date_range(query: Dict[str, str], default: DateRange = DEFAULT_DATE_RANGE) -> DateRange:
    """Seed the date range from from/to query values, each falling back to the default."""
    start = query.get('from')
    end = query.get('to')
    return DateRange(
        start if is_display_date(start) else default.start,
        end if is_display_date(end) else default.end,
    )


class ViewController:
    """Drives one page: the team dashboard when subject is None, else a member page."""

    def __init__(self, fetcher: ActivityFetcher, location: Location,
                 config: DashboardConfig = None, subject: str = None):
        self.config = config or DashboardConfig()
        self.fetcher = fetcher
        self.location = location
        self.subject = subject
        self.state = ViewState(
            date_range=initial_date_range(location.query, self.config.default_date_range),
            page_size=self.config.page_size,
            discard_stale_responses=self.config.discard_stale_responses,
        )

    def dispatch(self, action: Action) -> ViewState:
        self.state = update(self.state, action)
        return self.state

    def begin_fetch(self) -> int:
        seq = self.fetcher.next_seq()
        self.dispatch(FetchStarted(seq))
        return seq

    def complete_fetch(self, result: FetchResult) -> ViewState:
        if result.ok:
            return self.dispatch(FetchSucceeded(result.seq, result.data))
        return self.dispatch(FetchFailed(result.seq, result.error))

    def load(self) -> ViewState:
        """Fetch data for the current date range."""
        seq = self.begin_fetch()
        result = self.fetcher.fetch(self.subject, self.state.date_range, seq=seq)
        return self.complete_fetch(result)

    def change_date_range(self, start: str, end: str) -> ViewState:
        """Apply a new range: reset cursors, replace the URL query, refetch."""
        self.dispatch(ChangeDateRange(DateRange(start, end)))
        query = self.location.query
        query['from'] = start
        query['to'] = end
        self.location.replace(build_url(self.location.path, query))
        logging.info(f"Date range changed to {start} - {end}")
        return self.load()

    def select_tab(self, tab: Tab) -> ViewState:
        return self.dispatch(SelectTab(Tab(tab)))

    def next_page(self) -> ViewState:
        return self.dispatch(NextPage())

    def previous_page(self) -> ViewState:
        return self.dispatch(PreviousPage())

    def go_to_page(self, page: int, tab: Tab = None) -> ViewState:
        return self.dispatch(GoToPage(self.state.active_tab if tab is None else Tab(tab), page))

    def podium(self) -> List[Member]:
        return podium_order(self.state.members[:3])

    def open_member(self, username: str) -> str:
        """Navigate to a member's detail page, keeping the active range."""
        url = build_url(member_path(username), self.state.date_range.to_params())
        self.location.push(url)
        return url

    def back_to_dashboard(self) -> str:
        self.location.push(DASHBOARD_PATH)
        return DASHBOARD_PATH


def controller_for_location(location: Location, fetcher: ActivityFetcher,
                            config: DashboardConfig = None) -> ViewController:
    """Create the controller for the route at the current location."""
    _, username = parse_route(location.path)
    return ViewController(fetcher, location, config, subject=username)
