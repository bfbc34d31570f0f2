"""Interactive team performance dashboard."""

import logging
from typing import Optional

from .api_client import StatsAPIClient
from .config import DashboardConfig
from .controller import Location, Tab, ViewController, controller_for_location
from .date_codec import DateFormatError, from_input_value, is_display_date, is_ordered, to_input_value
from .fetcher import ActivityFetcher
from .output import ConsoleRenderer
from .rankings import find_member
from .route_guard import LOGIN_PATH, resolve_redirect

HELP_TEXT = """Commands:
  d <from> <to>   change the date range (DD/MM/YYYY or YYYY-MM-DD)
  m <username>    open a member's details
  t <tab>         switch tab: commits, pull_requests, reviews
  n / p           next / previous page
  g <page>        go to a page
  b               back to the dashboard
  r               reload
  q               quit"""


def normalize_date(value: str) -> str:
    """Turn display or date-picker input into a zero-padded DD/MM/YYYY date."""
    if is_display_date(value):
        return from_input_value(to_input_value(value))
    return from_input_value(value)


class LoginRequired(Exception):
    """Raised when the route guard sends the user to the login page."""


class Dashboard:
    """Routes commands to the controller of the current page and renders it."""

    def __init__(self, config: DashboardConfig = None, api_client: StatsAPIClient = None,
                 renderer: ConsoleRenderer = None):
        """Initialize the dashboard.

        Args:
            config: Dashboard settings (defaults when omitted)
            api_client: Client for the statistics service
            renderer: Console renderer for the views
        """
        self.config = config or DashboardConfig()
        self.api_client = api_client or StatsAPIClient(
            self.config.api_base_url, timeout=self.config.timeout, retries=self.config.retries
        )
        self.fetcher = ActivityFetcher(self.api_client)
        self.renderer = renderer or ConsoleRenderer(self.config.language)
        self.location = Location(self.config.initial_url)
        self.controller: Optional[ViewController] = None

    def open(self) -> ViewController:
        """Mount the page at the current location and issue its initial fetch.

        Raises:
            LoginRequired: If the login cookie is missing
        """
        redirect = resolve_redirect(self.location.path, self.config.cookies)
        if redirect == LOGIN_PATH:
            raise LoginRequired("Not logged in: set isLoggedIn=true in DASHBOARD_COOKIES")
        if redirect:
            self.location.replace(redirect)

        self.controller = controller_for_location(self.location, self.fetcher, self.config)
        logging.info(f"Opened {self.location.url}")
        self.controller.load()
        return self.controller

    def render(self):
        self.renderer.render(self.controller.state, self.controller.subject)

    def handle_command(self, line: str) -> bool:
        """Apply one command. Returns False when the user quits."""
        parts = line.split()
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]

        if command == 'q':
            return False
        if command in ('h', 'help', '?'):
            print(HELP_TEXT)
            return True

        try:
            self._dispatch(command, args)
        except (DateFormatError, ValueError) as e:
            print(f"Invalid input: {e}")
            return True
        self.render()
        return True

    def _dispatch(self, command: str, args: list):
        controller = self.controller
        if command == 'd':
            if len(args) != 2:
                raise ValueError("usage: d <from> <to>")
            start, end = normalize_date(args[0]), normalize_date(args[1])
            if not is_ordered(start, end):
                logging.warning(f"Start date {start} is after end date {end}")
            controller.change_date_range(start, end)
        elif command == 'm':
            if len(args) != 1:
                raise ValueError("usage: m <username>")
            if controller.state.members and find_member(controller.state.members, args[0]) is None:
                logging.warning(f"User '{args[0]}' is not in the current rankings")
            controller.open_member(args[0])
            self.open()
        elif command == 'b':
            controller.back_to_dashboard()
            self.open()
        elif command == 't':
            if len(args) != 1:
                raise ValueError("usage: t <commits|pull_requests|reviews>")
            controller.select_tab(Tab(args[0].lower()))
        elif command == 'n':
            controller.next_page()
        elif command == 'p':
            controller.previous_page()
        elif command == 'g':
            if len(args) != 1:
                raise ValueError("usage: g <page>")
            controller.go_to_page(int(args[0]))
        elif command == 'r':
            controller.load()
        else:
            raise ValueError(f"unknown command '{command}'")

    def run(self, input_func=input):
        """Run the command loop until the user quits or input ends."""
        self.open()
        self.render()
        print("\nType 'h' for help.")
        while True:
            try:
                line = input_func("> ")
            except EOFError:
                break
            if not self.handle_command(line):
                break
