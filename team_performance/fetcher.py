"""Activity fetcher that tracks loading/error/data state around API calls."""

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Optional

from .api_client import GENERIC_ERROR, FetchError, StatsAPIClient
from .models import DateRange


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch, stamped with the sequence number it was issued under."""
    seq: int
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ActivityFetcher:
    """Fetches aggregate performance or single-member activity.

    Every call is independent: nothing is de-duplicated or cancelled. Each call
    gets a new sequence number so callers can tell stale results apart.
    """

    def __init__(self, api_client: StatsAPIClient):
        self.api_client = api_client
        self.loading = False
        self.error: Optional[str] = None
        self.data: Any = None
        self._counter = itertools.count(1)
        self.latest_seq = 0

    def next_seq(self) -> int:
        """Reserve the sequence number for the next request."""
        self.latest_seq = next(self._counter)
        return self.latest_seq

    def fetch(self, subject: Optional[str], date_range: DateRange, seq: int = None) -> FetchResult:
        """Fetch data for the subject (or the whole team when subject is None).

        Errors never propagate; they come back as FetchResult.error.
        """
        if seq is None:
            seq = self.next_seq()
        self.loading = True
        self.error = None
        try:
            if subject:
                data = self.api_client.get_member_activities(subject, date_range)
            else:
                data = self.api_client.get_member_performance(date_range)
            self.data = data
            return FetchResult(seq, data=data)
        except FetchError as e:
            logging.error(f"Fetch #{seq} for {subject or 'team'} failed: {e.message}")
            self.error = e.message
            return FetchResult(seq, error=e.message)
        except Exception as e:
            logging.error(f"Fetch #{seq} for {subject or 'team'} failed: {e}", exc_info=True)
            self.error = str(e) or GENERIC_ERROR
            return FetchResult(seq, error=self.error)
        finally:
            self.loading = False
