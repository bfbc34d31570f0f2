"""
Unit tests for ActivityFetcher
"""

import pytest
from unittest.mock import Mock

from team_performance.api_client import FormatError, HttpError
from team_performance.fetcher import ActivityFetcher
from team_performance.models import DateRange, Member

RANGE = DateRange('28/07/2025', '25/08/2025')


@pytest.fixture
def api_client():
    return Mock()


@pytest.fixture
def fetcher(api_client):
    return ActivityFetcher(api_client)


class TestFetchRouting:
    """Test cases for choosing the endpoint."""

    def test_no_subject_fetches_team_performance(self, fetcher, api_client):
        api_client.get_member_performance.return_value = [Member('a')]

        result = fetcher.fetch(None, RANGE)

        api_client.get_member_performance.assert_called_once_with(RANGE)
        api_client.get_member_activities.assert_not_called()
        assert result.ok
        assert result.data == [Member('a')]

    def test_subject_fetches_member_activities(self, fetcher, api_client):
        fetcher.fetch('namphph', RANGE)

        api_client.get_member_activities.assert_called_once_with('namphph', RANGE)


class TestFetchErrors:
    """Test cases for errors collapsing into results."""

    def test_http_error_becomes_message(self, fetcher, api_client):
        api_client.get_member_activities.side_effect = HttpError('Failed to fetch member activity data', 500)

        result = fetcher.fetch('namphph', RANGE)

        assert not result.ok
        assert result.error == 'Failed to fetch member activity data'
        assert fetcher.error == result.error

    def test_format_error_becomes_message(self, fetcher, api_client):
        api_client.get_member_performance.side_effect = FormatError('Invalid response format')

        assert fetcher.fetch(None, RANGE).error == 'Invalid response format'

    def test_unexpected_exception_becomes_message(self, fetcher, api_client):
        api_client.get_member_performance.side_effect = KeyError('username')

        result = fetcher.fetch(None, RANGE)

        assert not result.ok
        assert 'username' in result.error

    def test_exception_without_message_uses_generic_text(self, fetcher, api_client):
        api_client.get_member_performance.side_effect = RuntimeError()

        assert fetcher.fetch(None, RANGE).error == 'An error occurred'


class TestLoadingFlag:
    """Test cases for loading state on every exit path."""

    def test_loading_true_during_request(self, fetcher, api_client):
        seen = []
        api_client.get_member_performance.side_effect = lambda r: seen.append(fetcher.loading) or []

        fetcher.fetch(None, RANGE)

        assert seen == [True]
        assert fetcher.loading is False

    def test_loading_reset_after_failure(self, fetcher, api_client):
        api_client.get_member_performance.side_effect = HttpError('boom')

        fetcher.fetch(None, RANGE)

        assert fetcher.loading is False


class TestSequenceNumbers:
    """Test cases for request sequence stamping."""

    def test_each_call_gets_a_higher_number(self, fetcher):
        first = fetcher.fetch(None, RANGE)
        second = fetcher.fetch(None, RANGE)

        assert second.seq > first.seq
        assert fetcher.latest_seq == second.seq

    def test_explicit_seq_is_used(self, fetcher):
        seq = fetcher.next_seq()

        assert fetcher.fetch(None, RANGE, seq=seq).seq == seq
