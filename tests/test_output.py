"""
Unit tests for ConsoleRenderer
"""

import pytest

from team_performance.controller import Tab, ViewState
from team_performance.models import Commit, DateRange, Member, MemberActivity, PullRequest
from team_performance.output import ConsoleRenderer


def make_activity(commits=0, pull_requests=0):
    return MemberActivity(
        username='namphph', start='28/07/2025', end='25/08/2025',
        commits=[Commit(str(i), f"abcdef{i:04d}", 'api', 'acme', 'a', '2025-08-25T13:59:50',
                        f"commit number {i}", f"https://github.com/acme/api/commit/{i}")
                 for i in range(commits)],
        pull_requests=[PullRequest(str(i), 'web', 'acme', f"PR {i}", 'open', '2025-08-01T09:00:00Z', '')
                       for i in range(pull_requests)],
    )


@pytest.fixture
def renderer():
    return ConsoleRenderer(use_color=False)


class TestDashboardRendering:
    """Test cases for the aggregate view."""

    def test_rankings_and_podium(self, renderer, capsys):
        members = [Member('alice', performance=30), Member('bob', performance=20),
                   Member('carol', performance=10), Member('dave', performance=5)]
        renderer.render(ViewState(data=members))

        output = capsys.readouterr().out
        assert 'Top Performers' in output
        podium_line = output.split('Top Performers')[1].splitlines()[1]
        assert podium_line.index('bob') < podium_line.index('alice') < podium_line.index('carol')
        assert '#4' in output
        assert '28/07/2025 - 25/08/2025' in output

    def test_empty_members(self, renderer, capsys):
        renderer.render(ViewState(data=[]))
        assert 'No member data in this time range' in capsys.readouterr().out

    def test_loading_without_data(self, renderer, capsys):
        renderer.render(ViewState(loading=True))
        assert 'Loading...' in capsys.readouterr().out

    def test_refresh_keeps_members_visible(self, renderer, capsys):
        renderer.render(ViewState(loading=True, data=[Member('alice')]))
        output = capsys.readouterr().out
        assert 'alice' in output
        assert 'Loading...' not in output

    def test_error_panel(self, renderer, capsys):
        renderer.render(ViewState(error='Invalid response format'))
        output = capsys.readouterr().out
        assert 'Error' in output
        assert 'Invalid response format' in output
        assert 'Back to Dashboard' in output


class TestMemberRendering:
    """Test cases for the member detail view."""

    def test_tab_counts(self, renderer, capsys):
        renderer.render(ViewState(data=make_activity(commits=3, pull_requests=2)), 'namphph')
        output = capsys.readouterr().out
        assert 'Commits (3)' in output
        assert 'Pull Requests (2)' in output
        assert 'Reviews (0)' in output

    def test_commit_rows(self, renderer, capsys):
        renderer.render(ViewState(data=make_activity(commits=1)), 'namphph')
        output = capsys.readouterr().out
        assert 'commit number 0' in output
        assert 'acme/api' in output
        assert 'abcdef0' in output
        assert 'Aug 25, 2025, 01:59 PM' in output

    def test_pager_shown_only_with_multiple_pages(self, renderer, capsys):
        renderer.render(ViewState(data=make_activity(commits=10)), 'namphph')
        assert 'Page 1 of' not in capsys.readouterr().out

        renderer.render(ViewState(data=make_activity(commits=11)), 'namphph')
        assert 'Page 1 of 2' in capsys.readouterr().out

    def test_empty_tab_message(self, renderer, capsys):
        renderer.render(ViewState(data=make_activity(), active_tab=Tab.REVIEWS), 'namphph')
        assert 'No reviews in this time range' in capsys.readouterr().out

    def test_vietnamese_empty_tab_message(self, capsys):
        renderer = ConsoleRenderer('vietnamese', use_color=False)
        renderer.render(ViewState(data=make_activity()), 'namphph')
        assert 'Không có commit nào trong khoảng thời gian này' in capsys.readouterr().out

    def test_member_loading(self, renderer, capsys):
        renderer.render(ViewState(loading=True, data=make_activity(commits=2)), 'namphph')
        assert 'Loading member details...' in capsys.readouterr().out

    def test_pull_request_tab(self, renderer, capsys):
        renderer.render(ViewState(data=make_activity(pull_requests=1), active_tab=Tab.PULL_REQUESTS,
                                  date_range=DateRange('01/08/2025', '15/08/2025')), 'namphph')
        output = capsys.readouterr().out
        assert 'PR 0' in output
        assert 'open' in output
        assert '01/08/2025 - 15/08/2025' in output

    def test_null_pull_request_title_renders_empty(self, renderer, capsys):
        activity = MemberActivity.from_api({
            'username': 'namphph',
            'commits': [],
            'pull_requests': [{'pr_id': 7, 'repo': 'web', 'owner': 'acme',
                               'pr_raw': {'title': None, 'state': 'open', 'created_at': None,
                                          'html_url': 'https://github.com/acme/web/pull/7'}}],
        })
        renderer.render(ViewState(data=activity, active_tab=Tab.PULL_REQUESTS), 'namphph')
        output = capsys.readouterr().out
        assert 'acme/web' in output
        assert 'https://github.com/acme/web/pull/7' in output

    def test_null_review_date_renders_empty(self, renderer, capsys):
        activity = MemberActivity.from_api({
            'username': 'namphph',
            'commits': [],
            'pull_requests': [],
            'reviews': [{'id': 'r1', 'repo': 'web', 'owner': 'acme', 'pr_id': '7',
                         'date': None, 'html_url': None}],
        })
        renderer.render(ViewState(data=activity, active_tab=Tab.REVIEWS), 'namphph')
        output = capsys.readouterr().out
        assert 'Reviews (1)' in output
        assert 'acme/web' in output


class TestColor:
    def test_color_codes_toggle(self):
        assert ConsoleRenderer(use_color=False)._color('x', '\033[92m') == 'x'
        assert ConsoleRenderer()._color('x', '\033[92m') == '\033[92mx\033[0m'
