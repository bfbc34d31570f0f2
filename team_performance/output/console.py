"""Console output functions for ConsoleRenderer."""

from ..controller import Tab, ViewState
from ..date_codec import format_timestamp
from ..pagination import PageSlice
from ..rankings import podium_order, podium_rank, rank_label
from .formatter_base import BOLD, CYAN, GREEN, RED, YELLOW

TAB_TITLES = {
    Tab.COMMITS: 'Commits',
    Tab.PULL_REQUESTS: 'Pull Requests',
    Tab.REVIEWS: 'Reviews',
}


def render(self, state: ViewState, username: str = None):
    """Print whichever view the state calls for: loading, error or data."""
    if username:
        if state.loading:
            print(self._message('loading_member'))
        elif state.error:
            self.render_error(state.error)
        else:
            self.render_member_detail(state, username)
        return

    # The dashboard keeps showing loaded members during a refresh
    if state.loading and not state.members:
        print(self._message('loading_dashboard'))
    elif state.error:
        self.render_error(state.error)
    else:
        self.render_dashboard(state)


def render_error(self, message: str):
    print("\n" + "="*80)
    print(self._color("Error", RED + BOLD))
    print(message)
    print(f"\n[b] {self._message('back_to_dashboard')}")
    print("="*80)


def render_dashboard(self, state: ViewState):
    """Print the podium and the complete rankings."""
    print("\n" + "="*80)
    print(self._color("Ranks", BOLD))
    print(f"Team Performance ({state.date_range.start} - {state.date_range.end})")
    print("="*80)

    members = state.members
    if not members:
        print(f"\n{self._message('empty_members')}")
        return

    self._render_podium(members)
    self._render_rankings(members)


def _render_podium(self, members: list):
    print(f"\n{self._color('Top Performers', BOLD)}")
    cells = []
    for display_index, member in enumerate(podium_order(members)):
        rank = podium_rank(display_index)
        cells.append(f"{rank_label(rank)} {member.username} ({member.performance} points)")
    print("   ".join(cells))


def _render_rankings(self, members: list):
    print(f"\n{'Rank':<6} {'Developer':<24} {'Points':>8} {'Commits':>8} {'PRs':>6} {'Reviews':>8}")
    print('-'*66)
    for index, member in enumerate(members):
        points = self._color(f"{member.performance:>8}", CYAN)
        print(f"{rank_label(index):<6} {member.username:<24} {points} "
              f"{member.commit_count:>8} {member.pr_count:>6} {member.review_count:>8}")


def render_member_detail(self, state: ViewState, username: str):
    """Print the member header, tab bar and the active tab's current page."""
    print("\n" + "="*80)
    print(self._color(username, BOLD))
    print(f"Performance Details ({state.date_range.start} - {state.date_range.end})")
    print("="*80)

    self._render_tabs(state)
    self._render_tab_table(state)


def _render_tabs(self, state: ViewState):
    labels = []
    for tab, title in TAB_TITLES.items():
        label = f"{title} ({len(state.items_for(tab))})"
        if tab == state.active_tab:
            label = self._color(f"[{label}]", GREEN + BOLD)
        labels.append(label)
    print("\n" + "  ".join(labels))


def _render_tab_table(self, state: ViewState):
    tab = state.active_tab
    if not state.items_for(tab):
        print(f"\n{self._message('empty_' + tab.value)}")
        return

    page = state.page_slice(tab)
    if tab == Tab.COMMITS:
        print(f"\n{'Message':<54} {'Repository':<30} {'Date':<24} {'SHA':<8} Link")
        for commit in page.page_items:
            print(f"{commit.summary:<54} {commit.owner + '/' + commit.repo:<30} "
                  f"{format_timestamp(commit.date):<24} {commit.short_sha:<8} {commit.url}")
    elif tab == Tab.PULL_REQUESTS:
        print(f"\n{'Title':<54} {'Repository':<30} {'State':<8} {'Created':<24} Link")
        for pr in page.page_items:
            state_color = YELLOW if pr.state == 'closed' else GREEN
            print(f"{pr.title:<54} {pr.owner + '/' + pr.repo:<30} "
                  f"{self._color(f'{pr.state:<8}', state_color)} "
                  f"{format_timestamp(pr.created_at):<24} {pr.url}")
    else:
        print(f"\n{'PR ID':<12} {'Repository':<30} {'Date':<24} Link")
        for review in page.page_items:
            print(f"{review.pr_id:<12} {review.owner + '/' + review.repo:<30} "
                  f"{format_timestamp(review.date):<24} {review.url}")

    self._render_pager(page)


def _render_pager(self, page: PageSlice):
    if not page.show_pager:
        return
    previous = "[p] Previous" if page.has_previous else "   Previous"
    following = "[n] Next" if page.has_next else "   Next"
    print(f"\n{previous}   Page {page.page} of {page.total_pages}   {following}")
