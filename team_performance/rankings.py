"""Ranking helpers for the team performance leaderboard."""

from typing import List, Optional

from .models import Member

PODIUM_SIZE = 3
RANK_GLYPHS = ['🏆', '🥈', '🥉']


def podium_order(members: List[Member]) -> List[Member]:
    """Arrange the top three as 2nd, 1st, 3rd (left, center, right).

    Places that do not exist are dropped.
    """
    top = members[:PODIUM_SIZE]
    order = [1, 0, 2]
    return [top[i] for i in order if i < len(top)]


def podium_rank(display_index: int) -> int:
    """Map a podium display position back to the 0-based rank."""
    return [1, 0, 2][display_index]


def rank_label(index: int) -> str:
    """Glyph for the first three ranks, '#n' for the rest."""
    if index < len(RANK_GLYPHS):
        return RANK_GLYPHS[index]
    return f"#{index + 1}"


def find_member(members: List[Member], username: str) -> Optional[Member]:
    for member in members:
        if member.username == username:
            return member
    return None
