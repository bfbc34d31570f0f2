"""Data models for team performance statistics."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


COMMIT_MESSAGE_PREVIEW_LENGTH = 50
SHORT_SHA_LENGTH = 7


@dataclass(frozen=True)
class DateRange:
    """A date range in DD/MM/YYYY display form."""
    start: str
    end: str

    def to_params(self) -> Dict[str, str]:
        return {'from': self.start, 'to': self.end}


@dataclass(frozen=True)
class Member:
    """Pre-aggregated performance snapshot for one team member."""
    username: str
    avatar: str = ''
    performance: int = 0
    commit_count: int = 0
    pr_count: int = 0
    review_count: int = 0

    @classmethod
    def from_api(cls, data: Dict) -> 'Member':
        return cls(
            username=data['username'],
            avatar=data.get('avatar') or '',
            performance=data.get('performance') or 0,
            commit_count=data.get('commitCount') or 0,
            pr_count=data.get('prCount') or 0,
            review_count=data.get('reviewCount') or 0,
        )


@dataclass(frozen=True)
class Commit:
    """A commit authored by a member."""
    id: str
    sha: str
    repo: str
    owner: str
    author: str
    date: str
    message: str
    url: str
    author_email: str = ''

    @classmethod
    def from_api(cls, data: Dict) -> 'Commit':
        raw = data.get('commit_raw') or {}
        return cls(
            id=str(data['id']),
            sha=data.get('sha') or '',
            repo=data.get('repo') or '',
            owner=data.get('owner') or '',
            author=data.get('author_name') or '',
            date=data.get('date') or '',
            message=data.get('message') or '',
            url=raw.get('html_url') or '',
            author_email=data.get('author_email') or '',
        )

    @property
    def short_sha(self) -> str:
        return self.sha[:SHORT_SHA_LENGTH]

    @property
    def summary(self) -> str:
        """Commit message cut to the preview length, with an ellipsis when cut."""
        if len(self.message) > COMMIT_MESSAGE_PREVIEW_LENGTH:
            return f"{self.message[:COMMIT_MESSAGE_PREVIEW_LENGTH]}..."
        return self.message


@dataclass(frozen=True)
class PullRequest:
    """A pull request opened by a member."""
    id: str
    repo: str
    owner: str
    title: str
    state: str
    created_at: str
    url: str
    updated_at: Optional[str] = None
    closed_at: Optional[str] = None
    merged_at: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict) -> 'PullRequest':
        raw = data.get('pr_raw') or {}
        return cls(
            id=str(data['pr_id']),
            repo=data.get('repo') or '',
            owner=data.get('owner') or '',
            title=raw.get('title') or '',
            state=raw.get('state') or '',
            created_at=raw.get('created_at') or '',
            url=raw.get('html_url') or '',
            updated_at=raw.get('updated_at'),
            closed_at=raw.get('closed_at'),
            merged_at=raw.get('merged_at'),
        )


@dataclass(frozen=True)
class Review:
    """A review left by a member on a pull request."""
    id: str
    repo: str
    owner: str
    pr_id: str
    date: str
    url: str

    @classmethod
    def from_api(cls, data: Dict) -> 'Review':
        return cls(
            id=str(data['id']),
            repo=data.get('repo') or '',
            owner=data.get('owner') or '',
            pr_id=str(data.get('pr_id') or ''),
            date=data.get('date') or '',
            url=data.get('html_url') or '',
        )


@dataclass(frozen=True)
class MemberActivity:
    """Per-member activity bundle for a date range."""
    username: str
    start: str
    end: str
    commits: List[Commit] = field(default_factory=list)
    pull_requests: List[PullRequest] = field(default_factory=list)
    reviews: List[Review] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict) -> 'MemberActivity':
        # reviews is optional in the payload
        return cls(
            username=data.get('username') or '',
            start=data.get('from') or '',
            end=data.get('to') or '',
            commits=[Commit.from_api(c) for c in data.get('commits') or []],
            pull_requests=[PullRequest.from_api(p) for p in data.get('pull_requests') or []],
            reviews=[Review.from_api(r) for r in data.get('reviews') or []],
        )
