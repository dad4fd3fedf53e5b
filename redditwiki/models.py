"""Data types for wiki pages, revisions, settings and the requests that change them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any

USER_KIND = "t2"
POST_KIND = "t3"


def parse_timestamp(value: Any) -> datetime | None:
    """Convert Unix seconds to an aware UTC datetime.

    None and False (which the API uses for "never") give None.
    """
    if value is None or value is False:
        return None
    if isinstance(value, bool):
        raise ValueError(f"invalid timestamp: {value!r}")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        try:
            seconds = float(value)
        except ValueError:
            raise ValueError(f"invalid timestamp: {value!r}") from None
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    raise TypeError(f"unsupported timestamp type: {type(value).__name__}")


def _thing_data(thing: Any, kind: str) -> Mapping[str, Any] | None:
    """Return the data of a {"kind": ..., "data": ...} object if it has the given kind."""
    if not isinstance(thing, Mapping) or thing.get("kind") != kind:
        return None
    data = thing.get("data")
    return data if isinstance(data, Mapping) else None


def _user_from_thing(thing: Any) -> User | None:
    data = _thing_data(thing, USER_KIND)
    return User.from_json(data) if data is not None else None


class PermissionLevel(IntEnum):
    """Who may edit a particular wiki page."""

    SUBREDDIT_WIKI_PERMISSIONS = 0
    APPROVED_CONTRIBUTORS_ONLY = 1
    MODERATORS_ONLY = 2


@dataclass
class User:
    """A Reddit account."""

    id: str = ""
    name: str = ""
    created: datetime | None = None
    post_karma: int = 0
    comment_karma: int = 0
    is_friend: bool = False
    is_employee: bool = False
    has_verified_email: bool = False
    nsfw: bool = False
    is_suspended: bool = False

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> User:
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            created=parse_timestamp(data.get("created_utc")),
            post_karma=data.get("link_karma", 0),
            comment_karma=data.get("comment_karma", 0),
            is_friend=bool(data.get("is_friend", False)),
            is_employee=bool(data.get("is_employee", False)),
            has_verified_email=bool(data.get("has_verified_email", False)),
            nsfw=bool(data.get("over_18", False)),
            is_suspended=bool(data.get("is_suspended", False)),
        )


@dataclass
class Post:
    """A submission to a subreddit."""

    id: str = ""
    full_id: str = ""
    created: datetime | None = None
    edited: datetime | None = None
    permalink: str = ""
    url: str = ""
    title: str = ""
    body: str = ""
    likes: bool | None = None
    score: int = 0
    upvote_ratio: float = 0.0
    number_of_comments: int = 0
    subreddit_name: str = ""
    subreddit_name_prefixed: str = ""
    subreddit_id: str = ""
    subreddit_subscribers: int = 0
    author: str = ""
    author_id: str = ""
    spoiler: bool = False
    locked: bool = False
    nsfw: bool = False
    is_self_post: bool = False
    saved: bool = False
    stickied: bool = False

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Post:
        return cls(
            id=data.get("id", ""),
            full_id=data.get("name", ""),
            created=parse_timestamp(data.get("created_utc")),
            edited=parse_timestamp(data.get("edited")),
            permalink=data.get("permalink", ""),
            url=data.get("url", ""),
            title=data.get("title", ""),
            body=data.get("selftext", ""),
            likes=data.get("likes"),
            score=data.get("score", 0),
            upvote_ratio=data.get("upvote_ratio", 0.0),
            number_of_comments=data.get("num_comments", 0),
            subreddit_name=data.get("subreddit", ""),
            subreddit_name_prefixed=data.get("subreddit_name_prefixed", ""),
            subreddit_id=data.get("subreddit_id", ""),
            subreddit_subscribers=data.get("subreddit_subscribers", 0),
            author=data.get("author", ""),
            author_id=data.get("author_fullname", ""),
            spoiler=bool(data.get("spoiler", False)),
            locked=bool(data.get("locked", False)),
            nsfw=bool(data.get("over_18", False)),
            is_self_post=bool(data.get("is_self", False)),
            saved=bool(data.get("saved", False)),
            stickied=bool(data.get("stickied", False)),
        )


@dataclass
class WikiPage:
    """A wiki page in a subreddit."""

    content: str = ""
    reason: str = ""
    may_revise: bool = False
    revision_id: str = ""
    revision_date: datetime | None = None
    revision_by: User | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> WikiPage:
        return cls(
            content=data.get("content_md") or "",
            reason=data.get("reason") or "",
            may_revise=bool(data.get("may_revise", False)),
            revision_id=data.get("revision_id") or "",
            revision_date=parse_timestamp(data.get("revision_date")),
            revision_by=_user_from_thing(data.get("revision_by")),
        )


@dataclass
class WikiPageSettings:
    """Visibility and permission settings of a wiki page."""

    permission_level: PermissionLevel = PermissionLevel.SUBREDDIT_WIKI_PERMISSIONS
    listed: bool = False
    editors: list[User] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> WikiPageSettings:
        editors = [
            user
            for user in map(_user_from_thing, data.get("editors") or [])
            if user is not None
        ]
        return cls(
            permission_level=PermissionLevel(data.get("permlevel", 0)),
            listed=bool(data.get("listed", False)),
            editors=editors,
        )


@dataclass
class WikiPageRevision:
    """One revision of a wiki page."""

    id: str = ""
    page: str = ""
    created: datetime | None = None
    reason: str = ""
    hidden: bool = False
    author: User | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> WikiPageRevision:
        return cls(
            id=data.get("id") or "",
            page=data.get("page") or "",
            created=parse_timestamp(data.get("timestamp")),
            reason=data.get("reason") or "",
            hidden=bool(data.get("revision_hidden", False)),
            author=_user_from_thing(data.get("author")),
        )


@dataclass
class WikiPageEditRequest:
    """A request to edit a wiki page. The reason is optional, up to 256 characters."""

    subreddit: str
    page: str
    content: str
    reason: str = ""

    def to_form(self) -> dict[str, str]:
        form = {"page": self.page, "content": self.content}
        if self.reason:
            form["reason"] = self.reason
        return form


@dataclass
class WikiPageSettingsUpdateRequest:
    """A request to change the visibility and permissions of a wiki page."""

    permission_level: PermissionLevel
    listed: bool | None = None

    def to_form(self) -> dict[str, str]:
        form = {"permlevel": str(int(self.permission_level))}
        if self.listed is not None:
            form["listed"] = "true" if self.listed else "false"
        return form


@dataclass
class ListOptions:
    """Paging options for listings."""

    limit: int = 0
    after: str = ""
    before: str = ""

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.limit:
            params["limit"] = str(self.limit)
        if self.after:
            params["after"] = self.after
        if self.before:
            params["before"] = self.before
        return params