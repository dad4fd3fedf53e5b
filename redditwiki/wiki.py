"""Client for the wiki endpoints of the Reddit API."""

from __future__ import annotations

import dataclasses
import json
import urllib.error
import urllib.request
from collections.abc import Mapping
from typing import Any, Protocol
from urllib.parse import urlencode, urljoin

from redditwiki.models import (
    POST_KIND,
    ListOptions,
    Post,
    WikiPage,
    WikiPageEditRequest,
    WikiPageRevision,
    WikiPageSettings,
    WikiPageSettingsUpdateRequest,
    _thing_data,
)

_REVISION_PREFIX = "WikiRevision_"


class RedditError(Exception):
    """An error response or an unreadable response from the API."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class _Requester(Protocol):
    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, str] | None = None,
        form: Mapping[str, str] | None = None,
    ) -> Any: ...


class HttpClient:
    """Sends requests to the API and decodes the JSON that comes back."""

    def __init__(
        self,
        base_url: str,
        *,
        user_agent: str = "redditwiki",
        access_token: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.user_agent = user_agent
        self.access_token = access_token
        self.timeout = timeout

    def request(
        self,
        method: str,
        path: str,
        params: Mapping[str, str] | None = None,
        form: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request; return the decoded JSON body, or None if it is empty."""
        url = urljoin(self.base_url, path.lstrip("/"))
        if params:
            url += ("&" if "?" in url else "?") + urlencode(params)

        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        data = None
        if form is not None:
            data = urlencode(form).encode("utf-8")
            headers["Content-Type"] = "application/x-www-form-urlencoded"
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        req = urllib.request.Request(url, data=data, headers=headers, method=method)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                body = resp.read()
        except urllib.error.HTTPError as exc:
            detail = exc.read().decode("utf-8", "replace")
            raise RedditError(
                f"{method} {url}: {exc.code} {detail}".rstrip(), status=exc.code
            ) from exc

        if not body.strip():
            return None
        try:
            return json.loads(body)
        except json.JSONDecodeError as exc:
            raise RedditError(f"{method} {url}: invalid JSON in response") from exc


class WikiService:
    """Reads and manages the wiki of a subreddit."""

    def __init__(self, client: _Requester) -> None:
        self.client = client

    def page(self, subreddit: str, page: str) -> WikiPage | None:
        """Get the latest version of a wiki page."""
        return self.page_revision(subreddit, page, "")

    def page_revision(self, subreddit: str, page: str, revision_id: str) -> WikiPage | None:
        """Get a wiki page as it was at a revision; an empty id means the latest."""
        params = {"v": revision_id} if revision_id else None
        thing = self.client.request("GET", f"r/{subreddit}/wiki/{page}", params=params)
        data = _thing_data(thing, "wikipage")
        return WikiPage.from_json(data) if data is not None else None

    def pages(self, subreddit: str) -> list[str] | None:
        """List the names of the wiki pages of a subreddit."""
        thing = self.client.request("GET", f"r/{subreddit}/wiki/pages")
        if not isinstance(thing, Mapping) or thing.get("kind") != "wikipagelisting":
            return None
        return list(thing.get("data") or [])

    def edit(self, request: WikiPageEditRequest) -> None:
        """Edit a wiki page."""
        if request is None:
            raise ValueError("WikiPageEditRequest: cannot be None")
        self.client.request(
            "POST", f"r/{request.subreddit}/api/wiki/edit", form=request.to_form()
        )

    def revert(self, subreddit: str, page: str, revision_id: str) -> None:
        """Revert a wiki page to a revision."""
        self.client.request(
            "POST",
            f"r/{subreddit}/api/wiki/revert",
            form={"page": page, "revision": revision_id},
        )

    def settings(self, subreddit: str, page: str) -> WikiPageSettings | None:
        """Get the settings of a wiki page."""
        thing = self.client.request("GET", f"r/{subreddit}/wiki/settings/{page}")
        return self._settings_from(thing)

    def update_settings(
        self, subreddit: str, page: str, request: WikiPageSettingsUpdateRequest
    ) -> WikiPageSettings | None:
        """Change the settings of a wiki page and return the new settings."""
        if request is None:
            raise ValueError("WikiPageSettingsUpdateRequest: cannot be None")
        thing = self.client.request(
            "POST", f"r/{subreddit}/wiki/settings/{page}", form=request.to_form()
        )
        return self._settings_from(thing)

    def discussions(
        self, subreddit: str, page: str, options: ListOptions | None = None
    ) -> list[Post]:
        """List the posts that discuss a wiki page."""
        params = options.to_params() if options is not None else None
        listing = self.client.request(
            "GET", f"r/{subreddit}/wiki/discussions/{page}", params=params or None
        )
        data = _thing_data(listing, "Listing") or {}
        return [
            Post.from_json(post)
            for post in (_thing_data(child, POST_KIND) for child in data.get("children") or [])
            if post is not None
        ]

    def toggle_visibility(self, subreddit: str, page: str, revision_id: str) -> bool:
        """Toggle whether a revision is public; returns True if it is now hidden."""
        root = self.client.request(
            "POST",
            f"r/{subreddit}/api/wiki/hide",
            form={"page": page, "revision": revision_id},
        )
        return bool(isinstance(root, Mapping) and root.get("status"))

    def revisions(
        self, subreddit: str, options: ListOptions | None = None
    ) -> list[WikiPageRevision]:
        """List revisions of every page in the wiki."""
        return self._revisions(subreddit, "", options)

    def revisions_page(
        self, subreddit: str, page: str, options: ListOptions | None = None
    ) -> list[WikiPageRevision]:
        """List revisions of one page; an empty page name means every page."""
        return self._revisions(subreddit, page, options)

    def allow(self, subreddit: str, page: str, username: str) -> None:
        """Let a user edit a wiki page."""
        self.client.request(
            "POST",
            f"r/{subreddit}/api/wiki/alloweditor/add",
            form={"page": page, "username": username},
        )

    def deny(self, subreddit: str, page: str, username: str) -> None:
        """Stop a user from editing a wiki page."""
        self.client.request(
            "POST",
            f"r/{subreddit}/api/wiki/alloweditor/del",
            form={"page": page, "username": username},
        )

    @staticmethod
    def _settings_from(thing: Any) -> WikiPageSettings | None:
        data = _thing_data(thing, "wikipagesettings")
        return WikiPageSettings.from_json(data) if data is not None else None

    def _revisions(
        self, subreddit: str, page: str, options: ListOptions | None
    ) -> list[WikiPageRevision]:
        path = f"r/{subreddit}/wiki/revisions"
        if page:
            path += "/" + page

        params = None
        if options is not None:
            options = dataclasses.replace(
                options,
                after=_with_revision_prefix(options.after),
                before=_with_revision_prefix(options.before),
            )
            params = options.to_params() or None

        listing = self.client.request("GET", path, params=params)
        data = listing.get("data") if isinstance(listing, Mapping) else None
        children = data.get("children") if isinstance(data, Mapping) else None
        return [WikiPageRevision.from_json(child) for child in children or []]


def _with_revision_prefix(revision_id: str) -> str:
    if revision_id and not revision_id.startswith(_REVISION_PREFIX):
        return _REVISION_PREFIX + revision_id
    return revision_id