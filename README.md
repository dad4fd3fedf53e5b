# redditwiki

A small client for the wiki endpoints of the Reddit API. It reads and edits
wiki pages, their settings, revisions and discussions, and manages who may
edit a page. It uses only the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `redditwiki.models`: dataclasses for the data the API returns
  (`WikiPage`, `WikiPageSettings`, `WikiPageRevision`, `User`, `Post`), the
  `PermissionLevel` enum, the requests that change a page
  (`WikiPageEditRequest`, `WikiPageSettingsUpdateRequest`), paging options
  (`ListOptions`) and `parse_timestamp`, which turns Unix seconds into an
  aware UTC `datetime`.
- `redditwiki.wiki`: `HttpClient`, which sends requests and decodes the JSON
  body, `WikiService`, which calls the wiki endpoints through it, and
  `RedditError`.

## Usage

```python
from redditwiki.wiki import HttpClient, WikiService
from redditwiki.models import (
    ListOptions,
    PermissionLevel,
    WikiPageEditRequest,
    WikiPageSettingsUpdateRequest,
)

client = HttpClient(
    "https://oauth.reddit.com",
    user_agent="my-wiki-tool",
    access_token="token",
)
wiki = WikiService(client)

page = wiki.page("mysubreddit", "index")
if page is not None:
    print(page.content, page.revision_by.name if page.revision_by else None)

old = wiki.page_revision("mysubreddit", "index", "some-revision-id")

print(wiki.pages("mysubreddit"))

wiki.edit(WikiPageEditRequest(
    subreddit="mysubreddit",
    page="index",
    content="# Welcome",
    reason="initial version",
))

wiki.revert("mysubreddit", "index", "some-revision-id")

settings = wiki.update_settings(
    "mysubreddit",
    "index",
    WikiPageSettingsUpdateRequest(
        permission_level=PermissionLevel.APPROVED_CONTRIBUTORS_ONLY,
        listed=False,
    ),
)

for revision in wiki.revisions_page("mysubreddit", "index", ListOptions(limit=10)):
    print(revision.id, revision.reason)

for post in wiki.discussions("mysubreddit", "index"):
    print(post.title, post.permalink)

hidden = wiki.toggle_visibility("mysubreddit", "index", "some-revision-id")

wiki.allow("mysubreddit", "index", "someuser")
wiki.deny("mysubreddit", "index", "someuser")
```

### Behaviour worth knowing

- `HttpClient(base_url, *, user_agent="redditwiki", access_token=None,
  timeout=30.0)` sends a bearer `Authorization` header when an access token
  is given. Query parameters and form bodies are URL-encoded. An empty
  response body gives `None`.
- An HTTP error status is raised as `RedditError` with its `status` set;
  a body that is not valid JSON is raised as `RedditError` too.
- `edit` and `update_settings` raise `ValueError` when the request is `None`.
- `page`, `page_revision`, `pages`, `settings` and `update_settings` return
  `None` when the response is not of the expected kind.
- `toggle_visibility` returns `True` when the revision is now hidden.
- Revision cursors passed in `ListOptions.after` and `ListOptions.before` to
  `revisions` and `revisions_page` are given the `WikiRevision_` prefix when
  it is missing; the options object passed in is not changed.
- `WikiService` accepts any object with a `request(method, path, params=None,
  form=None)` method, so a stand-in client can be used in tests.

## What it does not do

- It does not obtain access tokens: you pass one in, and there is no OAuth
  flow, token refresh or rate-limit handling.
- It covers only the wiki endpoints; there is no client for posts, comments,
  users or other parts of the API, and no command-line program.
- Listings are fetched one page at a time; it does not follow `after`
  cursors on its own.