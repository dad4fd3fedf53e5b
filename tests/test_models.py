from datetime import datetime, timezone

import pytest

from redditwiki.models import (
    ListOptions,
    PermissionLevel,
    Post,
    User,
    WikiPage,
    WikiPageEditRequest,
    WikiPageRevision,
    WikiPageSettings,
    WikiPageSettingsUpdateRequest,
    parse_timestamp,
)


def _dt(*args):
    return datetime(*args, tzinfo=timezone.utc)


def _ts(*args):
    return _dt(*args).timestamp()


USER_THING = {
    "kind": "t2",
    "data": {
        "id": "164ab8",
        "name": "v_95",
        "created_utc": _ts(2017, 3, 12, 4, 56, 47),
        "link_karma": 691,
        "comment_karma": 22235,
        "has_verified_email": True,
        "over_18": True,
    },
}

EXPECTED_USER = User(
    id="164ab8",
    name="v_95",
    created=_dt(2017, 3, 12, 4, 56, 47),
    post_karma=691,
    comment_karma=22235,
    has_verified_email=True,
    nsfw=True,
)


def test_parse_timestamp_number():
    assert parse_timestamp(_ts(2020, 9, 5, 3, 59, 45)) == _dt(2020, 9, 5, 3, 59, 45)


def test_parse_timestamp_string():
    assert parse_timestamp(str(_ts(2020, 9, 5))) == _dt(2020, 9, 5)


@pytest.mark.parametrize("value", [None, False])
def test_parse_timestamp_empty(value):
    assert parse_timestamp(value) is None


def test_parse_timestamp_rejects_true():
    with pytest.raises(ValueError):
        parse_timestamp(True)


def test_parse_timestamp_rejects_other_types():
    with pytest.raises(TypeError):
        parse_timestamp([1])


def test_user_from_json():
    assert User.from_json(USER_THING["data"]) == EXPECTED_USER


def test_wiki_page_from_json():
    page = WikiPage.from_json(
        {
            "content_md": "test reason",
            "reason": "this is a reason!",
            "may_revise": True,
            "revision_id": "3c4e9fab-ef2c-11ea-90b6-0e9189256887",
            "revision_date": _ts(2020, 9, 5, 3, 59, 45),
            "revision_by": USER_THING,
        }
    )
    assert page == WikiPage(
        content="test reason",
        reason="this is a reason!",
        may_revise=True,
        revision_id="3c4e9fab-ef2c-11ea-90b6-0e9189256887",
        revision_date=_dt(2020, 9, 5, 3, 59, 45),
        revision_by=EXPECTED_USER,
    )


def test_wiki_page_non_user_author_is_dropped():
    page = WikiPage.from_json({"content_md": "x", "revision_by": {"kind": "t3", "data": {}}})
    assert page.revision_by is None
    assert page.content == "x"


def test_wiki_page_settings_keeps_only_users():
    settings = WikiPageSettings.from_json(
        {
            "permlevel": 2,
            "listed": True,
            "editors": [USER_THING, {"kind": "t5", "data": {"id": "abc"}}],
        }
    )
    assert settings.permission_level is PermissionLevel.MODERATORS_ONLY
    assert settings.listed is True
    assert settings.editors == [EXPECTED_USER]


def test_wiki_page_revision_from_json():
    revision = WikiPageRevision.from_json(
        {
            "id": "3b28c343-effb-11ea-859e-0efe313b2cd3",
            "page": "index",
            "timestamp": _ts(2020, 9, 6, 4, 41, 29),
            "reason": "reverted back 1 day",
            "revision_hidden": False,
            "author": USER_THING,
        }
    )
    assert revision == WikiPageRevision(
        id="3b28c343-effb-11ea-859e-0efe313b2cd3",
        page="index",
        created=_dt(2020, 9, 6, 4, 41, 29),
        reason="reverted back 1 day",
        hidden=False,
        author=EXPECTED_USER,
    )


def test_post_from_json_unedited():
    post = Post.from_json(
        {
            "id": "imj8g5",
            "name": "t3_imj8g5",
            "created_utc": _ts(2020, 9, 4, 16, 33, 33),
            "edited": False,
            "title": "test",
            "likes": True,
            "score": 1,
            "author_fullname": "t2_164ab8",
        }
    )
    assert post.full_id == "t3_imj8g5"
    assert post.created == _dt(2020, 9, 4, 16, 33, 33)
    assert post.edited is None
    assert post.likes is True
    assert post.author_id == "t2_164ab8"


def test_edit_request_form():
    request = WikiPageEditRequest("testsubreddit", "testpage", "testcontent", "testreason")
    assert request.to_form() == {
        "page": "testpage",
        "content": "testcontent",
        "reason": "testreason",
    }


def test_edit_request_form_omits_empty_reason():
    request = WikiPageEditRequest("testsubreddit", "testpage", "testcontent")
    assert request.to_form() == {"page": "testpage", "content": "testcontent"}


def test_settings_update_form():
    request = WikiPageSettingsUpdateRequest(PermissionLevel.APPROVED_CONTRIBUTORS_ONLY, listed=False)
    assert request.to_form() == {"permlevel": "1", "listed": "false"}


def test_settings_update_form_always_has_permlevel():
    request = WikiPageSettingsUpdateRequest(PermissionLevel.SUBREDDIT_WIKI_PERMISSIONS)
    assert request.to_form() == {"permlevel": "0"}


def test_list_options_params():
    assert ListOptions(limit=10, after="a", before="b").to_params() == {
        "limit": "10",
        "after": "a",
        "before": "b",
    }
    assert ListOptions().to_params() == {}