"""开放版本文章编辑页路由测试."""

import pytest


def _update_form(**overrides):
    form = {
        "initialSlug": "my-first-post",
        "title": "My First Post",
        "slug": "my-first-post",
        "markdown": "# First",
    }
    form.update(overrides)
    return form


@pytest.mark.unit
def test_get_renders_form_prefilled_from_post(open_client):
    response = open_client.get("/posts/admin/my-first-post")

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert 'name="initialSlug" value="my-first-post"' in html
    assert 'value="My First Post"' in html
    assert "# First</textarea>" in html
    assert 'data-submit-tracking="form"' in html
    assert 'data-busy-label="Updating..."' in html
    assert ">Update Post</button>" in html
    assert ">Delete Post</button>" in html
    assert "Deleting..." not in html
    assert "<dialog" not in html


@pytest.mark.unit
def test_form_fields_leave_empty_value_checks_to_the_server(open_client):
    html = open_client.get("/posts/admin/my-first-post").get_data(as_text=True)

    assert 'id="field-title"' in html
    assert 'id="field-markdown"' in html
    assert " required" not in html


@pytest.mark.unit
def test_get_unknown_slug_is_not_found(open_client):
    response = open_client.get("/posts/admin/nope")

    assert response.status_code == 404
    assert "Post not found: nope" in response.get_data(as_text=True)


@pytest.mark.unit
def test_get_as_json_returns_post(open_client):
    response = open_client.get("/posts/admin/my-first-post", headers={"Accept": "application/json"})

    assert response.status_code == 200
    post = response.get_json()["post"]
    assert post["slug"] == "my-first-post"
    assert post["title"] == "My First Post"
    assert post["markdown"] == "# First"


@pytest.mark.unit
def test_valid_update_redirects_to_listing(open_app, open_client, get_post):
    response = open_client.post(
        "/posts/admin/my-first-post",
        data=_update_form(title="Hello Again", markdown="# Updated"),
    )

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/posts/admin")
    post = get_post(open_app, "my-first-post")
    assert post.title == "Hello Again"
    assert post.markdown == "# Updated"


@pytest.mark.unit
def test_update_can_rename_slug(open_app, open_client, get_post):
    response = open_client.post("/posts/admin/my-first-post", data=_update_form(slug="first"))

    assert response.status_code == 302
    assert get_post(open_app, "my-first-post") is None
    assert get_post(open_app, "first").title == "My First Post"


@pytest.mark.unit
def test_empty_title_rerenders_with_single_error(open_app, open_client, get_post):
    response = open_client.post("/posts/admin/my-first-post", data=_update_form(title=""))

    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert "Title is required" in html
    assert "Slug is required" not in html
    assert "Markdown is required" not in html
    assert get_post(open_app, "my-first-post").title == "My First Post"


@pytest.mark.unit
def test_all_fields_empty_reports_three_errors(open_client):
    response = open_client.post(
        "/posts/admin/my-first-post",
        data={"initialSlug": "my-first-post", "title": "", "slug": "", "markdown": ""},
    )

    html = response.get_data(as_text=True)
    assert response.status_code == 200
    assert "Title is required" in html
    assert "Slug is required" in html
    assert "Markdown is required" in html


@pytest.mark.unit
def test_rerender_keeps_submitted_values(open_client):
    response = open_client.post(
        "/posts/admin/my-first-post",
        data=_update_form(title="Draft title", markdown=""),
    )

    html = response.get_data(as_text=True)
    assert 'value="Draft title"' in html
    assert 'name="initialSlug" value="my-first-post"' in html


@pytest.mark.unit
def test_whitespace_title_is_accepted(open_app, open_client, get_post):
    response = open_client.post("/posts/admin/my-first-post", data=_update_form(title="   "))

    assert response.status_code == 302
    assert get_post(open_app, "my-first-post").title == "   "


@pytest.mark.unit
def test_json_validation_errors_return_error_record(open_client):
    response = open_client.post(
        "/posts/admin/my-first-post",
        json={"initialSlug": "my-first-post", "title": "T", "slug": "", "markdown": ""},
    )

    assert response.status_code == 400
    assert response.get_json() == {
        "title": None,
        "slug": "Slug is required",
        "markdown": "Markdown is required",
    }


@pytest.mark.unit
def test_json_body_that_is_not_an_object_counts_as_empty_form(open_app, open_client, get_post):
    response = open_client.post("/posts/admin/my-first-post", json=[1])

    assert response.status_code == 400
    assert response.get_json() == {
        "title": "Title is required",
        "slug": "Slug is required",
        "markdown": "Markdown is required",
    }
    assert get_post(open_app, "my-first-post").title == "My First Post"


@pytest.mark.unit
def test_delete_removes_post_and_redirects(open_app, open_client, get_post):
    response = open_client.post(
        "/posts/admin/my-first-post",
        data=_update_form(_action="delete"),
    )

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/posts/admin")
    assert get_post(open_app, "my-first-post") is None
    assert get_post(open_app, "90s-mixtape") is not None


@pytest.mark.unit
def test_delete_uses_submitted_slug_field(open_app, open_client, get_post):
    response = open_client.post(
        "/posts/admin/my-first-post",
        data={"_action": "delete", "slug": "90s-mixtape"},
    )

    assert response.status_code == 302
    assert get_post(open_app, "90s-mixtape") is None
    assert get_post(open_app, "my-first-post") is not None


@pytest.mark.unit
def test_delete_skips_field_validation(open_app, open_client, get_post):
    response = open_client.post(
        "/posts/admin/my-first-post",
        data={"_action": "delete", "slug": "my-first-post", "title": "", "markdown": ""},
    )

    assert response.status_code == 302
    assert "Title is required" not in response.get_data(as_text=True)
    assert get_post(open_app, "my-first-post") is None


@pytest.mark.unit
def test_delete_unknown_slug_is_not_found(open_client):
    response = open_client.post("/posts/admin/my-first-post", data={"_action": "delete", "slug": "ghost"})

    assert response.status_code == 404


@pytest.mark.unit
def test_missing_initial_slug_is_server_error(open_app, open_client, get_post):
    form = _update_form(title="Changed")
    form.pop("initialSlug")

    response = open_client.post("/posts/admin/my-first-post", data=form)

    assert response.status_code == 500
    assert "initial slug must be a string" in response.get_data(as_text=True)
    assert get_post(open_app, "my-first-post").title == "My First Post"


@pytest.mark.unit
def test_rename_onto_existing_slug_rerenders_with_flash(open_app, open_client, get_post):
    response = open_client.post("/posts/admin/my-first-post", data=_update_form(slug="90s-mixtape"))

    assert response.status_code == 200
    assert "Slug already exists: 90s-mixtape" in response.get_data(as_text=True)
    assert get_post(open_app, "my-first-post").title == "My First Post"
    assert get_post(open_app, "90s-mixtape").title == "A Mixtape I Made Just For You"


@pytest.mark.unit
def test_listing_is_open_and_sorted_by_title(open_client):
    response = open_client.get("/posts/admin")

    html = response.get_data(as_text=True)
    assert response.status_code == 200
    assert html.index("A Mixtape I Made Just For You") < html.index("My First Post")
    assert 'href="/posts/admin/my-first-post"' in html
