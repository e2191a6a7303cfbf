"""登录、首页与健康检查路由测试."""

import pytest

TEST_PASSWORD = "TestPass1"


@pytest.mark.unit
def test_index_redirects_to_listing(open_client):
    response = open_client.get("/")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/posts/admin")


@pytest.mark.unit
def test_health_reports_database_status(open_client):
    response = open_client.get("/health")

    assert response.status_code == 200
    data = response.get_json()
    assert data["success"] is True
    assert data["data"]["status"] == "healthy"
    assert data["data"]["database"] == "ok"
    assert "X-Request-ID" in response.headers


@pytest.mark.unit
def test_login_page_renders(secured_client):
    response = secured_client.get("/auth/login")

    assert response.status_code == 200
    assert 'name="username"' in response.get_data(as_text=True)


@pytest.mark.unit
def test_login_redirects_to_safe_next(secured_client):
    response = secured_client.post(
        "/auth/login?next=/posts/admin/my-first-post",
        data={"username": "test_admin", "password": TEST_PASSWORD},
    )

    assert response.status_code == 302
    assert response.headers["Location"] == "/posts/admin/my-first-post"

    follow = secured_client.get("/posts/admin/my-first-post")
    assert follow.status_code == 200


@pytest.mark.unit
def test_login_ignores_external_next(secured_client):
    response = secured_client.post(
        "/auth/login?next=https://evil.example.com/",
        data={"username": "test_admin", "password": TEST_PASSWORD},
    )

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/posts/admin")


@pytest.mark.unit
def test_login_with_wrong_password_rerenders(secured_client):
    response = secured_client.post("/auth/login", data={"username": "test_admin", "password": "WrongPass1"})

    assert response.status_code == 200
    assert "用户名或密码错误" in response.get_data(as_text=True)


@pytest.mark.unit
def test_logout_clears_session(auth_client):
    response = auth_client.post("/auth/logout")

    assert response.status_code == 302
    assert auth_client.get("/posts/admin/my-first-post").status_code == 302
