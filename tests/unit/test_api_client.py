"""Tests for BaseApiClient and ApiClient against an in-memory httpx transport."""

from __future__ import annotations

import base64
import json

import httpx
import pytest

from storefront_qa.api import ApiAuth, ApiClient, BaseApiClient, User
from storefront_qa.errors import ApiStatusError

BASE_URL = "https://api.test"


class Recorder:
    """MockTransport handler that records requests and returns canned responses."""

    def __init__(self, status: int = 200, body: object = None) -> None:
        self.requests: list[httpx.Request] = []
        self.status = status
        self.body = {} if body is None else body

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def client(recorder: Recorder) -> ApiClient:
    api = ApiClient(base_url=BASE_URL, timeout=5.0, transport=httpx.MockTransport(recorder))
    yield api
    api.close()


# =============================================================================
# BaseApiClient
# =============================================================================


class TestBaseApiClient:
    def test_defaults_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STOREFRONT_ENV", "prod")
        monkeypatch.delenv("PROD_API_BASE_URL", raising=False)

        api = BaseApiClient()

        assert api.base_url == "https://jsonplaceholder.typicode.com"
        assert api.timeout == 15.0

    def test_trailing_slash_stripped(self) -> None:
        assert BaseApiClient(base_url="https://x.test/", timeout=1).base_url == "https://x.test"

    def test_response_shape(self, client: ApiClient, recorder: Recorder) -> None:
        recorder.body = {"id": 1}

        response = client.get("/users/1")

        assert response.status == 200
        assert response.body == {"id": 1}
        assert response.headers["content-type"] == "application/json"
        assert response.duration >= 0
        assert response.ok

    def test_default_and_extra_headers(self, client: ApiClient, recorder: Recorder) -> None:
        client.get("/users", headers={"X-Trace": "abc"})

        sent = recorder.last.headers
        assert sent["Accept"] == "application/json"
        assert sent["Content-Type"] == "application/json"
        assert sent["X-Trace"] == "abc"

    def test_bearer_auth(self, client: ApiClient, recorder: Recorder) -> None:
        client.get("/users", auth=ApiAuth(bearer="token-1"))

        assert recorder.last.headers["Authorization"] == "Bearer token-1"

    def test_basic_auth(self, client: ApiClient, recorder: Recorder) -> None:
        client.get("/users", auth=ApiAuth(username="alice", password="s3cret"))

        expected = base64.b64encode(b"alice:s3cret").decode()
        assert recorder.last.headers["Authorization"] == f"Basic {expected}"

    def test_set_and_remove_auth_token(self, client: ApiClient, recorder: Recorder) -> None:
        client.set_auth_token("abc")
        client.get("/users")
        assert recorder.last.headers["Authorization"] == "Bearer abc"

        client.remove_auth()
        client.get("/users")
        assert "Authorization" not in recorder.last.headers

    def test_error_status_raises(self, recorder: Recorder, client: ApiClient) -> None:
        recorder.status = 404
        recorder.body = {"error": "Resource not found"}

        with pytest.raises(ApiStatusError) as exc_info:
            client.get_user(999)

        assert exc_info.value.status == 404
        assert exc_info.value.response.body == {"error": "Resource not found"}
        assert "GET https://api.test/users/999 failed with status 404" in str(exc_info.value)

    def test_error_status_returned_when_not_failing(
        self, recorder: Recorder, client: ApiClient
    ) -> None:
        recorder.status = 500

        response = client.get_user(1, fail_on_status_code=False)

        assert response.status == 500
        assert not response.ok

    def test_non_json_body_kept_as_text(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="pong"))
        with BaseApiClient(base_url=BASE_URL, timeout=1, transport=transport) as api:
            assert api.get("/ping").body == "pong"

    def test_empty_body_is_none(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(204))
        with BaseApiClient(base_url=BASE_URL, timeout=1, transport=transport) as api:
            assert api.delete("/posts/1").body is None

    def test_close_is_idempotent(self, client: ApiClient) -> None:
        client.get("/users")
        client.close()
        client.close()


# =============================================================================
# ApiClient endpoints
# =============================================================================


class TestApiClientEndpoints:
    @pytest.mark.parametrize(
        ("call", "method", "path"),
        [
            (lambda c: c.get_users(), "GET", "/users"),
            (lambda c: c.get_user(3), "GET", "/users/3"),
            (lambda c: c.delete_user(3), "DELETE", "/users/3"),
            (lambda c: c.get_posts(), "GET", "/posts"),
            (lambda c: c.get_post(7), "GET", "/posts/7"),
            (lambda c: c.delete_post(7), "DELETE", "/posts/7"),
            (lambda c: c.get_comments(), "GET", "/comments"),
            (lambda c: c.get_comments_by_post(7), "GET", "/posts/7/comments"),
            (lambda c: c.get_todos(), "GET", "/todos"),
            (lambda c: c.get_todo(2), "GET", "/todos/2"),
            (lambda c: c.delete_todo(2), "DELETE", "/todos/2"),
            (lambda c: c.get_albums(), "GET", "/albums"),
            (lambda c: c.get_album(4), "GET", "/albums/4"),
            (lambda c: c.get_photos_by_album(4), "GET", "/albums/4/photos"),
        ],
    )
    def test_routes(
        self, client: ApiClient, recorder: Recorder, call, method: str, path: str
    ) -> None:
        call(client)

        assert recorder.last.method == method
        assert recorder.last.url.path == path

    def test_filters_by_user(self, client: ApiClient, recorder: Recorder) -> None:
        client.get_posts_by_user(1)
        assert recorder.last.url.params["userId"] == "1"

        client.get_todos_by_user(2)
        assert recorder.last.url.path == "/todos"
        assert recorder.last.url.params["userId"] == "2"

    @pytest.mark.parametrize(
        ("call", "method", "path"),
        [
            (lambda c, d: c.create_user(d), "POST", "/users"),
            (lambda c, d: c.update_user(1, d), "PUT", "/users/1"),
            (lambda c, d: c.patch_user(1, d), "PATCH", "/users/1"),
            (lambda c, d: c.create_post(d), "POST", "/posts"),
            (lambda c, d: c.update_post(1, d), "PUT", "/posts/1"),
            (lambda c, d: c.create_comment(d), "POST", "/comments"),
            (lambda c, d: c.create_todo(d), "POST", "/todos"),
            (lambda c, d: c.update_todo(1, d), "PUT", "/todos/1"),
        ],
    )
    def test_writes_send_json_body(
        self, client: ApiClient, recorder: Recorder, call, method: str, path: str
    ) -> None:
        payload = {"title": "Test", "userId": 1}

        call(client, payload)

        assert recorder.last.method == method
        assert recorder.last.url.path == path
        assert json.loads(recorder.last.content) == payload

    def test_body_parses_into_model(
        self, client: ApiClient, recorder: Recorder, load_fixture
    ) -> None:
        recorder.body = load_fixture("mocks/success/users.json")[0]

        user = User.model_validate(client.get_user(1).body)

        assert user.username == "Bret"
        assert user.company is not None
        assert user.company.catch_phrase == "Multi-layered client-server neural-net"
        assert user.model_dump(by_alias=True, exclude_none=True)["company"]["catchPhrase"]
