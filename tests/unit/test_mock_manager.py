"""Tests for MockManager and the mock_* helpers with fake Playwright objects."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from storefront_qa.api import (
    InterceptLog,
    MockConfig,
    MockManager,
    mock_api,
    mock_empty,
    mock_error,
    mock_network_failure,
    mock_success,
)
from storefront_qa.errors import UnknownMockError

# ── Helpers ──────────────────────────────────────────────────────────


def _make_route(method: str = "GET", url: str = "https://app.test/api/users") -> MagicMock:
    route = MagicMock()
    route.request.method = method
    route.request.url = url
    return route


def _installed_handler(page: MagicMock, index: int = -1):
    """Return (url, handler) passed to page.route."""
    args = page.route.call_args_list[index][0]
    return args[0], args[1]


@pytest.fixture
def page() -> MagicMock:
    return MagicMock()


# ── MockManager ──────────────────────────────────────────────────────


class TestMockManager:
    def test_register_get_has(self) -> None:
        manager = MockManager()
        config = MockConfig("GET", "**/api/users", [])

        manager.register("users", config)

        assert manager.has("users")
        assert manager.get("users") is config
        assert manager.get("missing") is None

    def test_apply_unknown_raises_immediately(self, page: MagicMock) -> None:
        manager = MockManager()

        with pytest.raises(UnknownMockError, match='Mock "ghost" not found'):
            manager.apply(page, "ghost")

        page.route.assert_not_called()

    def test_apply_routes_and_fulfills(self, page: MagicMock) -> None:
        manager = MockManager()
        manager.register("users", MockConfig("GET", "**/api/users", [{"id": 1}], alias="getUsers"))

        manager.apply(page, "users")
        url, handler = _installed_handler(page)
        route = _make_route()
        handler(route)

        assert url == "**/api/users"
        route.fulfill.assert_called_once_with(
            status=200, headers={"Content-Type": "application/json"}, json=[{"id": 1}]
        )
        manager.log.assert_called("getUsers", times=1)
        assert manager.log.last("getUsers").body == [{"id": 1}]

    def test_alias_defaults_to_name(self, page: MagicMock) -> None:
        manager = MockManager()
        manager.register("users", MockConfig("GET", "**/api/users", []))

        manager.apply(page, "users")
        _installed_handler(page)[1](_make_route())

        assert len(manager.log.calls("users")) == 1

    def test_method_mismatch_falls_back(self, page: MagicMock) -> None:
        manager = MockManager()
        manager.register("create", MockConfig("POST", "**/api/users", {"id": 11}))

        manager.apply(page, "create")
        route = _make_route(method="GET")
        _installed_handler(page)[1](route)

        route.fallback.assert_called_once()
        route.fulfill.assert_not_called()
        assert manager.log.calls("create") == []

    def test_method_match_is_case_insensitive(self, page: MagicMock) -> None:
        manager = MockManager()
        manager.register("create", MockConfig("post", "**/api/users", {"id": 11}, status_code=201))

        manager.apply(page, "create")
        route = _make_route(method="POST")
        _installed_handler(page)[1](route)

        assert route.fulfill.call_args[1]["status"] == 201

    def test_apply_many(self, page: MagicMock) -> None:
        manager = MockManager()
        manager.register("a", MockConfig("GET", "**/a", []))
        manager.register("b", MockConfig("GET", "**/b", []))

        manager.apply_many(page, ["a", "b"])

        assert [c[0][0] for c in page.route.call_args_list] == ["**/a", "**/b"]

    def test_clear(self, page: MagicMock) -> None:
        manager = MockManager()
        manager.register("a", MockConfig("GET", "**/a", []))
        manager.apply(page, "a")
        _installed_handler(page)[1](_make_route())

        manager.clear()

        assert not manager.has("a")
        assert manager.log.requests == []

    def test_custom_headers_and_delay(self, page: MagicMock) -> None:
        manager = MockManager()
        manager.register(
            "slow",
            MockConfig("GET", "**/slow", "ok", headers={"X-Mock": "1"}, delay=250),
        )
        manager.apply(page, "slow")
        route = _make_route()

        with patch("storefront_qa.api.mock_manager.time.sleep") as sleep:
            _installed_handler(page)[1](route)

        sleep.assert_called_once_with(0.25)
        assert route.fulfill.call_args[1]["headers"] == {"X-Mock": "1"}


# ── Helpers ──────────────────────────────────────────────────────────


class TestHelpers:
    def test_mock_success(self, page: MagicMock) -> None:
        log = InterceptLog()
        mock_success(page, "GET", "**/api/posts", [{"id": 1}], alias="getPosts", log=log)

        route = _make_route()
        _installed_handler(page)[1](route)

        assert route.fulfill.call_args[1]["status"] == 200
        log.assert_called("getPosts")

    def test_mock_error_body(self, page: MagicMock) -> None:
        mock_error(page, "GET", "**/api/users/999", 404, "Resource not found")

        route = _make_route()
        _installed_handler(page)[1](route)

        assert route.fulfill.call_args[1]["status"] == 404
        assert route.fulfill.call_args[1]["json"] == {"error": "Resource not found"}

    def test_mock_empty(self, page: MagicMock) -> None:
        mock_empty(page, "GET", "**/api/todos")

        route = _make_route()
        _installed_handler(page)[1](route)

        assert route.fulfill.call_args[1]["json"] == []

    def test_mock_network_failure_aborts(self, page: MagicMock) -> None:
        log = InterceptLog()
        mock_network_failure(page, "GET", "**/api/users", log=log)

        route = _make_route()
        _installed_handler(page)[1](route)

        route.abort.assert_called_once_with("failed")
        route.fulfill.assert_not_called()
        assert log.last("networkError").status is None


class TestInterceptLog:
    def test_assert_called_times_mismatch(self) -> None:
        log = InterceptLog()

        with pytest.raises(AssertionError, match="Expected 2 request"):
            log.assert_called("getUsers", times=2)

    def test_assert_called_none(self) -> None:
        with pytest.raises(AssertionError, match="got none"):
            InterceptLog().assert_called("getUsers")


class TestMockApi:
    def test_default_alias(self, page: MagicMock) -> None:
        log = InterceptLog()
        mock_api(page, MockConfig("PUT", "**/api/users/1", {"id": 1}), log=log)

        _installed_handler(page)[1](_make_route(method="PUT"))

        assert log.last("apiMock").status == 200


class TestHandlerLogging:
    def test_served_request_logs_context(
        self, page: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        mock_success(page, "GET", "**/api/users", [], alias="getUsers")

        with caplog.at_level("DEBUG", logger="storefront_qa.api.mock_manager"):
            _installed_handler(page)[1](_make_route())

        record = caplog.records[-1]
        assert record.getMessage() == "Mocked GET https://app.test/api/users -> 200"
        assert record.context == {
            "alias": "getUsers",
            "method": "GET",
            "url": "https://app.test/api/users",
            "status": 200,
        }

    def test_aborted_request_logs_context(
        self, page: MagicMock, caplog: pytest.LogCaptureFixture
    ) -> None:
        mock_network_failure(page, "GET", "**/api/users")

        with caplog.at_level("DEBUG", logger="storefront_qa.api.mock_manager"):
            _installed_handler(page)[1](_make_route())

        record = caplog.records[-1]
        assert record.getMessage().startswith("Aborting GET")
        assert record.context["alias"] == "networkError"
        assert "status" not in record.context
