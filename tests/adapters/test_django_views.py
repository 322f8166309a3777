"""
Tests — Django adapter over the HTTP handlers.
"""

from __future__ import annotations

import json

import pytest

from adapters.django_api import wiring
from adapters.django_api.wiring import (
    DEV_OWNER_API_KEY,
    DEV_USER_API_KEY,
    build_dependencies,
    get_journal,
    reset_dependencies,
)
from eventlog.time import FixedClock


@pytest.fixture(autouse=True)
def fresh_store(monkeypatch):
    monkeypatch.setattr(wiring, "SystemClock", lambda: FixedClock(100))
    reset_dependencies()
    yield
    reset_dependencies()


def _post(client, path, body=None, api_key=DEV_USER_API_KEY):
    extra = {"HTTP_X_API_KEY": api_key} if api_key else {}
    return client.post(
        path,
        data=json.dumps(body or {}),
        content_type="application/json",
        **extra,
    )


class TestWiring:
    def test_singleton_until_reset(self):
        first = build_dependencies()
        assert build_dependencies() is first
        reset_dependencies()
        assert build_dependencies() is not first

    def test_owner_from_settings(self, settings):
        settings.EVENTLOG = {
            "OWNER": "configured-owner",
            "API_KEYS": {"k": "configured-owner"},
            "max_message_length": 10,
        }
        deps = build_dependencies()
        assert deps.store.owner == "configured-owner"
        assert deps.store.config.max_message_length == 10
        assert deps.auth_provider.resolve_api_key("k").identity == "configured-owner"


class TestEventEndpoints:
    def test_append_and_get(self, client):
        response = _post(client, "/v1/events", {"message": "hello", "category": "greet"})
        assert response.status_code == 200
        assert response.json() == {"ok": True, "data": {"event_id": 0, "timestamp": 100}}

        response = client.get("/v1/events/0")
        assert response.status_code == 200
        assert response.json()["data"]["submitter"] == "dev-user"
        assert response.json()["data"]["category"] == "greet"

    def test_append_without_key(self, client):
        response = _post(client, "/v1/events", {"message": "hello"}, api_key=None)
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTH_REQUIRED"

    def test_append_with_bad_key(self, client):
        response = _post(client, "/v1/events", {"message": "hello"}, api_key="nope")
        assert response.status_code == 403
        assert response.json()["error"]["code"] == "AUTH_INVALID"

    def test_append_oversized_message(self, client):
        response = _post(client, "/v1/events", {"message": "a" * 501})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"

    def test_append_missing_message(self, client):
        response = _post(client, "/v1/events", {"category": "x"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_REQUEST"

    def test_append_invalid_json(self, client):
        response = client.post(
            "/v1/events",
            data="{not json",
            content_type="application/json",
            HTTP_X_API_KEY=DEV_USER_API_KEY,
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_REQUEST"

    def test_wrong_method(self, client):
        assert client.get("/v1/events").status_code == 405
        assert _post(client, "/v1/stats").status_code == 405

    def test_get_missing(self, client):
        response = client.get("/v1/events/3")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_toggle(self, client):
        _post(client, "/v1/events", {"message": "hello"})

        denied = _post(client, "/v1/events/0/toggle", api_key=DEV_OWNER_API_KEY)
        assert denied.status_code == 403
        assert denied.json()["error"]["code"] == "UNAUTHORIZED"

        response = _post(client, "/v1/events/0/toggle")
        assert response.json()["data"] == {"event_id": 0, "is_active": False}
        assert client.get("/v1/events/0/active").json()["data"]["is_active"] is False
        assert client.get("/v1/events/7/active").json()["data"]["is_active"] is False


class TestQueryEndpoints:
    @pytest.fixture(autouse=True)
    def _seed(self, client):
        _post(client, "/v1/events", {"message": "hello", "category": "greet"})
        build_dependencies().clock.set(200)
        _post(client, "/v1/events", {"message": "world"}, api_key=DEV_OWNER_API_KEY)

    def test_scenario(self, client):
        assert client.get("/v1/events/by-category", {"category": "greet"}).json()[
            "data"
        ] == {"event_ids": [0]}
        assert client.get("/v1/events/by-category", {"category": ""}).json()[
            "data"
        ] == {"event_ids": []}
        assert client.get("/v1/events/latest", {"n": 5}).json()["data"] == {
            "event_ids": [1, 0]
        }
        assert client.get("/v1/events/range", {"start": 0, "end": 150}).json()[
            "data"
        ] == {"event_ids": [0]}
        assert client.get("/v1/stats").json()["data"] == {
            "total": 2,
            "active": 2,
            "owner": "dev-owner",
        }

    def test_user_queries(self, client):
        assert client.get("/v1/events/by-user", {"user": "dev-owner"}).json()[
            "data"
        ] == {"event_ids": [1]}
        assert client.get("/v1/counts/by-user", {"user": "dev-user"}).json()[
            "data"
        ] == {"count": 1}
        assert client.get("/v1/counts/by-category", {"category": "greet"}).json()[
            "data"
        ] == {"count": 1}

    def test_missing_user_param(self, client):
        response = client.get("/v1/events/by-user")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_REQUEST"

    def test_empty_user_param_is_empty_result(self, client):
        response = client.get("/v1/events/by-user", {"user": ""})
        assert response.status_code == 200
        assert response.json()["data"] == {"event_ids": []}

        response = client.get("/v1/counts/by-user", {"user": ""})
        assert response.status_code == 200
        assert response.json()["data"] == {"count": 0}

    def test_latest_zero(self, client):
        response = client.get("/v1/events/latest", {"n": 0})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"

    def test_latest_not_a_number(self, client):
        response = client.get("/v1/events/latest", {"n": "many"})
        assert response.json()["error"]["code"] == "INVALID_REQUEST"

    def test_inverted_range(self, client):
        response = client.get("/v1/events/range", {"start": 10, "end": 1})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"

    def test_journal_records_calls(self):
        assert len(get_journal()) == 2


class TestOwnerEndpoint:
    def test_transfer(self, client):
        denied = _post(client, "/v1/owner/transfer", {"new_owner": "dev-user"})
        assert denied.status_code == 403

        response = _post(
            client,
            "/v1/owner/transfer",
            {"new_owner": "dev-user"},
            api_key=DEV_OWNER_API_KEY,
        )
        assert response.status_code == 200
        assert client.get("/v1/stats").json()["data"]["owner"] == "dev-user"

        again = _post(
            client,
            "/v1/owner/transfer",
            {"new_owner": "someone"},
            api_key=DEV_OWNER_API_KEY,
        )
        assert again.json()["error"]["code"] == "UNAUTHORIZED"

    def test_transfer_to_zero_identity(self, client):
        response = _post(
            client,
            "/v1/owner/transfer",
            {"new_owner": ""},
            api_key=DEV_OWNER_API_KEY,
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"
