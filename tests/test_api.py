# tests/test_api.py

from __future__ import annotations

import re

from fastapi.testclient import TestClient

from todo_clock.app import main
from todo_clock.app.main import create_app

CLOCK_RE = re.compile(r"^\d{2}:\d{2}:\d{2}$")


def test_health(client: TestClient) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_todo_lifecycle(client: TestClient) -> None:
    r = client.post("/api/todos", json={"title": "buy milk"})
    assert r.status_code == 201
    created = r.json()
    todo_id = created["id"]
    assert created == {"id": todo_id, "title": "buy milk", "completed": False}

    r = client.put(f"/api/todos/{todo_id}", json={"completed": True})
    assert r.status_code == 200
    assert r.json() == {"id": todo_id, "title": "buy milk", "completed": True}

    r = client.delete(f"/api/todos/{todo_id}")
    assert r.status_code == 204
    assert r.content == b""

    r = client.get("/api/todos")
    assert r.status_code == 200
    assert r.json() == []


def test_list_keeps_insertion_order(client: TestClient) -> None:
    for title in ("a", "b", "c"):
        client.post("/api/todos", json={"title": title})

    assert [t["title"] for t in client.get("/api/todos").json()] == ["a", "b", "c"]


def test_update_title_keeps_completed(client: TestClient) -> None:
    todo_id = client.post("/api/todos", json={"title": "x"}).json()["id"]
    client.put(f"/api/todos/{todo_id}", json={"completed": True})

    r = client.put(f"/api/todos/{todo_id}", json={"title": "y"})
    assert r.json() == {"id": todo_id, "title": "y", "completed": True}


def test_unknown_id_is_404_with_empty_body(client: TestClient) -> None:
    client.post("/api/todos", json={"title": "stay"})

    r = client.put("/api/todos/does-not-exist", json={"completed": True})
    assert r.status_code == 404
    assert r.content == b""

    r = client.delete("/api/todos/does-not-exist")
    assert r.status_code == 404
    assert r.content == b""

    assert [t["title"] for t in client.get("/api/todos").json()] == ["stay"]


def test_malformed_bodies_are_rejected(client: TestClient) -> None:
    r = client.post("/api/todos", json={})
    assert 400 <= r.status_code < 500

    r = client.post("/api/todos", content=b"{not json", headers={"content-type": "application/json"})
    assert 400 <= r.status_code < 500

    todo_id = client.post("/api/todos", json={"title": "x"}).json()["id"]
    r = client.put(f"/api/todos/{todo_id}", json={"completed": "not-a-bool"})
    assert 400 <= r.status_code < 500

    # values that would loosely convert to a bool are still the wrong shape
    for bad in ("yes", "on", "true", 1, 0):
        r = client.put(f"/api/todos/{todo_id}", json={"completed": bad})
        assert 400 <= r.status_code < 500, bad

    r = client.put(f"/api/todos/{todo_id}", json={"title": 42})
    assert 400 <= r.status_code < 500
    r = client.post("/api/todos", json={"title": 42})
    assert 400 <= r.status_code < 500

    assert client.get("/api/todos").json() == [{"id": todo_id, "title": "x", "completed": False}]


def test_request_id_header(client: TestClient) -> None:
    r = client.get("/api/todos", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"

    r = client.get("/api/todos")
    assert r.headers["X-Request-ID"]


def test_cors_allows_any_origin(client: TestClient) -> None:
    r = client.options(
        "/api/todos",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "DELETE",
            "Access-Control-Request-Headers": "x-custom",
        },
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"
    assert "DELETE" in r.headers["access-control-allow-methods"]

    r = client.get("/api/todos", headers={"Origin": "http://example.com"})
    assert r.headers["access-control-allow-origin"] == "*"


def test_ws_streams_clock(client: TestClient) -> None:
    with client.websocket_connect("/ws") as ws:
        first = ws.receive_text()
        second = ws.receive_text()

    assert CLOCK_RE.match(first)
    assert CLOCK_RE.match(second)


def test_cors_is_not_narrowed_by_environment(monkeypatch, root_logging) -> None:
    monkeypatch.setenv("TODO_CLOCK_CORS_ORIGINS", "http://only.test")
    monkeypatch.setenv("TODO_CLOCK_LOG_DIR", "")
    with TestClient(create_app()) as c:
        r = c.get("/api/todos", headers={"Origin": "http://elsewhere.test"})
    assert r.headers["access-control-allow-origin"] == "*"


def test_serve_runs_uvicorn_with_settings(monkeypatch, root_logging) -> None:
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    monkeypatch.setenv("TODO_CLOCK_PORT", "8123")
    monkeypatch.setenv("TODO_CLOCK_LOG_DIR", "")

    main.serve()

    [(app, kw)] = calls
    assert kw["port"] == 8123
    assert kw["log_config"] is None
    assert any(r.path == "/api/todos" for r in app.routes)
