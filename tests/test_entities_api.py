from __future__ import annotations

import json
import logging


def _seed(data_dir, name, records):
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / f"{name}.json").write_text(json.dumps(records), encoding="utf-8")


def _stored(data_dir, name):
    return json.loads((data_dir / f"{name}.json").read_text(encoding="utf-8"))


def test_list_empty_collection(client):
    resp = client.get("/api/otc-europe-jobs")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_then_list(client, app_env):
    data_dir, _ = app_env
    _seed(data_dir, "activeWork", [{"id": 1, "name": "A"}])
    resp = client.post("/api/active-works", json={"name": "B"})
    assert resp.status_code == 201
    assert resp.json() == {"message": "activeWork item created successfully", "data": {"name": "B", "id": 2}}
    assert _stored(data_dir, "activeWork") == [{"id": 1, "name": "A"}, {"name": "B", "id": 2}]
    listed = client.get("/api/active-works").json()
    assert listed[-1] == {"name": "B", "id": 2}


def test_create_accepts_form_body(client, app_env):
    data_dir, _ = app_env
    resp = client.post("/api/instant-works-bd", data={"title": "T", "logo_url": "x.png"})
    assert resp.status_code == 201
    assert _stored(data_dir, "instantWorkBD") == [{"title": "T", "logo": "x.png", "id": 1}]


def test_get_one_and_missing(client, app_env):
    data_dir, _ = app_env
    _seed(data_dir, "otcEurope", [{"id": 1, "description": "d", "logo": "l.png", "telegramUser": "@u"}])
    resp = client.get("/api/otc-europe-jobs/1")
    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "Job 1"
    assert body["status"] == "active"
    assert body["logo_url"] == "l.png"
    assert body["telegram_user"] == "@u"

    missing = client.get("/api/otc-europe-jobs/2")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Item not found"}
    assert client.get("/api/otc-europe-jobs/abc").status_code == 404


def test_update_active_work_flag(client, app_env):
    data_dir, _ = app_env
    _seed(data_dir, "activeWork", [{"id": 1, "isActive": True}])
    resp = client.put("/api/active-works/1", json={"is_active": False})
    assert resp.status_code == 200
    assert resp.json()["data"] == {"id": 1, "isActive": False, "is_active": False}
    assert _stored(data_dir, "activeWork") == [{"id": 1, "isActive": False}]


def test_update_ignores_payload_id(client, app_env):
    data_dir, _ = app_env
    _seed(data_dir, "howToWork", [{"id": 1, "title": "A"}])
    resp = client.put("/api/how-to-work-articles/1", json={"id": 5, "title": "B"})
    assert resp.status_code == 200
    assert _stored(data_dir, "howToWork") == [{"id": 1, "title": "B"}]


def test_update_missing(client):
    resp = client.put("/api/active-works/3", json={"name": "x"})
    assert resp.status_code == 404
    assert resp.json()["message"] == "Item not found"


def test_delete_twice(client, app_env):
    data_dir, _ = app_env
    _seed(data_dir, "otcAsia", [{"id": 1}, {"id": 2}])
    first = client.delete("/api/otc-asia-jobs/1")
    assert first.status_code == 200
    assert first.json() == {"message": "otcAsia item deleted successfully"}
    second = client.delete("/api/otc-asia-jobs/1")
    assert second.status_code == 404
    assert _stored(data_dir, "otcAsia") == [{"id": 2}]


def test_write_failure_returns_500(client, app_env):
    data_dir, _ = app_env
    data_dir.write_text("", encoding="utf-8")
    resp = client.post("/api/active-works", json={"name": "x"})
    assert resp.status_code == 500
    assert resp.json() == {"message": "Error saving data"}


def test_invalid_json_body(client):
    resp = client.post(
        "/api/active-works",
        content="{oops",
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 400
    assert "message" in resp.json()


def test_non_object_body(client):
    resp = client.post("/api/active-works", json=[1, 2])
    assert resp.status_code == 400


def test_unknown_route_has_message(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


def test_nan_body_is_rejected_and_collection_still_lists(client, app_env):
    data_dir, _ = app_env
    _seed(data_dir, "activeWork", [{"id": 1, "name": "A"}])
    for constant in ("NaN", "Infinity", "-Infinity"):
        resp = client.post(
            "/api/active-works",
            content='{"name": "x", "score": %s}' % constant,
            headers={"content-type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid JSON body"}
    listed = client.get("/api/active-works")
    assert listed.status_code == 200
    assert listed.json() == [{"id": 1, "name": "A"}]
    assert _stored(data_dir, "activeWork") == [{"id": 1, "name": "A"}]


def test_multipart_file_fields_are_ignored(client, app_env, caplog):
    data_dir, _ = app_env
    caplog.set_level(logging.DEBUG, logger="workboard.core.utils")
    resp = client.post(
        "/api/instant-works-bd",
        data={"title": "T"},
        files={"logo": ("a.png", b"\x89PNG", "image/png")},
    )
    assert resp.status_code == 201
    assert _stored(data_dir, "instantWorkBD") == [{"title": "T", "id": 1}]
    assert "Ignoring uploaded file field 'logo'" in caplog.text


def test_unhandled_error_returns_json_message(app_env):
    from fastapi.testclient import TestClient

    from workboard.app import create_app

    app = create_app()

    @app.get("/api/explode")
    def explode():
        raise RuntimeError("boom")

    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.get("/api/explode")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}
