"""HTTP tests for the sheet routes, with the sheet download stubbed out."""

import pytest
from fastapi.testclient import TestClient

from app.api.v1.sheets import get_sheet_loader
from app.core.config import MAGIC_KEY, PHYSICAL_KEY, VALUE_KEY
from app.main import app
from app.serve.sheet_loader import SheetFetchError

ROWS = [
    {"ID": str(i), MAGIC_KEY: str(m), PHYSICAL_KEY: str(p), VALUE_KEY: str(v)}
    for i, (m, p, v) in enumerate(
        [(10, 1, 5), (10, 2, 9), ("", 3, 1), (4, 9, 9), (7, 0, 2), (1, 5, 7), (3, 3, 3)]
    )
]


class StubLoader:
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = 0

    async def fetch_rows(self):
        self.calls += 1
        if self.error:
            raise self.error
        return [dict(r) for r in self.rows]


@pytest.fixture
def loader():
    stub = StubLoader(ROWS)
    app.dependency_overrides[get_sheet_loader] = lambda: stub
    yield stub
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


def test_healthz(client):
    assert client.get("/healthz").json() == {"ok": True}


def test_index_lists_endpoints(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert "/api/sheet-data" in resp.text
    assert "/api/top-characters?type=value" in resp.text


def test_sheet_data_returns_all_rows(client, loader):
    resp = client.get("/api/sheet-data")

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "rows": ROWS}


def test_top_characters_magic(client, loader):
    resp = client.get("/api/top-characters", params={"type": "magic"})
    body = resp.json()

    assert resp.status_code == 200
    assert body["success"] is True
    assert body["type"] == "magic"
    assert body["sortFieldPrimary"] == MAGIC_KEY
    assert body["sortFieldSecondary"] == VALUE_KEY
    assert [r["ID"] for r in body["rows"]] == ["1", "0", "4", "3", "6"]
    assert body["rows"][0] == ROWS[1]


def test_top_characters_value(client, loader):
    body = client.get("/api/top-characters?type=value").json()

    assert body["sortFieldPrimary"] == VALUE_KEY
    assert body["sortFieldSecondary"] == MAGIC_KEY
    assert [r["ID"] for r in body["rows"]] == ["1", "3", "5", "0", "6"]


def test_v1_prefix_serves_same_routes(client, loader):
    body = client.get("/api/v1/top-characters?type=physical").json()

    assert body["sortFieldPrimary"] == PHYSICAL_KEY
    assert [r["ID"] for r in body["rows"]] == ["3", "5", "6", "2", "1"]


@pytest.mark.parametrize("query", ["", "?type=", "?type=speed", "?type=MAGIC"])
def test_top_characters_rejects_bad_type(client, loader, query):
    resp = client.get(f"/api/top-characters{query}")

    assert resp.status_code == 400
    assert resp.json()["success"] is False
    assert "type must be" in resp.json()["message"]
    assert loader.calls == 0


def test_sheet_failure_is_500(client):
    app.dependency_overrides[get_sheet_loader] = lambda: StubLoader(
        error=SheetFetchError("download failed: HTTP 503")
    )
    try:
        resp = client.get("/api/top-characters?type=magic")
        data = client.get("/api/sheet-data")
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json() == {
        "success": False,
        "message": "server error",
        "error": "download failed: HTTP 503",
    }
    assert data.status_code == 500
    assert data.json()["error"] == "download failed: HTTP 503"
