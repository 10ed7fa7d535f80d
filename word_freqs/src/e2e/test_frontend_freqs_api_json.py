import io
import pytest
from frontend.web import app as flask_app


@pytest.fixture()
def client():
    return flask_app.test_client()


@pytest.mark.e2e
def test_freqs_api_returns_ranked_rows(client):
    rv = client.post("/api/freqs", data="Cat cat dog".encode("utf-8"))
    assert rv.status_code == 200
    assert rv.get_json() == [{"count": 2, "word": "Cat"}, {"count": 1, "word": "dog"}]


@pytest.mark.e2e
def test_freqs_api_limit(client):
    rv = client.post("/api/freqs?limit=1", data=b"a a a b b")
    assert rv.get_json() == [{"count": 3, "word": "a"}]


@pytest.mark.e2e
def test_freqs_api_multipart_upload(client):
    rv = client.post(
        "/api/freqs",
        data={"file": (io.BytesIO("Дом дом".encode("utf-8")), "t.txt")},
        content_type="multipart/form-data",
    )
    assert rv.get_json() == [{"count": 2, "word": "Дом"}]


@pytest.mark.e2e
def test_freqs_api_multipart_without_file(client):
    rv = client.post("/api/freqs", data={"other": "x"}, content_type="multipart/form-data")
    assert rv.status_code == 400


@pytest.mark.e2e
def test_freqs_api_rejects_bad_utf8(client):
    rv = client.post("/api/freqs", data=b"abc\xe2\x82")
    assert rv.status_code == 400
    data = rv.get_json()
    assert data["offset"] == 5 and "invalid UTF-8" in data["error"]


@pytest.mark.e2e
def test_report_endpoint_matches_cli_bytes(client):
    rv = client.post("/api/report", data=b"b a b")
    assert rv.status_code == 200
    assert rv.data == b"2 b\n1 a\n"


@pytest.mark.e2e
def test_health_and_home(client):
    assert client.get("/health").get_json() == {"ok": True}
    r = client.get("/")
    assert r.status_code == 200 and b"Word frequencies" in r.data
