import pytest
from src.seedpattern_server import app, resolve_port, DEFAULT_PORT

@pytest.fixture
def client():
    app.testing = True
    with app.test_client() as client:
        yield client

def test_only_pattern_routes_are_served(client):
    assert client.get("/health").status_code == 404
    assert client.get("/version").status_code == 404

def test_png_endpoint(client):
    r = client.get("/api/hello.png")
    assert r.status_code == 200
    assert r.mimetype == "image/png"
    assert r.data[:4] == b"\x89PNG"

    again = client.get("/api/hello.png")
    assert again.data == r.data

def test_svg_endpoint(client):
    r = client.get("/api/hello.svg")
    assert r.status_code == 200
    assert r.headers["Content-Type"] == "image/svg"
    assert r.data.startswith(b"<svg ")
    assert b"rgb(172, 242, 205)" in r.data

def test_json_endpoint(client):
    r = client.get("/api/hello.json")
    assert r.status_code == 200
    assert r.json == {
        "seed": "hello",
        "hash": "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824",
        "imageUrl": "/api/hello.png",
    }

def test_unsupported_type(client):
    r = client.get("/api/hello.gif")
    assert r.status_code == 400
    assert r.json["error"] == "Unsupported file type"

def test_render_failure_is_500(client, monkeypatch):
    def boom(seed, fmt):
        raise MemoryError("canvas")
    monkeypatch.setattr("src.api.routes.generate_pattern", boom)
    r = client.get("/api/hello.png")
    assert r.status_code == 500
    assert r.json == {"error": "Error generating pattern"}

def test_missing_seed_is_404(client):
    r = client.get("/api/.png")
    assert r.status_code == 404

def test_resolve_port_reads_only_env():
    assert resolve_port({}) == DEFAULT_PORT == 3000
    assert resolve_port({"PORT": "8080"}) == 8080
    assert resolve_port({"PORT": ""}) == DEFAULT_PORT
    assert resolve_port({"PORT": "nope"}) == DEFAULT_PORT

def test_resolve_port_ignores_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["srv", "--port"])
    monkeypatch.setenv("PORT", "8080")
    assert resolve_port() == 8080
