import pytest

from api import create_app

# Custom pytest marks for organizing tests
def pytest_configure(config):
    config.addinivalue_line("markers", "auth: mark test as authentication-related")
    config.addinivalue_line("markers", "db: mark test as database-intensive")


@pytest.fixture()
def static_root(tmp_path):
    (tmp_path / "index.html").write_text("<html><body><h1>Welcome to Chirpy</h1></body></html>")
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "logo.txt").write_text("chirp")
    return tmp_path


@pytest.fixture()
def app_factory(static_root):
    """Build an app on a fresh in-memory database, with optional config overrides."""
    def factory(**overrides):
        overrides.setdefault("FILESERVER_ROOT", str(static_root))
        return create_app("testing", overrides=overrides)

    return factory


@pytest.fixture()
def app(app_factory):
    return app_factory()


@pytest.fixture()
def client(app):
    return app.test_client()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def auth_header():
    return bearer


@pytest.fixture()
def make_user(client):
    """Register and log in a user; returns the login payload plus the password."""
    def factory(email="walt@breakingbad.com", password="04234"):
        resp = client.post("/api/users", json={"email": email, "password": password})
        assert resp.status_code == 201, resp.get_json()
        resp = client.post("/api/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.get_json()
        data = resp.get_json()
        data["password"] = password
        return data

    return factory


@pytest.fixture()
def user(make_user):
    return make_user()
