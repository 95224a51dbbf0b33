import pytest
from fastapi.testclient import TestClient

from api.app.main import create_app
from api.app.settings import Settings
from api.app.store import RunStore


@pytest.fixture()
def public_dir(tmp_path):
    d = tmp_path / "public"
    d.mkdir()
    (d / "index.html").write_text("<h1>Running Tracker</h1>")
    (d / "app.css").write_text("body { margin: 0; }")
    return d


@pytest.fixture()
def settings(public_dir):
    return Settings(public_dir=str(public_dir))


@pytest.fixture()
def store():
    return RunStore.seeded()


@pytest.fixture()
def client(settings, store):
    app = create_app(settings=settings, store=store)
    with TestClient(app) as c:
        yield c
