import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from components.movieservice.app import create_app
from components.movieservice.settings import MovieServiceSettings


def test_defaults_bind_all_interfaces_on_3000(monkeypatch):
    for var in ("MOVIESERVICE_HOST", "MOVIESERVICE_PORT", "MOVIESERVICE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    s = MovieServiceSettings(_env_file=None)
    assert s.HOST == "0.0.0.0"
    assert s.PORT == 3000
    assert s.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MOVIESERVICE_PORT", "8080")
    monkeypatch.setenv("MOVIESERVICE_APP_NAME", "movies-dev")
    s = MovieServiceSettings(_env_file=None)
    assert s.PORT == 8080
    assert s.APP_NAME == "movies-dev"


def test_app_uses_settings():
    s = MovieServiceSettings(_env_file=None, APP_NAME="movies-test")
    app = create_app(settings=s)
    assert app.title == "movies-test"
    assert app.state.settings is s
    assert TestClient(app).get("/").status_code == 200


def test_log_level_normalized(monkeypatch):
    monkeypatch.setenv("MOVIESERVICE_LOG_LEVEL", "debug")
    s = MovieServiceSettings(_env_file=None)
    assert s.LOG_LEVEL == "DEBUG"


def test_unknown_log_level_rejected_at_load(monkeypatch):
    monkeypatch.setenv("MOVIESERVICE_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        MovieServiceSettings(_env_file=None)
