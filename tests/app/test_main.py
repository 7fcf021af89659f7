import pytest
import uvicorn

from src.app import main
from src.app.config import get_settings


@pytest.fixture
def captured_uvicorn_run(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    return calls


def test_run_serves_app_with_configured_host_and_port(monkeypatch, captured_uvicorn_run):
    # Arrange
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()

    # Act
    try:
        main.run()
    finally:
        get_settings.cache_clear()

    # Assert
    assert captured_uvicorn_run == [
        (
            "src.app.main:app",
            {"host": "127.0.0.1", "port": 9090, "reload": False, "log_level": "warning"},
        )
    ]
