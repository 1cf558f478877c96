import pytest

from pantry.cmd import server
from pantry.settings import Settings


def test_log_config_attaches_root_handler() -> None:
    config = server.build_log_config("DEBUG")

    assert config["root"] == {"handlers": ["app"], "level": "DEBUG"}
    assert config["handlers"]["app"]["formatter"] == "app"
    assert "default" in config["handlers"]


def test_log_config_leaves_uvicorn_defaults_untouched() -> None:
    server.build_log_config("DEBUG")

    assert "root" not in server.LOGGING_CONFIG
    assert "app" not in server.LOGGING_CONFIG["handlers"]


def test_main_hands_log_config_to_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(server, "get_settings", lambda: Settings(_env_file=None, reload=True))
    monkeypatch.setattr(server.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    server.main()

    (args, kwargs), = calls
    assert args == ("pantry.cmd.server:app",)
    assert kwargs["reload"] is True
    assert kwargs["log_config"]["root"]["level"] == "INFO"
