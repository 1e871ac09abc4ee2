import logging

from pessoas_api.app.core.config import Settings
from pessoas_api.app.core.logging_config import build_handlers, configure_logging


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "LOG_LEVEL", "LOG_FILE", "LOG_FORMAT", "DEBUG"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.port == 9999
    assert settings.host == "0.0.0.0"
    assert settings.log_level == "INFO"
    assert settings.log_file == ""
    assert settings.debug is False
    assert settings.log_format == "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.port == 8080
    assert settings.debug is True
    assert settings.log_level == "debug"


def test_log_format_comes_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "%(levelname)s|%(message)s")
    monkeypatch.delenv("LOG_FILE", raising=False)

    (handler,) = build_handlers(Settings())
    record = logging.LogRecord("pessoas", logging.WARNING, __file__, 1, "hello", None, None)

    assert handler.format(record) == "WARNING|hello"


def test_configure_logging_leaves_existing_handlers_alone(monkeypatch):
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [sentinel])

    assert configure_logging(Settings(log_level="DEBUG", log_file="ignored.log")) is False
    assert root.handlers == [sentinel]


def test_configure_logging_installs_console_and_file_handlers(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    logfile = tmp_path / "pessoas.log"

    assert configure_logging(Settings(log_level="warning", log_file=str(logfile))) is True

    kinds = [type(handler) for handler in root.handlers]
    assert kinds == [logging.StreamHandler, logging.FileHandler]
    assert root.level == logging.WARNING
    root.handlers[1].close()
