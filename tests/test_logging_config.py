import logging

from app.logging_config import setup_logging


def test_setup_logging_configures_unconfigured_root(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("debug")

    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG


def test_setup_logging_is_a_noop_when_already_configured(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])
    monkeypatch.setattr(root, "level", logging.WARNING)

    setup_logging("DEBUG")

    assert root.handlers == [existing]
    assert root.level == logging.WARNING


def test_unknown_level_name_falls_back_to_info(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("chatty")

    assert root.level == logging.INFO
