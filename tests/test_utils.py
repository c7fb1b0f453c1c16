import logging

import pytest
from rich.logging import RichHandler

from argspect.utils import convert_to_snake_case, normalize_text, setup_logging


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Deploy", "deploy"),
        ("HTTPServer", "http-server"),
        ("dry_run", "dry-run"),
        ("listAllItems", "list-all-items"),
    ],
)
def test_convert_to_snake_case(name, expected):
    assert convert_to_snake_case(name) == expected


def test_convert_to_snake_case_separator():
    assert convert_to_snake_case("OutputPath", separator="_") == "output_path"


def test_normalize_text():
    assert normalize_text("") is None
    assert normalize_text(None) is None
    assert normalize_text("Help") == "Help"


def test_setup_logging_cli_mode():
    setup_logging(mode="cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)


def test_setup_logging_env_mode(monkeypatch):
    monkeypatch.setenv("ARGSPECT_LOG_MODE", "json")
    setup_logging()
    handler = logging.getLogger().handlers[0]
    assert not isinstance(handler, RichHandler)
    assert "JsonFormatter" in type(handler.formatter).__name__


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "argspect.log"
    setup_logging(mode="cli", log_filename=str(log_file))
    assert any(
        isinstance(handler, logging.FileHandler)
        for handler in logging.getLogger().handlers
    )
    for handler in logging.getLogger().handlers:
        handler.close()


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")
