from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from dockpin.bundle import load_application
from dockpin.common import (
    AppInfo,
    LoggingConfig,
    create_logger,
    disable_library_logging,
    enable_library_logging,
    setup_cli_logging,
)


@pytest.fixture
def captured() -> Iterator[list[str]]:
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{extra[scope]} | {message}")
    yield messages
    logger.remove(handler_id)
    disable_library_logging()


def test_library_logging_is_disabled_by_default(tmp_path: Path, captured: list[str]) -> None:
    disable_library_logging()

    load_application(tmp_path / "Missing.app")

    assert captured == []


def test_library_logging_can_be_enabled(tmp_path: Path, captured: list[str]) -> None:
    logger.enable("dockpin")

    load_application(tmp_path / "Missing.app")

    assert any(message.startswith("bundle.reader | Loading application bundle") for message in captured)


def test_create_logger_binds_scope(captured: list[str]) -> None:
    create_logger("tests").info("hello")

    assert captured == ["tests | hello\n"]


def test_enable_library_logging_returns_handler_id() -> None:
    handler_id = enable_library_logging("DEBUG")
    try:
        assert isinstance(handler_id, int)
    finally:
        logger.remove(handler_id)
        disable_library_logging()


def test_setup_cli_logging_writes_to_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "dockpin.log"
    config = LoggingConfig(enabled=True, log_level="DEBUG", log_file=str(log_file))

    handler_id = setup_cli_logging(AppInfo(environment="test"), config)
    try:
        load_application(tmp_path / "Missing.app")
    finally:
        logger.remove(handler_id)
        disable_library_logging()

    contents = log_file.read_text()
    assert "CLI logging initialized" in contents
    assert "Loading application bundle" in contents


def test_logging_config_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError):
        LoggingConfig.model_validate({"level": "DEBUG"})
