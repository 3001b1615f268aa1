"""Tests for application startup, logging and shutdown."""

import logging

import pygame
import pytest

import frame_loop
import main
import visualization
from utils import setup_logging


@pytest.fixture
def quiet_config(tmp_path):
    return {"level": "DEBUG", "log_file": str(tmp_path / "logs" / "starfield.log")}


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for console and rotating file logging."""

    def test_creates_log_file_and_handlers(self, quiet_config, tmp_path) -> None:
        setup_logging(quiet_config)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        logging.info("hello starfield")
        for handler in root.handlers:
            handler.flush()
        assert "hello starfield" in (tmp_path / "logs" / "starfield.log").read_text()

    def test_console_only_when_no_log_file(self) -> None:
        setup_logging({"level": "warning", "log_file": ""})
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_repeated_setup_does_not_duplicate_handlers(self, quiet_config) -> None:
        setup_logging(quiet_config)
        setup_logging(quiet_config)
        assert len(logging.getLogger().handlers) == 2


class TestMain:
    """Tests for the application entry point."""

    def test_runs_and_exits_cleanly(self, monkeypatch, quiet_config) -> None:
        original_run = frame_loop.FrameLoop.run
        monkeypatch.setattr(main, "LOGGING", quiet_config)
        monkeypatch.setattr(main, "WARM_UP_STEPS", 10)
        monkeypatch.setattr(frame_loop.FrameLoop, "run",
                            lambda self, max_frames=None: original_run(self, max_frames=3))

        assert main.main() == 0
        assert not pygame.get_init()

    def test_display_failure_is_fatal(self, monkeypatch, quiet_config) -> None:
        def broken_display(*args, **kwargs):
            raise pygame.error("no video device")

        monkeypatch.setattr(main, "LOGGING", quiet_config)
        monkeypatch.setattr(main, "WARM_UP_STEPS", 0)
        monkeypatch.setattr(visualization, "Display", broken_display)

        assert main.main() == 1
