"""
Tests for application wiring (without entering the event loop).
"""
from photofeed.core.config import ConfigManager
from photofeed.core.logging import setup_logging
from photofeed.main import build_window
from loguru import logger


def test_build_window_from_config(qapp, tmp_path):
    config = ConfigManager(str(tmp_path / "config.json"))
    config.update("window", "title", "Cats Only")

    window = build_window(config)
    try:
        assert window.windowTitle() == "Cats Only"
        assert window.viewmodel.debouncer.interval == 800
    finally:
        window.viewmodel.shutdown()
        window.deleteLater()


def test_config_changes_reach_viewmodel(qapp, tmp_path):
    config = ConfigManager(str(tmp_path / "config.json"))
    window = build_window(config)
    try:
        config.update("search", "debounce_ms", 120)
        assert window.viewmodel.debouncer.interval == 120
    finally:
        window.viewmodel.shutdown()
        window.deleteLater()


def test_setup_logging_creates_log_dir(tmp_path):
    log_dir = tmp_path / "logs"

    setup_logging(debug_mode=False, log_dir=str(log_dir))

    assert log_dir.is_dir()
    logger.remove()


def test_feed_settings_reach_thumbnail_downloads(qapp, tmp_path):
    config = ConfigManager(str(tmp_path / "config.json"))
    config.update("feed", "user_agent", "cats-browser/2.0")
    window = build_window(config)
    try:
        assert window.results_view.feed_settings.user_agent == "cats-browser/2.0"

        config.update("feed", "timeout_seconds", 4.0)
        assert window.results_view.feed_settings.timeout_seconds == 4.0
    finally:
        window.viewmodel.shutdown()
        window.deleteLater()
