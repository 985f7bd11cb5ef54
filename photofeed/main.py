import sys
import asyncio

import qasync
from PySide6.QtWidgets import QApplication
from loguru import logger

from photofeed.core.config import ConfigManager
from photofeed.core.logging import setup_logging
from photofeed.feed.client import FeedClient
from photofeed.ui.main_window import MainWindow
from photofeed.ui.viewmodels.search_viewmodel import SearchViewModel


def build_window(config: ConfigManager) -> MainWindow:
    """Wire client, ViewModel and window from configuration."""
    client = FeedClient(config.data.feed)
    viewmodel = SearchViewModel(client, config.data.search)

    window = MainWindow(viewmodel, config.data.window, config.data.feed)

    def on_config_changed(section, key, value):
        if section == "search":
            viewmodel.apply_settings(config.data.search)
        elif section == "feed":
            client.settings = config.data.feed
            window.results_view.feed_settings = config.data.feed

    config.on_changed.connect(on_config_changed)

    return window


def main(config_path: str = "config.json") -> int:
    config = ConfigManager(config_path)
    setup_logging(config.data.general.debug_mode, config.data.general.log_dir)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setStyle(config.data.general.theme)

    # qasync combines the asyncio and Qt event loops
    loop = qasync.QEventLoop(app)
    asyncio.set_event_loop(loop)

    app_close_event = asyncio.Event()
    app.aboutToQuit.connect(app_close_event.set)

    window = build_window(config)
    window.show()
    logger.info("Application Started")

    with loop:
        loop.run_until_complete(app_close_event.wait())

    return 0


if __name__ == "__main__":
    sys.exit(main())
