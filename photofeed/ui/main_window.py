"""
Main window: search box, busy indicator, error line and result list.

All state lives in SearchViewModel; the window only binds to it.
"""
from PySide6.QtWidgets import (
    QHBoxLayout, QLabel, QLineEdit, QMainWindow, QPushButton, QVBoxLayout, QWidget
)
from loguru import logger

from photofeed.core.config import FeedSettings, WindowSettings
from photofeed.ui.mvvm.binding import bind, bind_command, BindingMode
from photofeed.ui.viewmodels.search_viewmodel import SearchViewModel
from photofeed.ui.widgets.results_view import ResultsView


class MainWindow(QMainWindow):
    """Single-window photo search view."""

    def __init__(
        self,
        viewmodel: SearchViewModel,
        settings: WindowSettings = None,
        feed_settings: FeedSettings = None,
    ):
        super().__init__()
        self.viewmodel = viewmodel
        self.settings = settings or WindowSettings()
        self._feed_settings = feed_settings

        self.setWindowTitle(self.settings.title)
        self.resize(self.settings.width, self.settings.height)

        self._setup_ui()
        self._setup_bindings()

        logger.info("MainWindow ready")

    def _setup_ui(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)

        search_row = QHBoxLayout()
        search_row.addWidget(QLabel("Search tags:"))

        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("e.g. cats")
        self.search_edit.setClearButtonEnabled(True)
        search_row.addWidget(self.search_edit, 1)

        self.spinner_label = QLabel("...")
        self.spinner_label.setStyleSheet("font-weight: bold;")
        search_row.addWidget(self.spinner_label)

        self.retry_button = QPushButton("Retry")
        search_row.addWidget(self.retry_button)

        layout.addLayout(search_row)

        self.error_label = QLabel()
        self.error_label.setStyleSheet("color: red;")
        self.error_label.setWordWrap(True)
        layout.addWidget(self.error_label)

        self.results_view = ResultsView(self.settings.thumbnail_size, self._feed_settings)
        layout.addWidget(self.results_view, 1)

        self.setCentralWidget(central)

    def _setup_bindings(self):
        vm = self.viewmodel

        bind(vm, "search_term", self.search_edit, "text", mode=BindingMode.TWO_WAY)
        bind(vm, "busy", self.spinner_label, "visible")
        bind(vm, "error_message", self.error_label, "text")
        bind(vm, "error_message", self.error_label, "visible", converter=bool)
        bind(vm, "error_message", self.retry_button, "visible", converter=bool)
        bind(vm, "busy", self.retry_button, "enabled", converter=lambda busy: not busy)
        bind(vm, "results", self.results_view, "results")
        bind_command(vm, "refresh", self.retry_button)

        vm.search_completed.connect(self._on_search_completed)

    def _on_search_completed(self, term: str, count: int):
        self.statusBar().showMessage(f"{count} photos tagged '{term}'")

    def closeEvent(self, event):
        self.viewmodel.shutdown()
        self.results_view.clear()
        super().closeEvent(event)
