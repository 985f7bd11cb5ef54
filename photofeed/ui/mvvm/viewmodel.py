"""
MVVM ViewModel Infrastructure.

Provides a single base class for ViewModels with property change notification.
"""
import asyncio
from typing import Set

from loguru import logger

from photofeed.ui.mvvm.bindable import BindableBase


class BaseViewModel(BindableBase):
    """
    Base class for ViewModels.

    Extends BindableBase with ownership of background asyncio tasks, so a
    ViewModel can start async commands and cancel them on shutdown.

    Example:
        class MyViewModel(BaseViewModel):
            nameChanged = Signal(str)
            name = BindableProperty(default="")
    """

    def __init__(self):
        super().__init__()
        self._tasks: Set[asyncio.Task] = set()

    def run_async(self, coro) -> asyncio.Task:
        """
        Schedule a coroutine on the running loop and keep a reference to it.

        Must be called while an event loop is running (qasync in the app).
        """
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.opt(exception=exc).error(f"{type(self).__name__}: background task failed")

    def cancel_tasks(self) -> None:
        """Cancel every outstanding background task."""
        for task in list(self._tasks):
            task.cancel()

    @property
    def pending_tasks(self) -> int:
        return len(self._tasks)
