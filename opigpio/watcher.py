"""Watching GPIO value files and reporting level changes to callbacks."""

from __future__ import annotations

import asyncio
import inspect
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from opigpio.pin import GpioError, GpioPin

log = logging.getLogger(__name__)

Notifier = Callable[[int], Any]


async def _deliver(notifier: Notifier, value: int) -> None:
    result = notifier(value)
    if inspect.isawaitable(result):
        await result


class _ValueFileHandler(FileSystemEventHandler):
    def __init__(self, paths, notify: Callable[[str], None]) -> None:
        super().__init__()
        self._paths = frozenset(paths)
        self._notify = notify

    def on_modified(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        path = os.path.realpath(os.fsdecode(event.src_path))
        if path in self._paths:
            self._notify(path)


async def _dispatch(queue: asyncio.Queue, notifiers: Dict[str, Notifier]) -> None:
    while True:
        path = await queue.get()
        try:
            content = await asyncio.to_thread(Path(path).read_text)
        except OSError as exc:
            log.error("Error reading GPIO value: %s", exc)
            continue
        level = 1 if "1" in content.strip() else 0
        try:
            await _deliver(notifiers[path], level)
        except Exception as exc:  # a failing callback must not stop the watcher
            log.warning("Error sending message: %s", exc)


class GpioWatcher:
    """Watches several pins and calls each pin's notifier with its new level.

    Every notifier is first called with the pin's current value. Use as an
    async context manager, or call :meth:`close` to stop watching.
    """

    def __init__(self, observer: Observer, task: asyncio.Task) -> None:
        self._observer = observer
        self._task = task
        self._closed = False

    @classmethod
    async def create(cls, pin_map: Mapping[GpioPin, Notifier]) -> GpioWatcher:
        """Start watching every pin in ``pin_map``, mapping pins to notifiers."""
        for pin in pin_map:
            if not pin.supports_watch():
                raise GpioError(f"Pin {pin.pin_number} does not support watch")

        notifiers: Dict[str, Notifier] = {}
        for pin, notifier in pin_map.items():
            try:
                initial = await pin.read()
            except GpioError as exc:
                raise GpioError("Failed to read the initial value for the pin") from exc
            try:
                await _deliver(notifier, initial)
            except Exception as exc:
                raise GpioError("Failed to notify the initial value") from exc
            notifiers[os.path.realpath(pin.value_path())] = notifier

        loop = asyncio.get_running_loop()
        queue: asyncio.Queue = asyncio.Queue()

        def notify(path: str) -> None:
            try:
                loop.call_soon_threadsafe(queue.put_nowait, path)
            except RuntimeError:
                pass  # the loop has gone away

        handler = _ValueFileHandler(notifiers, notify)
        observer = Observer()
        try:
            for directory in {os.path.dirname(path) for path in notifiers}:
                observer.schedule(handler, directory, recursive=False)
            observer.start()
        except OSError as exc:
            observer.stop()
            raise GpioError("Failed to watch the pin value files") from exc

        task = loop.create_task(_dispatch(queue, notifiers))
        return cls(observer, task)

    def close(self) -> None:
        """Stop watching; further changes are not reported."""
        if self._closed:
            return
        self._closed = True
        self._task.cancel()
        self._observer.stop()
        self._observer.join()

    async def __aenter__(self) -> GpioWatcher:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()