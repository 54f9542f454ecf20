from __future__ import annotations

from collections.abc import Iterable

from PySide6.QtCore import QRunnable, QThreadPool
from loguru import logger

from splitconfig.infrastructure import file_io


class _WriteTask(QRunnable):
    """QRunnable writing one encoded document to disk.

    Failures are appended to the shared `errors` list in the order they
    happen; the runner reports the first one after the pool drains.
    """

    def __init__(self, *, path: str, data: bytes, errors: list[OSError]) -> None:
        super().__init__()
        self.setAutoDelete(False)
        self._path = path
        self._data = data
        self._errors = errors

    def run(self) -> None:  # type: ignore[override]
        try:
            file_io.write_bytes(self._path, self._data)
        except OSError as ex:
            logger.error("Write failed for {}: {}", self._path, ex)
            self._errors.append(ex)


class FileWriteRunner:
    """Writes a batch of files concurrently and waits for all of them.

    Each call uses its own pool so that a save never waits on unrelated work
    queued on the global instance.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        self._max_workers = max_workers

    def write_all(self, files: Iterable[tuple[str, bytes]]) -> None:
        """Write every (path, data) pair; raise the first `OSError` observed."""
        pool = QThreadPool()
        if self._max_workers:
            pool.setMaxThreadCount(self._max_workers)
        errors: list[OSError] = []
        tasks = [_WriteTask(path=path, data=data, errors=errors) for path, data in files]
        for task in tasks:
            pool.start(task)
        pool.waitForDone()
        if errors:
            raise errors[0]
