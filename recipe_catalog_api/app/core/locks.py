"""
Readers/writer lock for in‑memory state shared between request threads.

FastAPI runs synchronous endpoints in a thread pool, so several
handlers may touch the store at the same moment.  ``ReadWriteLock``
lets any number of readers proceed together while a writer runs
alone.  Once a writer is waiting, new readers queue behind it so a
steady flow of reads cannot starve writes.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """Shared‑read / exclusive‑write lock built on ``threading.Condition``."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() called without a matching acquire_read()")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() called without a matching acquire_write()")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the lock exclusively for the duration of the block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    @property
    def readers(self) -> int:
        """Number of threads currently holding the lock in shared mode."""
        with self._cond:
            return self._readers

    @property
    def writers_waiting(self) -> int:
        """Number of threads blocked in ``acquire_write``."""
        with self._cond:
            return self._writers_waiting

    @property
    def write_held(self) -> bool:
        with self._cond:
            return self._writer
