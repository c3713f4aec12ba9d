"""Reader-Writer lock implementation for concurrent access control.

Guards the inventory store's ISBN map and its author/title indexes: many
lookups and borrows may hold the lock together, while inserting a new ISBN
takes it exclusively.
"""

import threading
from collections.abc import Generator
from contextlib import contextmanager


class RWLock:
    """Reader-writer lock with writer priority to prevent starvation.

    Key properties:
    - Multiple readers can acquire the lock simultaneously
    - Only one writer can hold the lock at a time
    - Writers block all readers and other writers
    - Writers have priority over new readers to prevent starvation
    """

    def __init__(self) -> None:
        self._read_ready = threading.Condition(threading.Lock())
        self._readers = 0
        self._writers_waiting = 0
        self._writer_active = False

    @contextmanager
    def read_lock(self) -> Generator[None, None, None]:
        """Context manager for acquiring a read lock.

        Usage:
            with rwlock.read_lock():
                record = records.get(isbn)
        """
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write_lock(self) -> Generator[None, None, None]:
        """Context manager for acquiring a write lock.

        Usage:
            with rwlock.write_lock():
                records[isbn] = record
        """
        self._acquire_write()
        try:
            yield
        finally:
            self._release_write()

    def _acquire_read(self) -> None:
        with self._read_ready:
            # Wait while there's an active writer or writers waiting
            while self._writer_active or self._writers_waiting > 0:
                self._read_ready.wait()
            self._readers += 1

    def _release_read(self) -> None:
        with self._read_ready:
            self._readers -= 1
            if self._readers == 0:
                self._read_ready.notify_all()

    def _acquire_write(self) -> None:
        with self._read_ready:
            self._writers_waiting += 1
            try:
                while self._readers > 0 or self._writer_active:
                    self._read_ready.wait()
                self._writer_active = True
            finally:
                self._writers_waiting -= 1

    def _release_write(self) -> None:
        with self._read_ready:
            self._writer_active = False
            self._read_ready.notify_all()

    @property
    def reader_count(self) -> int:
        """Get current number of active readers."""
        with self._read_ready:
            return self._readers

    @property
    def writer_active(self) -> bool:
        """Check if a writer is currently active."""
        with self._read_ready:
            return self._writer_active
