"""
Append-only file sinks.

Each write is serialized twice: by an in-process mutex (threads of this
process share one file description, so ``flock`` alone does not separate
them) and by an exclusive ``flock`` on the handle (other processes appending
to the same path). Both are held for exactly one write+flush.
"""

import fcntl
import logging
import os
import threading


diag_logger = logging.getLogger("frontline.linelog")


class FileSink:
    """One named, exclusively owned append-mode log file."""

    def __init__(self, name: str, path: str):
        self.name = name
        self.path = os.path.abspath(path)
        self._lock = threading.Lock()
        self._handle = open(self.path, "ab")

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def write(self, line: str) -> bool:
        """
        Append one line. Returns False when the line was dropped.

        A line is dropped when the advisory lock cannot be acquired or the
        write itself fails; neither case is raised to the caller.
        """
        # Lone surrogates (os.fsdecode output) are written as \udcXX
        data = line.encode("utf-8", errors="backslashreplace")
        with self._lock:
            if self._handle.closed:
                diag_logger.debug("Sink %s is closed; dropping line", self.name)
                return False

            fd = self._handle.fileno()
            try:
                fcntl.flock(fd, fcntl.LOCK_EX)
            except OSError as e:
                diag_logger.warning("Could not acquire lock on %s sink; dropping line: %s", self.name, e)
                return False

            try:
                self._handle.write(data)
                self._handle.flush()
                return True
            except OSError as e:
                diag_logger.warning("Write to %s sink failed; dropping line: %s", self.name, e)
                return False
            finally:
                try:
                    fcntl.flock(fd, fcntl.LOCK_UN)
                except OSError as e:
                    # Closing the handle releases the lock anyway
                    diag_logger.debug("Could not release lock on %s sink: %s", self.name, e)

    def close(self) -> None:
        with self._lock:
            if self._handle.closed:
                return
            try:
                self._handle.flush()
            finally:
                self._handle.close()
