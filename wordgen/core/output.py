"""
Output sink for generated candidates.
"""

import sys
import threading
from typing import Optional, TextIO

from tqdm import tqdm


class OutputSink:
    """Line writer shared by all generators and workers

    Each candidate goes out as one write of a complete line, made under a
    lock, so concurrent workers interleave whole lines only.
    """

    def __init__(self, stream: Optional[TextIO] = None, progress: Optional[tqdm] = None):
        """Initialize with an output stream (stdout by default) and an optional progress bar"""
        self.stream = stream if stream is not None else sys.stdout
        self.progress = progress
        self.count = 0
        self._lock = threading.Lock()

    def emit(self, candidate: str) -> None:
        """Write one candidate line"""
        with self._lock:
            self.stream.write(candidate + "\n")
            self.count += 1
            if self.progress is not None:
                self.progress.update(1)

    def close(self) -> None:
        """Flush the stream and close the progress bar"""
        try:
            self.stream.flush()
        finally:
            if self.progress is not None:
                self.progress.close()
                self.progress = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
