"""
Worker module for wordgen.

A worker enumerates every combination that starts with one fixed letter.
Workers run on their own threads and write straight to the shared sink.
"""

import threading
from typing import Optional

from .generator import CombinationGenerator
from .output import OutputSink


class WorkerSlot:
    """One running combination sub-task and its completion tracking"""

    def __init__(self, letter: str, remaining: int):
        self.letter = letter
        self.remaining = remaining
        self.finished = threading.Event()
        self.error: Optional[BaseException] = None
        self.thread: Optional[threading.Thread] = None

    def done(self) -> bool:
        """Whether the worker has signalled completion"""
        return self.finished.is_set()

    def join(self, timeout: Optional[float] = None) -> None:
        if self.thread is not None:
            self.thread.join(timeout)

    def __repr__(self) -> str:
        state = "done" if self.done() else "running"
        return f"WorkerSlot(letter={self.letter!r}, remaining={self.remaining}, {state})"


def combination_worker(alphabet: str,
                       slot: WorkerSlot,
                       sink: OutputSink,
                       admission: threading.Semaphore) -> None:
    """Worker thread body that emits every combination beginning with slot.letter

    Args:
        alphabet: Alphabet to draw the remaining characters from
        slot: Slot tracking this worker; receives any error raised
        sink: Output sink to write candidates to
        admission: Semaphore released once the worker is finished
    """
    try:
        generator = CombinationGenerator(alphabet, slot.remaining, prefix=slot.letter)
        generator.generate(sink.emit)
    except Exception as e:
        # Surfaced by the dispatcher when it reclaims the slot
        slot.error = e
    finally:
        slot.finished.set()
        admission.release()
