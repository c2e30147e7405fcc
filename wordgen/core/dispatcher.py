"""
Concurrency dispatcher for wordgen.

This module spreads combination generation over a bounded number of worker
threads, one sub-task per first letter of the alphabet.
"""

import threading
from typing import Iterable, List

from .generator import CombinationGenerator
from .output import OutputSink
from .worker import WorkerSlot, combination_worker
from wordgen.utils.exceptions import ConfigError, WorkerError
from wordgen.utils.logger import default_logger


class CombinationDispatcher:
    """Runs combination generation for a list of lengths over a worker pool

    With a single thread everything runs inline on the calling thread, in
    strict alphabet order. With more threads, each first letter is handed to
    its own worker and the outputs of different workers interleave; only the
    set of emitted candidates is guaranteed to match the sequential run.
    """

    def __init__(self, alphabet: str, sink: OutputSink, threads: int = 1, logger=None):
        """Initialize with the alphabet, an output sink and a worker limit

        Args:
            alphabet: Ordered alphabet to combine
            sink: Output sink shared by all workers
            threads: Maximum number of concurrently running workers
            logger: Optional logger instance
        """
        if threads < 1:
            raise ConfigError(f"Thread count must be at least 1, got {threads}")

        self.alphabet = alphabet
        self.sink = sink
        self.threads = threads
        self.logger = logger or default_logger
        self._slots: List[WorkerSlot] = []

    @property
    def live_slots(self) -> int:
        """Number of workers dispatched and not yet reclaimed"""
        return len(self._slots)

    def get_total_count(self, lengths: Iterable[int]) -> int:
        """Get the number of candidates run() will emit for these lengths"""
        return sum(len(self.alphabet) ** length for length in lengths)

    def run(self, lengths: Iterable[int]) -> None:
        """Generate all combinations for each length in turn

        Every worker for one length has finished before the next length
        starts.

        Raises:
            WorkerError: If a worker failed or could not be started
        """
        for length in lengths:
            self.logger.info(f"Generating {length}-character combinations "
                             f"({len(self.alphabet) ** length:,} candidates)")

            if length == 0 or self.threads == 1:
                CombinationGenerator(self.alphabet, length).generate(self.sink.emit)
            else:
                self._run_parallel(length)

    def _run_parallel(self, length: int) -> None:
        admission = threading.BoundedSemaphore(self.threads)
        failed: List[WorkerSlot] = []

        try:
            for letter in self.alphabet:
                # Blocks until a worker slot is free
                admission.acquire()
                failed.extend(self._reclaim())
                if failed:
                    admission.release()
                    break
                self._dispatch(letter, length - 1, admission)
        finally:
            failed.extend(self._drain())

        if failed:
            slot = failed[0]
            raise WorkerError(
                f"Worker for prefix {slot.letter!r} failed: {slot.error}"
            ) from slot.error

    def _dispatch(self, letter: str, remaining: int, admission: threading.Semaphore) -> None:
        slot = WorkerSlot(letter, remaining)
        # str is immutable, so each worker can hold the alphabet without copying
        slot.thread = threading.Thread(
            target=combination_worker,
            args=(self.alphabet, slot, self.sink, admission),
            name=f"wordgen-worker-{ord(letter)}",
        )
        try:
            slot.thread.start()
        except RuntimeError as e:
            admission.release()
            raise WorkerError(f"Could not start worker for prefix {letter!r}: {e}") from e

        self._slots.append(slot)
        self.logger.debug(f"Dispatched worker for prefix {letter!r} "
                          f"({len(self._slots)}/{self.threads} slots in use)")

    def _reclaim(self) -> List[WorkerSlot]:
        """Join and drop finished workers, returning the ones that failed"""
        finished = [slot for slot in self._slots if slot.done()]
        for slot in finished:
            slot.join()
            self._slots.remove(slot)
        return [slot for slot in finished if slot.error is not None]

    def _drain(self) -> List[WorkerSlot]:
        """Wait for every remaining worker, returning the ones that failed"""
        slots, self._slots = self._slots, []
        for slot in slots:
            slot.join()
        self.logger.debug(f"Drained {len(slots)} remaining workers")
        return [slot for slot in slots if slot.error is not None]
