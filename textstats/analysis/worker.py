import queue
import threading
from typing import NamedTuple

from textstats.database.repositories.base import BaseTextRepository
from textstats.logging.logger import Log
from textstats.metrics.text_metrics import analyze_text


class _Notification(NamedTuple):
    text_id: int
    text: str


class WorkerState:
    """Running -> ShuttingDown. The transition is one-way."""

    def __init__(self) -> None:
        self._shutting_down = threading.Event()

    @property
    def is_shutting_down(self) -> bool:
        return self._shutting_down.is_set()

    def begin_shutdown(self) -> bool:
        """Enter ShuttingDown. Returns False if already there."""
        if self._shutting_down.is_set():
            return False
        self._shutting_down.set()
        return True


class AnalysisWorker:
    """Computes text metrics off the request path and writes them back.

    Notifications go onto an unbounded queue drained by ``concurrency``
    daemon threads. Processing is at-most-once: a failed write is logged and
    the record stays pending.
    """

    def __init__(
        self,
        repository: BaseTextRepository,
        concurrency: int = 1,
        state: WorkerState | None = None,
    ) -> None:
        self._repository = repository
        self._concurrency = max(1, concurrency)
        self._state = state if state is not None else WorkerState()
        self._queue: queue.Queue[_Notification | None] = queue.Queue()
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()

    @property
    def state(self) -> WorkerState:
        return self._state

    @property
    def pending_count(self) -> int:
        """Notifications queued but not yet picked up by a consumer."""
        return self._queue.qsize()

    def start(self) -> None:
        """Spawn the consumer threads. No-op if started or shutting down."""
        with self._lock:
            if self._threads or self._state.is_shutting_down:
                return
            for index in range(self._concurrency):
                thread = threading.Thread(
                    target=self._consume,
                    name=f"analysis-worker-{index}",
                    daemon=True,
                )
                thread.start()
                self._threads.append(thread)
        Log.info(f"Text analysis worker started with {self._concurrency} consumer(s)")

    def notify_created(self, text_id: int, text: str) -> None:
        """Schedule analysis of a new record and return immediately."""
        if self._state.is_shutting_down:
            Log.debug(f"Dropping notification for text {text_id}: worker is shutting down")
            return
        self._queue.put(_Notification(text_id, text))

    def process(self, text_id: int, text: str) -> None:
        """Analyze one record and persist all metrics in a single update."""
        if self._state.is_shutting_down:
            Log.info(f"Skipping text analysis for ID {text_id} due to shutdown")
            return

        Log.info(f"Processing text analysis for ID {text_id}")
        try:
            metrics = analyze_text(text)
            if self._state.is_shutting_down:
                Log.info(f"Discarding text analysis for ID {text_id} due to shutdown")
                return
            updated = self._repository.update_by_id(
                text_id, {**metrics.as_fields(), "done": True}
            )
        except Exception as exc:
            Log.error(f"Error processing text analysis for ID {text_id}: {exc}")
            return

        if updated is None:
            Log.warning(f"Text {text_id} disappeared before its analysis was stored")
            return
        Log.info(f"Text analysis completed for ID {text_id}")

    def wait_until_idle(self) -> None:
        """Block until every queued notification has been processed.

        Only returns once consumers are running; call ``start()`` first.
        """
        self._queue.join()

    def shutdown(self, timeout: float | None = 5.0) -> None:
        """Stop accepting work and let consumers exit.

        Queued notifications are still dequeued but their writes are skipped.
        """
        if not self._state.begin_shutdown():
            return
        Log.info("Shutting down text analysis worker...")
        with self._lock:
            threads = list(self._threads)
        for _ in threads:
            self._queue.put(None)
        for thread in threads:
            thread.join(timeout)
            if thread.is_alive():
                Log.warning(f"{thread.name} did not stop within {timeout}s")
        Log.info("Text analysis worker shutdown complete")

    def _consume(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is None:
                    return
                self.process(item.text_id, item.text)
            finally:
                self._queue.task_done()
