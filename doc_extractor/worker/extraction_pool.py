import threading
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

from doc_extractor.extraction.extractor import TextExtractor
from doc_extractor.logging.logger import Log
from doc_extractor.processor.exceptions import ExtractionFailedError


class ExtractionPool:
    """Runs text extraction on a bounded thread pool with a per-call timeout.

    Callers wait for a free worker before submitting, so the timeout covers
    only the running call and never time spent queued. A timed-out call keeps
    its worker until the engine returns; its result is discarded.
    """

    def __init__(
        self,
        extractor: TextExtractor,
        max_workers: int = 4,
        timeout_seconds: float | None = 60.0,
    ) -> None:
        self._extractor = extractor
        self._timeout_seconds = timeout_seconds
        self._slots = threading.BoundedSemaphore(max_workers)
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="extraction",
        )

    def extract(self, content: bytes, mime_type: str) -> str:
        """Submit one extraction and block until it finishes or times out.

        Raises:
            ExtractionFailedError: on engine failure or timeout.
            UnsupportedFileTypeError: if no engine handles ``mime_type``.
        """
        self._slots.acquire()
        try:
            future = self._executor.submit(self._extractor.extract, content, mime_type)
        except BaseException:
            self._slots.release()
            raise
        future.add_done_callback(self._release_slot)
        try:
            return future.result(timeout=self._timeout_seconds)
        except FutureTimeoutError as exc:
            Log.error(f"Extraction of {mime_type} timed out after {self._timeout_seconds}s")
            raise ExtractionFailedError(
                f"Text extraction failed: timed out after {self._timeout_seconds:g} seconds"
            ) from exc

    def _release_slot(self, _future: Future[str]) -> None:
        self._slots.release()

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
