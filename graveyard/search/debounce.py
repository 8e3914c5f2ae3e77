"""
Debounced Search

Runs a search only after typing has paused. Each schedule() call
replaces the previous one: its timer is cancelled and its future is
cancelled too, so only the most recent query ever surfaces results.
"""

import threading
import time
from concurrent.futures import Future
from typing import Callable, Optional

from graveyard.configs import get_logger
from graveyard.configs.constants import DEBOUNCE_MS
from graveyard.exceptions import SchedulerClosedError, SearchSupersededError
from graveyard.search.scoring import SearchResult

logger = get_logger("search.debounce")

SearchFn = Callable[[str], list[SearchResult]]


class DebouncedSearch:
    """
    Cancellable-timer wrapper around a search function.

    A future returned by schedule() either resolves with the results for
    its query, is cancelled (superseded before it started), or fails with
    SearchSupersededError (superseded while its search was running).

    Done callbacks run with the scheduler locked; they may call
    schedule() from the same thread.
    """

    def __init__(self, search_fn: SearchFn, delay_ms: float = DEBOUNCE_MS):
        """
        Args:
            search_fn: Called with the query once the quiet interval elapses
            delay_ms: Quiet interval in milliseconds
        """
        self._search_fn = search_fn
        self._delay = delay_ms / 1000.0
        self._lock = threading.RLock()
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[Future] = None
        self._generation = 0
        self._closed = False

    @property
    def delay_ms(self) -> float:
        return self._delay * 1000.0

    def schedule(self, query: str) -> Future:
        """
        Schedule a search for query, superseding any pending one.

        Returns:
            Future resolving to the list of SearchResults

        Raises:
            SchedulerClosedError: close() has been called
        """
        future: Future = Future()
        with self._lock:
            if self._closed:
                raise SchedulerClosedError("Debounced search is closed")
            self._drop_pending()
            self._generation += 1
            timer = threading.Timer(
                self._delay, self._run, args=(self._generation, query, future)
            )
            timer.daemon = True
            self._timer = timer
            self._pending = future
        timer.start()
        return future

    def cancel(self) -> None:
        """Drop the pending search, if any, and invalidate one in flight."""
        with self._lock:
            self._generation += 1
            self._drop_pending()

    def close(self) -> None:
        """Cancel pending work and refuse further scheduling."""
        with self._lock:
            self._closed = True
            self._generation += 1
            self._drop_pending()

    def __enter__(self) -> "DebouncedSearch":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _drop_pending(self) -> None:
        # Caller holds self._lock
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._pending is not None:
            if self._pending.cancel():
                logger.debug("Pending search superseded before it started")
            self._pending = None

    def _run(self, generation: int, query: str, future: Future) -> None:
        with self._lock:
            if generation != self._generation:
                return
            if not future.set_running_or_notify_cancel():
                return
            self._timer = None
            self._pending = None

        start_time = time.time()
        try:
            results = self._search_fn(query)
        except Exception as e:
            future.set_exception(e)
            return
        elapsed = time.time() - start_time

        # Resolve while holding the lock so no schedule() lands between the
        # generation check and the result
        with self._lock:
            if generation != self._generation:
                logger.debug(f"Discarding results for superseded query {query!r}")
                future.set_exception(SearchSupersededError(query))
                return
            logger.debug(f"Debounced search {query!r} finished in {elapsed*1000:.1f}ms")
            future.set_result(results)
