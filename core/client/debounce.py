"""Debounced search-as-you-type."""

import threading
from collections.abc import Callable, Sequence
from typing import Any

import structlog

from core.constants import SEARCH_DEBOUNCE_SECONDS

logger = structlog.get_logger(__name__)

TimerFactory = Callable[[float, Callable[[], None]], Any]


class SearchDebouncer:
    """Run a search only after input has been quiet for ``delay`` seconds.

    Every keystroke cancels the pending timer and starts a new one. Searches
    already running are not cancelled; each carries the generation it was
    scheduled under and its results are dropped unless it is still the
    latest, so ``results`` always reflects the last query typed.
    """

    def __init__(
        self,
        search: Callable[[str], Sequence[Any]],
        delay: float = SEARCH_DEBOUNCE_SECONDS,
        timer_factory: TimerFactory | None = None,
    ) -> None:
        """Initialize the debouncer.

        Args:
            search: Performs the search for a trimmed query
            delay: Quiet period in seconds
            timer_factory: Builds a startable, cancellable timer; defaults to
                ``threading.Timer``
        """
        self.search = search
        self.delay = delay
        self.results: list[Any] = []
        self.error: str | None = None
        self._timer_factory = timer_factory or threading.Timer
        self._timer: Any = None
        self._generation = 0
        self._lock = threading.Lock()

    def schedule(self, query: str) -> None:
        """Register a keystroke.

        Blank input clears the results immediately without scheduling.
        """
        query = (query or "").strip()
        with self._lock:
            self._generation += 1
            generation = self._generation
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

            if not query:
                self.results = []
                self.error = None
                return

            self._timer = self._timer_factory(
                self.delay, lambda: self._run(query, generation)
            )
            self._timer.start()

    def cancel(self) -> None:
        """Drop the pending search and ignore any in flight."""
        with self._lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _run(self, query: str, generation: int) -> None:
        try:
            results = list(self.search(query))
        except Exception as e:
            logger.warning("debounced_search_failed", query=query, error=str(e))
            with self._lock:
                if generation == self._generation:
                    self.results = []
                    self.error = str(e)
            return

        with self._lock:
            if generation != self._generation:
                logger.debug("debounced_search_stale", query=query)
                return
            self.results = results
            self.error = None
