"""Collapse rapid successive calls into the most recent one."""

import threading
from typing import Any, Callable, Optional, Tuple

import structlog

logger = structlog.get_logger(__name__)


class Debouncer:
    """Runs only the latest scheduled call once a quiescence window has passed."""

    def __init__(self, delay: float) -> None:
        """
        Initialize the debouncer.

        Args:
            delay: Quiescence window in seconds
        """
        self.delay = delay
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[Tuple[Callable[..., Any], tuple, dict]] = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        """Whether a call is waiting to run."""
        with self._lock:
            return self._pending is not None

    def call(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        """Schedule ``func``, replacing any call still waiting."""
        with self._lock:
            self._cancel_timer()
            self._pending = (func, args, kwargs)
            self._timer = threading.Timer(
                self.delay, self._fire, args=(self._generation,)
            )
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        """Drop the waiting call, if any."""
        with self._lock:
            self._cancel_timer()
            self._pending = None

    def flush(self) -> Any:
        """Run the waiting call now, on the calling thread."""
        with self._lock:
            self._cancel_timer()
            pending, self._pending = self._pending, None

        if pending is None:
            return None

        func, args, kwargs = pending
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.error("Debounced call failed", error=str(e), exc_info=True)
            raise

    def _cancel_timer(self) -> None:
        # A timer already past its wait sees a stale generation and does nothing
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            pending, self._pending = self._pending, None
            self._timer = None

        if pending is None:
            return

        func, args, kwargs = pending
        try:
            func(*args, **kwargs)
        except Exception as e:
            # Runs on the timer thread; nothing upstream to re-raise to
            logger.error("Debounced call failed", error=str(e), exc_info=True)
