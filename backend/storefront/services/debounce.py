"""
Quiet-period debouncing for search input.
"""

import threading
from typing import Any, Callable, Optional, Tuple


class Debouncer:
    """Delay ``fn`` until calls stop arriving for ``wait`` seconds.

    Each call cancels the pending one, so only the most recent arguments
    are ever applied. Superseded calls are dropped, not queued.
    """

    def __init__(self, fn: Callable[..., Any], wait: float = 0.25,
                 timer_factory: Callable[..., Any] = threading.Timer):
        self.fn = fn
        self.wait = wait
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer = None
        self._generation = 0
        self._pending_args: Optional[Tuple[tuple, dict]] = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending_args is not None

    def __call__(self, *args, **kwargs) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending_args = (args, kwargs)
            timer = self._timer_factory(self.wait, self._fire, args=(self._generation,))
            # A pending search must not keep the interpreter alive.
            timer.daemon = True
            self._timer = timer
        timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A timer that lost the race with a newer call is stale.
            if generation != self._generation or self._pending_args is None:
                return
            args, kwargs = self._pending_args
            self._timer = None
            self._pending_args = None
        self.fn(*args, **kwargs)

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending_args = None

    def flush(self) -> None:
        """Run the pending call now, if there is one."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            generation = self._generation
        self._fire(generation)
