"""Deadlines and cooperative cancellation for Kubernetes API calls."""
import threading
import time
from typing import Callable, Optional


class RequestContext:
    """A caller-supplied deadline plus a cancellation flag.

    Derived contexts share the parent's cancellation flag and can only
    shorten the deadline, never extend it.
    """

    def __init__(self, deadline: Optional[float] = None,
                 clock: Callable[[], float] = time.monotonic,
                 _cancelled: Optional[threading.Event] = None):
        self.deadline = deadline
        self._clock = clock
        self._cancelled = _cancelled or threading.Event()

    @classmethod
    def background(cls, clock: Callable[[], float] = time.monotonic) -> "RequestContext":
        """A context with no deadline."""
        return cls(clock=clock)

    @classmethod
    def with_timeout(cls, seconds: float,
                     clock: Callable[[], float] = time.monotonic) -> "RequestContext":
        return cls(deadline=clock() + seconds, clock=clock)

    def derive(self, seconds: float) -> "RequestContext":
        """Child context expiring after ``seconds`` or at the parent deadline, whichever is first."""
        deadline = self._clock() + seconds
        if self.deadline is not None:
            deadline = min(deadline, self.deadline)
        return RequestContext(deadline=deadline, clock=self._clock, _cancelled=self._cancelled)

    def bounded(self, seconds: float) -> "RequestContext":
        """Reuse this context if its deadline is within ``seconds``, else derive one that is."""
        remaining = self.remaining()
        if remaining is not None and remaining <= seconds:
            return self
        return self.derive(seconds)

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None when unbounded."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - self._clock())

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining <= 0
