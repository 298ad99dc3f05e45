# rate_limiter.py

import enum
import logging
import math
import threading
import time
from contextlib import contextmanager

from utils.errors import CancelledWait


class TimeUnit(enum.Enum):
    MILLISECONDS = 1
    SECONDS = 1000
    MINUTES = 60 * 1000
    HOURS = 60 * 60 * 1000
    DAYS = 24 * 60 * 60 * 1000

    @property
    def millis(self):
        return self.value

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown time unit: {value!r}") from None


def current_time_millis():
    # Monotonic so a wall clock stepped backwards cannot stall admissions
    return int(time.monotonic() * 1000)


class AdmissionGate:
    """
    Gap-based admission gate for a single endpoint.

    Consecutive admissions are spaced at least window / request_limit
    milliseconds apart. The gate's lock is held from the moment a caller is
    admitted until it calls release(), so dispatches never overlap. Only the
    admitted thread may call record_completion().
    """

    def __init__(self, time_unit, request_limit, clock=None):
        if isinstance(request_limit, bool) or not isinstance(request_limit, int) or request_limit <= 0:
            raise ValueError(f"request_limit must be a positive integer, got {request_limit!r}")

        self.time_unit = TimeUnit.parse(time_unit)
        self.request_limit = request_limit
        self.window_ms = self.time_unit.millis
        self.max_rate = request_limit / self.window_ms
        # Half-up rounding; never below 1 ms or the wait becomes a spin
        self.sleep_quantum_ms = max(1, math.floor(self.window_ms / request_limit + 0.5))

        self._clock = clock or current_time_millis
        self._condition = threading.Condition(threading.Lock())
        self._last_admitted_ms = None
        self._owner = None

    @property
    def last_admitted_ms(self):
        # 0 means "never admitted"
        return self._last_admitted_ms or 0

    def exceeds_limit(self, now):
        if self._last_admitted_ms is None:
            return False
        gap = now - self._last_admitted_ms
        if gap <= 0:
            return True
        return 1.0 / gap > self.max_rate

    def _check_cancelled(self, cancel_event):
        if cancel_event is not None and cancel_event.is_set():
            logging.warning("Admission wait cancelled.")
            raise CancelledWait("Admission wait was cancelled")

    def acquire(self, cancel_event=None):
        quantum = self.sleep_quantum_ms / 1000.0

        # Another caller may be mid-dispatch; keep an eye on the cancel event
        while not self._condition.acquire(timeout=quantum):
            self._check_cancelled(cancel_event)

        try:
            now = self._clock()
            while True:
                self._check_cancelled(cancel_event)
                if not self.exceeds_limit(now):
                    break
                self._pause(quantum)
                now = self._clock()
        except BaseException:
            self._condition.release()
            raise

        self._owner = threading.get_ident()
        return now

    def _pause(self, seconds):
        # Releases the lock while waiting; reacquired before returning
        self._condition.wait(seconds)

    def record_completion(self, timestamp):
        if self._owner != threading.get_ident():
            raise RuntimeError("record_completion() called by a thread that was not admitted")
        if self._last_admitted_ms is None or timestamp > self._last_admitted_ms:
            self._last_admitted_ms = timestamp

    def release(self):
        self._owner = None
        self._condition.release()

    @contextmanager
    def admission(self, cancel_event=None):
        admitted_at = self.acquire(cancel_event)
        try:
            yield admitted_at
        finally:
            self.release()

    def interrupt(self, cancel_event):
        cancel_event.set()
        # A dispatch in progress holds the lock; waiters then see the event
        # on their next timeout instead
        if self._condition.acquire(blocking=False):
            try:
                self._condition.notify_all()
            finally:
                self._condition.release()
