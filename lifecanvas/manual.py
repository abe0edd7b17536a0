"""
A scheduler that is clocked by hand. Useful for tests, and for stepping a
simulation from code that has its own notion of time.
"""

__all__ = ["ManualScheduler"]

from ._scheduler import BaseScheduler


class ManualScheduler(BaseScheduler):
    """A scheduler with a virtual clock, advanced with ``advance_time()``.

    No time passes unless ``advance_time()`` is called; callbacks that fall
    due are then called in chronological order. This makes it fully
    deterministic.
    """

    def __init__(self):
        super().__init__()
        self._time_ns = 0
        self._timers = {}
        self._timer_counter = 0

    @property
    def time(self):
        """The current virtual time, in seconds."""
        return self._time_ns / 1e9

    def _rc_arm(self, interval, callback):
        self._timer_counter += 1
        token = self._timer_counter
        # [start_ns, interval, tick count, next due_ns, callback]
        self._timers[token] = [self._time_ns, interval, 1, None, callback]
        self._update_due_time(self._timers[token])
        return token

    def _rc_cancel(self, token):
        self._timers.pop(token, None)

    def _update_due_time(self, timer):
        # Due times are computed from the start, in integer nanoseconds, so
        # that no rounding errors accumulate over many ticks.
        start_ns, interval, n = timer[:3]
        timer[3] = start_ns + round(n * interval * 1e9)

    def advance_time(self, delay):
        """Move the virtual clock forward, calling any callbacks that fall due.

        Returns the number of callbacks that were called.
        """
        if delay < 0:
            raise ValueError("Cannot move time backwards.")
        end_ns = self._time_ns + round(delay * 1e9)
        n_calls = 0
        while True:
            due = [
                (timer[3], token)
                for token, timer in self._timers.items()
                if timer[3] <= end_ns
            ]
            if not due:
                break
            due_ns, token = min(due)
            timer = self._timers[token]
            self._time_ns = due_ns
            timer[2] += 1
            self._update_due_time(timer)
            timer[4]()
            n_calls += 1
        self._time_ns = end_ns
        return n_calls
