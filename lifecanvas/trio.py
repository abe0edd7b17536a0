"""
Implements a scheduler on top of trio.
"""

__all__ = ["TrioScheduler"]

import trio

from ._scheduler import BaseScheduler
from .utils.asyncs import periodic


class TrioScheduler(BaseScheduler):
    """A scheduler that runs each registration as a task in a trio nursery.

    Each registration gets its own cancel scope, so it can be cancelled
    without affecting the other tasks in the nursery.
    """

    def __init__(self, nursery):
        super().__init__()
        self._nursery = nursery

    def _rc_arm(self, interval, callback):
        cancel_scope = trio.CancelScope()

        async def run_periodic():
            with cancel_scope:
                await periodic(interval, callback)

        self._nursery.start_soon(run_periodic, name="periodic")
        return cancel_scope

    def _rc_cancel(self, cancel_scope):
        # Also works if the task has not started yet: it is cancelled on entering the scope.
        cancel_scope.cancel()
