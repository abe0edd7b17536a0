"""
Implements a scheduler on top of asyncio.
"""

__all__ = ["AsyncioScheduler"]


from ._scheduler import BaseScheduler
from .utils.asyncs import periodic


class AsyncioScheduler(BaseScheduler):
    """A scheduler that runs each registration as a task in an asyncio loop.

    If no loop is given, the running loop is used, or a new loop is created.
    The loop is only looked up when the first registration is armed.
    """

    _the_loop = None

    def __init__(self, loop=None):
        super().__init__()
        self._the_loop = loop
        self.__tasks = set()

    @property
    def _loop(self):
        if self._the_loop is None:
            import asyncio

            try:
                self._the_loop = asyncio.get_running_loop()
            except Exception:
                pass
            if self._the_loop is None:
                self._the_loop = asyncio.new_event_loop()
                asyncio.set_event_loop(self._the_loop)
        return self._the_loop

    def _rc_arm(self, interval, callback):
        task = self._loop.create_task(periodic(interval, callback), name="periodic")
        self.__tasks.add(task)
        task.add_done_callback(self.__tasks.discard)
        return task

    def _rc_cancel(self, task):
        task.cancel()  # is a no-op if the task is no longer running
