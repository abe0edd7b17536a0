"""
This module implements the async functionality that schedulers can share.

To give an idea how to implement a generic async sleep function:

.. code-block:: py

    libname = sniffio.current_async_library()
    sleep = sys.modules[libname].sleep

"""

import sys
import time

import sniffio


async def sleep(delay):
    """Generic async sleep. Works with trio and asyncio."""
    libname = sniffio.current_async_library()
    sleep = sys.modules[libname].sleep
    await sleep(delay)


async def periodic(interval, callback):
    """Call the callback every ``interval`` seconds, forever.

    The first call happens after one interval. The schedule is kept relative
    to the start time, so that small delays don't accumulate. When a callback
    takes longer than the interval, the schedule is reset rather than trying
    to catch up with a burst of calls.
    """
    next_time = time.perf_counter() + interval
    while True:
        await sleep(max(0, next_time - time.perf_counter()))
        callback()
        next_time += interval
        now = time.perf_counter()
        if next_time < now:
            next_time = now
