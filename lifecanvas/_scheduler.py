"""
The base scheduler class.
"""

from __future__ import annotations

from itertools import count
from inspect import iscoroutinefunction
from typing import TYPE_CHECKING

from ._coreutils import logger, log_exception

if TYPE_CHECKING:
    from typing import Any, Callable

    CallbackFunction = Callable[[], Any]


class BaseScheduler:
    """The base class for scheduler objects.

    A scheduler calls a callback periodically, at a given interval, until the
    registration is cancelled. The animator uses it to drive the simulation.
    Schedulers can be implemented on top of different event-loops, like
    asyncio and trio, or be clocked manually (e.g. in tests).

    Guarantees that all subclasses must honour:

    * Ticks of one registration never overlap; a callback runs to completion
      before the next tick of that registration.
    * After ``cancel()`` returns, the callback of that registration is not
      called again.
    * Errors in a callback are logged, and do not stop the registration.

    Subclasses implement ``_rc_arm()`` and ``_rc_cancel()``.
    """

    def __init__(self):
        self.__registrations = {}
        self.__handle_counter = count(1)

    def __repr__(self):
        full_class_name = f"{self.__class__.__module__}.{self.__class__.__name__}"
        return f"<{full_class_name} with {len(self.__registrations)} registrations at {hex(id(self))}>"

    def get_active_handles(self) -> list[int]:
        """Get a list of the handles that are currently armed."""
        return list(self.__registrations)

    def arm(self, interval_ms: float, callback: CallbackFunction) -> int:
        """Arrange for a callback to be called every ``interval_ms`` milliseconds.

        Returns a handle that can be passed to ``cancel()``.
        """
        if not callable(callback):
            raise TypeError("arm() expects a callable.")
        elif iscoroutinefunction(callback):
            raise TypeError("arm() expects a normal callable, not an async one.")
        interval_ms = float(interval_ms)
        if not interval_ms > 0:
            raise ValueError(f"arm() expects a positive interval, not {interval_ms}.")

        handle = next(self.__handle_counter)
        registrations = self.__registrations

        def wrapper():
            # Ticks that were already queued when the handle got cancelled are dropped.
            if handle not in registrations:
                return
            with log_exception("Error in scheduled callback:"):
                callback()

        token = self._rc_arm(interval_ms / 1000, wrapper)
        registrations[handle] = token
        logger.debug(f"{self!r} armed handle {handle} at {interval_ms:0.1f} ms.")
        return handle

    def cancel(self, handle: int) -> None:
        """Cancel the registration with the given handle.

        Cancelling an unknown or already cancelled handle is a no-op.
        """
        token = self.__registrations.pop(handle, None)
        if token is not None:
            self._rc_cancel(token)
            logger.debug(f"{self!r} cancelled handle {handle}.")

    def _rc_arm(self, interval: float, callback: CallbackFunction) -> Any:
        """Start calling the callback every ``interval`` seconds.

        * Must return a token, which is passed to ``_rc_cancel()``.
        * The first call happens after one interval, not immediately.
        * No need to catch errors from the callback; that's dealt with
          internally.
        """
        raise NotImplementedError()

    def _rc_cancel(self, token: Any) -> None:
        """Stop the periodic calls associated with the given token."""
        raise NotImplementedError()
