"""
Core utilities that are loaded into the root namespace or used internally.
"""

import os
import re
import sys
import logging
from contextlib import contextmanager


# %% Logging


logger = logging.getLogger("lifecanvas")
logger.setLevel(logging.WARNING)


def error_message_hash(message):
    # Remove object ids, which are different for each instance
    message = re.sub(r" at 0x[0-9a-fA-F]+", "", message)
    return hash(message)


_error_counts = {}


@contextmanager
def log_exception(kind):
    """Context manager to log any exceptions, but only log a one-liner
    for subsequent occurrences of the same error to avoid spamming by
    repeating errors in e.g. a timer callback.
    """
    try:
        yield
    except Exception as err:
        # Store exc info for postmortem debugging
        exc_info = list(sys.exc_info())
        exc_info[2] = exc_info[2].tb_next  # skip *this* function
        sys.last_type, sys.last_value, sys.last_traceback = exc_info
        # Show traceback, or a one-line summary
        msg = str(err)
        msgh = error_message_hash(msg)
        if msgh not in _error_counts:
            # Provide the exception, so the default logger prints a stacktrace.
            # IDE's can get the exception from the root logger for PM debugging.
            _error_counts[msgh] = 1
            logger.error(kind, exc_info=err)
        else:
            # We've seen this message before, return a one-liner instead.
            _error_counts[msgh] = count = _error_counts[msgh] + 1
            msg = kind + " " + msg.split("\n")[0].strip()
            msg = msg if len(msg) <= 70 else msg[:69] + "…"
            logger.error(msg + f" ({count})")


# %% Environment


TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


def get_env_int(name, default, *, minimum=1):
    """Get an integer setting from the environment, or the default.

    Invalid values produce a warning and fall back to the default.
    """
    raw = os.getenv(name, None)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer.")
        return default
    if value < minimum:
        logger.warning(f"Ignoring {name}={raw!r}: must be >= {minimum}.")
        return default
    return value


def get_env_bool(name, default):
    """Get a boolean setting from the environment, or the default."""
    raw = os.getenv(name, None)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    elif value in FALSE_VALUES:
        return False
    logger.warning(f"Ignoring {name}={raw!r}: expected one of {sorted(TRUE_VALUES)}.")
    return default


# %% Validation


def check_positive_int(name, value):
    """Check that value is an int >= 1 (bools and floats are rejected), and return it as int."""
    if isinstance(value, bool) or not hasattr(type(value), "__index__"):
        raise ValueError(f"{name} must be an int, not {value!r}.")
    value = int(value.__index__())
    if value < 1:
        raise ValueError(f"{name} must be >= 1, not {value}.")
    return value
