"""
A sink is the display that a cell world is rendered to.
"""

from .basesink import *  # noqa: F403
from .bitmapsink import *  # noqa: F403

__all__ = ["BaseSink", "BitmapSink"]
