"""
lifecanvas: Conway's Game of Life on a bounded grid, animated at a controllable speed.
"""

# ruff: noqa: F401

from ._version import __version__, version_info
from . import _coreutils
from ._enums import RunState
from ._scheduler import BaseScheduler
from .world import CellWorld
from .animator import Animator, new_instance
from .telemetry import Telemetry
from . import sinks


__all__ = [
    "Animator",
    "BaseScheduler",
    "CellWorld",
    "RunState",
    "Telemetry",
    "new_instance",
]
