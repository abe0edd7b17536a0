"""
Telemetry: text labels that report on a running simulation.
"""

__all__ = ["Telemetry"]

from ._coreutils import logger
from ._enums import RunState


class Telemetry:
    """A collection of optional text outputs for an animator.

    Each label is a callable that accepts a string, e.g. a method that sets
    the text of a widget, or ``print``. Labels that are not given are skipped.

    Arguments:
        rate (callable | None): receives the measured rate, e.g. "12.5 frames per second.",
            or "Infinity frames per second." when a step took no measurable time.
        iterations (callable | None): receives the iteration count, e.g. "42 iterations.".
        speed (callable | None): receives the target speed, e.g. "3 iterations per second.".
        run_state (callable | None): receives the label for a pause button:
            "Pause" while running, "Restart" while paused.
    """

    def __init__(self, *, rate=None, iterations=None, speed=None, run_state=None):
        self._labels = {}
        for name, label in (
            ("rate", rate),
            ("iterations", iterations),
            ("speed", speed),
            ("run_state", run_state),
        ):
            if label is not None and not callable(label):
                raise TypeError(f"Telemetry label {name!r} must be callable.")
            self._labels[name] = label

    def _set_text(self, name, text):
        label = self._labels[name]
        if label is not None:
            label(text)

    def publish_step(self, fps, iterations):
        """Publish the measured rate and iteration count after a step."""
        rate = "Infinity" if fps == float("inf") else f"{fps}"
        self._set_text("rate", f"{rate} frames per second.")
        self.publish_iterations(iterations)

    def publish_iterations(self, iterations):
        self._set_text("iterations", f"{iterations} iterations.")

    def publish_speed(self, ips):
        logger.debug(f"Target speed is now {ips} iterations per second.")
        self._set_text("speed", f"{ips} iterations per second.")

    def publish_run_state(self, run_state):
        if run_state not in RunState:
            raise ValueError(f"Invalid run state {run_state!r}.")
        logger.debug(f"Animator is now {run_state}.")
        self._set_text("run_state", "Pause" if run_state == RunState.running else "Restart")
