"""
The animator drives a cell world: it steps it at a target speed, and renders each generation.
"""

__all__ = ["Animator", "new_instance"]

import time

from ._coreutils import logger, get_env_int, get_env_bool, check_positive_int
from ._enums import RunState
from .telemetry import Telemetry
from .world import CellWorld


class Animator:
    """An animator that can start, pause, advance, reset and speed up the animation of a cell world.

    The animator calls ``world.step()`` and ``sink.render()`` for each
    generation. While running, this is triggered by the scheduler, at
    ``ips`` iterations per second. The animator holds at most one scheduler
    registration at any time. It starts in the paused state.

    Arguments:
        world (CellWorld): the world to animate.
        sink (BaseSink): the display to render each generation to.
        scheduler (BaseScheduler): the scheduler that drives the animation.
        cell_size (int): the size of a cell in pixels. Default 3.
        ips (int): the target speed, in iterations per second. Default 1.
        telemetry (Telemetry | None): labels to report the rate, iterations, speed and run state.
        rearm_when_paused (bool): whether ``increase_speed()`` re-arms the timer
            (and thereby resumes the animation) when it is paused. Default False.

    The defaults can be overridden with the environment variables
    ``LIFECANVAS_CELL_SIZE``, ``LIFECANVAS_IPS`` and ``LIFECANVAS_REARM_WHEN_PAUSED``.
    """

    __animator_kwargs = dict(
        cell_size=3,
        ips=1,
        rearm_when_paused=False,
    )

    def __init__(
        self,
        world,
        sink,
        scheduler,
        *,
        cell_size=None,
        ips=None,
        telemetry=None,
        rearm_when_paused=None,
    ):
        defaults = self.get_defaults()
        cell_size = defaults["cell_size"] if cell_size is None else cell_size
        ips = defaults["ips"] if ips is None else ips
        if rearm_when_paused is None:
            rearm_when_paused = defaults["rearm_when_paused"]

        if not isinstance(world, CellWorld):
            raise TypeError(f"Animator world must be a CellWorld, not {world!r}.")
        cell_size = check_positive_int("Animator cell_size", cell_size)
        ips = check_positive_int("Animator ips", ips)

        self._world = world
        self._sink = sink
        self._scheduler = scheduler
        self._telemetry = telemetry or Telemetry()
        self._cell_size = cell_size
        self._ips = ips
        self._rearm_when_paused = bool(rearm_when_paused)

        self._state = RunState.paused
        self._handle = None
        self._iterations = 0
        self._fps = None

    @classmethod
    def get_defaults(cls):
        """Get the default keyword arguments, taking the environment into account."""
        defaults = dict(cls.__animator_kwargs)
        defaults["cell_size"] = get_env_int("LIFECANVAS_CELL_SIZE", defaults["cell_size"])
        defaults["ips"] = get_env_int("LIFECANVAS_IPS", defaults["ips"])
        defaults["rearm_when_paused"] = get_env_bool(
            "LIFECANVAS_REARM_WHEN_PAUSED", defaults["rearm_when_paused"]
        )
        return defaults

    def __repr__(self):
        return f"<Animator '{self._state}' at {self._ips} ips, {self._iterations} iterations>"

    # %% Properties

    @property
    def world(self):
        """The cell world being animated."""
        return self._world

    @property
    def state(self):
        """The run state, see ``RunState``."""
        return self._state

    @property
    def is_running(self):
        return self._state == RunState.running

    @property
    def ips(self):
        """The target speed, in iterations per second."""
        return self._ips

    @property
    def cell_size(self):
        return self._cell_size

    @property
    def iterations(self):
        """The number of generations computed since the last reset."""
        return self._iterations

    @property
    def fps(self):
        """The rate measured during the last step, or None if no step was made yet."""
        return self._fps

    # %% Timer management

    def _arm(self):
        assert self._handle is None
        self._handle = self._scheduler.arm(1000 / self._ips, self._on_tick)

    def _disarm(self):
        if self._handle is not None:
            self._scheduler.cancel(self._handle)
            self._handle = None

    def _set_state(self, state):
        self._state = state
        self._telemetry.publish_run_state(state)

    def _on_tick(self):
        # A tick can only take effect while running.
        if self._state == RunState.running:
            self.step_once()

    # %% Public API

    def step_once(self):
        """Compute and render one generation, and update the telemetry.

        Returns the population of the new generation.
        """
        t0 = time.perf_counter()
        population = self._world.step()
        self._sink.render(self._world, self._cell_size)
        self._iterations += 1
        elapsed = time.perf_counter() - t0
        self._fps = 1 / elapsed if elapsed > 0 else float("inf")
        self._telemetry.publish_step(self._fps, self._iterations)
        return population

    def start(self):
        """Start the animation. Does nothing if it's already running."""
        if self._state != RunState.running:
            self._set_state(RunState.running)
            self._arm()

    def pause(self):
        """Toggle between paused and running."""
        if self._state == RunState.running:
            self._set_state(RunState.paused)
            self._disarm()
        else:
            self._set_state(RunState.running)
            self._arm()

    def advance(self):
        """Pause the animation (if running) and compute exactly one generation."""
        if self._state == RunState.running:
            self.pause()
        return self.step_once()

    def increase_speed(self):
        """Increase the target speed by one iteration per second."""
        self._change_speed(self._ips + 1)

    def decrease_speed(self):
        """Decrease the target speed by one iteration per second, to a minimum of one."""
        self._change_speed(max(1, self._ips - 1))

    def _change_speed(self, ips):
        was_running = self._state == RunState.running
        self._disarm()
        self._ips = ips
        self._telemetry.publish_speed(ips)
        if was_running:
            self._arm()
        elif self._rearm_when_paused:
            # Changing the speed also resumes the animation.
            self._set_state(RunState.running)
            self._arm()

    def reset(self, rng=None):
        """Randomize the world, set the iteration count to zero, and render.

        Does not affect the run state.
        """
        self._world.randomize(rng)
        self._iterations = 0
        self._sink.render(self._world, self._cell_size)
        self._telemetry.publish_iterations(self._iterations)

    def close(self):
        """Stop the animation and release the scheduler registration."""
        self._disarm()
        if self._state != RunState.paused:
            self._set_state(RunState.paused)


def new_instance(
    surface_width,
    surface_height,
    sink,
    scheduler,
    *,
    cell_size=None,
    ips=None,
    telemetry=None,
    auto_start=True,
    rng=None,
    **kwargs,
):
    """Create a randomized world that fills a surface, and an animator for it.

    The world gets ``surface_width // cell_size`` by ``surface_height // cell_size``
    cells. The world is rendered once, and the animation is started unless
    ``auto_start`` is False. Other keyword arguments are passed to ``Animator``.

    Returns the animator; the world is available as ``animator.world``.
    """
    if cell_size is None:
        cell_size = Animator.get_defaults()["cell_size"]
    cell_size = check_positive_int("cell_size", cell_size)

    width = int(surface_width) // cell_size
    height = int(surface_height) // cell_size
    if width < 1 or height < 1:
        raise ValueError(
            f"A {surface_width}x{surface_height} surface is too small for cells of {cell_size} pixels."
        )

    world = CellWorld(width, height)
    animator = Animator(
        world,
        sink,
        scheduler,
        cell_size=cell_size,
        ips=ips,
        telemetry=telemetry,
        **kwargs,
    )
    animator.reset(rng)
    if telemetry is not None:
        telemetry.publish_speed(animator.ips)
    if auto_start:
        animator.start()
    logger.info(f"Created a {width}x{height} world, {animator!r}.")
    return animator
