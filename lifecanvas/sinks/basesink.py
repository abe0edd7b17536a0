__all__ = ["BaseSink"]


class BaseSink:
    """The base class for display sinks in ``lifecanvas``.

    A sink takes a snapshot of a cell world and draws it: each live cell is a
    filled square of ``cell_size - 1`` pixels at ``(x * cell_size, y * cell_size)``,
    against a cleared background. Rendering is a pure side effect.

    Subclasses implement ``_rc_render()``.
    """

    def __repr__(self):
        return f"<lifecanvas.sinks.{self.__class__.__name__} object at {hex(id(self))}>"

    def render(self, world, cell_size):
        """Render the given world, using ``cell_size`` pixels per cell."""
        cell_size = int(cell_size)
        if cell_size < 1:
            raise ValueError(f"The cell size must be >= 1, not {cell_size}.")
        self._rc_render(world, cell_size)

    def _rc_render(self, world, cell_size):
        """Draw the world. Subclasses must implement this.

        The world's cells can be obtained as a ``(height, width)`` array with
        ``world.as_array()``. The cell size is a validated int.
        """
        raise NotImplementedError()
