"""
Provide a sink that renders a cell world to a grayscale bitmap.
"""

__all__ = ["BitmapSink"]

import numpy as np

from .basesink import BaseSink


class BitmapSink(BaseSink):
    """A sink that renders to a grayscale bitmap in RAM.

    The bitmap is a numpy array of unsigned bytes, with shape
    ``(height * cell_size, width * cell_size)``. It is reused between renders
    as long as the shape does not change.

    If a ``context`` is given, the bitmap is passed to its ``set_bitmap()``
    method after each render. This matches the bitmap context of
    ``rendercanvas``, so a world can be shown in a window. If a ``canvas`` is
    given too, its ``request_draw()`` is called, so the new bitmap is presented.

    Arguments:
        context (object | None): an object with a ``set_bitmap(bitmap)`` method.
        canvas (object | None): an object with a ``request_draw()`` method.
        background (int): the gray value for the background. Default 255 (white).
        foreground (int): the gray value for live cells. Default 0 (black).
    """

    def __init__(self, context=None, canvas=None, *, background=255, foreground=0):
        super().__init__()
        if context is not None and not callable(getattr(context, "set_bitmap", None)):
            raise TypeError("BitmapSink context must have a set_bitmap() method.")
        self._context = context
        self._canvas = canvas
        self._background = int(background)
        self._foreground = int(foreground)
        self._bitmap = None
        self.render_count = 0

    @property
    def bitmap(self):
        """The last rendered bitmap, or None if nothing was rendered yet."""
        return self._bitmap

    def _get_bitmap(self, shape):
        if self._bitmap is None or self._bitmap.shape != shape:
            self._bitmap = np.empty(shape, np.uint8)
        return self._bitmap

    def _rc_render(self, world, cell_size):
        grid = world.as_array()
        h, w = grid.shape
        bitmap = self._get_bitmap((h * cell_size, w * cell_size))
        bitmap.fill(self._background)

        # View the bitmap as a grid of cell_size x cell_size blocks, and fill
        # the top-left (cell_size - 1) square of each block with a live cell.
        blocks = bitmap.reshape(h, cell_size, w, cell_size)
        squares = blocks[:, : cell_size - 1, :, : cell_size - 1]
        alive = grid.astype(bool)[:, None, :, None]
        np.copyto(squares, self._foreground, where=alive)

        self.render_count += 1
        if self._context is not None:
            self._context.set_bitmap(bitmap)
        if self._canvas is not None:
            self._canvas.request_draw()
