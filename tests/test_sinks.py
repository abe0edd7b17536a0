"""
Test the display sinks.
"""

import numpy as np
import pytest

from lifecanvas.sinks import BaseSink, BitmapSink
from testutils import run_tests, world_from_rows


class StubContext:
    def __init__(self):
        self.bitmaps = []

    def set_bitmap(self, bitmap):
        self.bitmaps.append(bitmap)


class StubCanvas:
    draw_count = 0

    def request_draw(self):
        self.draw_count += 1


def test_base_sink():
    sink = BaseSink()
    world = world_from_rows("...", "...")
    with pytest.raises(NotImplementedError):
        sink.render(world, 3)
    with pytest.raises(ValueError):
        sink.render(world, 0)


def test_bitmap_sink_geometry():
    world = world_from_rows(
        "#...",
        "..#.",
        "....",
    )
    sink = BitmapSink()
    assert sink.bitmap is None
    sink.render(world, 3)

    bitmap = sink.bitmap
    assert bitmap.dtype == np.uint8
    assert bitmap.shape == (9, 12)

    # Cell (0, 0) is a 2x2 black square at the origin
    assert np.all(bitmap[0:2, 0:2] == 0)
    # With a white gap to its right and below
    assert np.all(bitmap[2, 0:3] == 255)
    assert np.all(bitmap[0:3, 2] == 255)
    # Cell (2, 1) is at pixel (6, 3)
    assert np.all(bitmap[3:5, 6:8] == 0)

    # Everything else is white
    assert np.count_nonzero(bitmap == 0) == 2 * 4
    assert np.count_nonzero(bitmap == 255) == bitmap.size - 8


def test_bitmap_sink_colors():
    world = world_from_rows("#.", "..")
    sink = BitmapSink(background=10, foreground=200)
    sink.render(world, 4)
    assert np.all(sink.bitmap[0:3, 0:3] == 200)
    assert np.count_nonzero(sink.bitmap == 10) == 64 - 9


def test_bitmap_sink_cell_size_one():
    # With one pixel per cell, the cell squares have size zero
    world = world_from_rows("##", "##")
    sink = BitmapSink()
    sink.render(world, 1)
    assert sink.bitmap.shape == (2, 2)
    assert np.all(sink.bitmap == 255)


def test_bitmap_sink_reuses_bitmap():
    world = world_from_rows("#..", "...", "..#")
    sink = BitmapSink()
    sink.render(world, 2)
    bitmap = sink.bitmap

    world.clear()
    sink.render(world, 2)
    assert sink.bitmap is bitmap
    assert np.all(bitmap == 255)
    assert sink.render_count == 2

    # A new size means a new bitmap
    sink.render(world, 3)
    assert sink.bitmap is not bitmap
    assert sink.bitmap.shape == (9, 9)


def test_bitmap_sink_with_context():
    world = world_from_rows("#.", "..")
    context = StubContext()
    canvas = StubCanvas()
    sink = BitmapSink(context, canvas)
    sink.render(world, 2)
    sink.render(world, 2)

    assert len(context.bitmaps) == 2
    assert context.bitmaps[0] is sink.bitmap
    assert canvas.draw_count == 2


def test_bitmap_sink_invalid_context():
    with pytest.raises(TypeError):
        BitmapSink(object())


if __name__ == "__main__":
    run_tests(globals())
