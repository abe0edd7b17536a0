"""
Game of Life in a window
------------------------

Show a cell world in a rendercanvas window, using the bitmap context.

The canvas draws continuously, and each frame moves the clock of a manual
scheduler forward by the time that passed. The animator thus runs at its own
speed, independent of the frame rate.

Keys: space to pause/restart, right arrow to advance one step,
up/down arrows to change speed, r to reset.
"""

import time

from rendercanvas.auto import RenderCanvas, loop

import lifecanvas
from lifecanvas.manual import ManualScheduler
from lifecanvas.sinks import BitmapSink


canvas = RenderCanvas(size=(640, 480), update_mode="continuous", max_fps=60)
context = canvas.get_context("bitmap")

scheduler = ManualScheduler()
telemetry = lifecanvas.Telemetry(speed=canvas.set_title)
w, h = canvas.get_logical_size()
animator = lifecanvas.new_instance(
    int(w), int(h), BitmapSink(context), scheduler, ips=10, telemetry=telemetry
)

last_time = time.perf_counter()


@canvas.add_event_handler("key_down")
def on_key(event):
    key = event["key"]
    if key == " ":
        animator.pause()
    elif key == "ArrowRight":
        animator.advance()
    elif key == "ArrowUp":
        animator.increase_speed()
    elif key == "ArrowDown":
        animator.decrease_speed()
    elif key == "r":
        animator.reset()


@canvas.request_draw
def animate():
    global last_time
    now = time.perf_counter()
    scheduler.advance_time(now - last_time)
    last_time = now


loop.run()
