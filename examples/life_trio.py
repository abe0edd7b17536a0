"""
Game of Life with trio
----------------------

Like the asyncio example, but on trio. The scheduler runs its timers in a nursery.
"""

# run_example = true

import trio

import lifecanvas
from lifecanvas.trio import TrioScheduler
from lifecanvas.sinks import BitmapSink


async def main():
    async with trio.open_nursery() as nursery:
        telemetry = lifecanvas.Telemetry(iterations=print, run_state=print)
        animator = lifecanvas.new_instance(
            120, 90, BitmapSink(), TrioScheduler(nursery), ips=20, telemetry=telemetry
        )
        await trio.sleep(0.5)
        animator.pause()
        await trio.sleep(0.2)
        animator.pause()
        await trio.sleep(0.3)
        # Closing cancels the timer, so the nursery can exit
        animator.close()


trio.run(main)
