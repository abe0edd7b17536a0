"""
Game of Life with asyncio
-------------------------

Run a small world for a second on an asyncio loop, speeding it up as it goes,
and print its telemetry. The world is rendered to a bitmap in RAM.
"""

# run_example = true

import asyncio

import lifecanvas
from lifecanvas.asyncio import AsyncioScheduler
from lifecanvas.sinks import BitmapSink


async def main():
    telemetry = lifecanvas.Telemetry(iterations=print, speed=print, run_state=print)
    sink = BitmapSink()
    animator = lifecanvas.new_instance(
        120, 90, sink, AsyncioScheduler(), ips=10, telemetry=telemetry, rng=0
    )

    for _ in range(4):
        await asyncio.sleep(0.25)
        animator.increase_speed()

    animator.advance()
    print(f"population {animator.world.population}, bitmap {sink.bitmap.shape}")
    animator.close()


asyncio.run(main())
