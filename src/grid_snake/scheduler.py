"""Frame-driven scheduling of engine ticks."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable

from grid_snake.engine import GameEngine
from grid_snake.state import TickResult

FrameCallback = Callable[[GameEngine, TickResult | None], Awaitable[None] | None]

DEFAULT_FRAME_RATE = 60


class FrameTicker:
    """Drives an engine from a per-frame callback.

    Every frame is rendered, but the engine only steps once at least
    ``tick_interval_ms`` has elapsed since the previous step. The interval is
    read from the engine config on each frame so speed changes apply
    immediately.
    """

    def __init__(
        self,
        engine: GameEngine,
        on_frame: FrameCallback | None = None,
        frame_rate: int = DEFAULT_FRAME_RATE,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if frame_rate <= 0:
            raise ValueError("frame_rate must be positive.")
        self.engine = engine
        self.frame_callback = on_frame
        self.frame_interval = 1.0 / frame_rate
        self.clock = clock
        self.last_tick_ms = 0.0
        self.frames = 0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def on_frame(self, now_ms: float) -> TickResult | None:
        """Step the engine if its tick interval has elapsed."""
        self.frames += 1
        if now_ms - self.last_tick_ms < self.engine.config.tick_interval_ms:
            return None
        self.last_tick_ms = now_ms
        return self.engine.step()

    async def run(self) -> None:
        """Run frames until :meth:`stop` is called or the task is cancelled."""
        self._running = True
        try:
            while self._running:
                result = self.on_frame(self.clock() * 1000.0)
                if self.frame_callback is not None:
                    pending = self.frame_callback(self.engine, result)
                    if pending is not None:
                        await pending
                await asyncio.sleep(self.frame_interval)
        finally:
            self._running = False

    def stop(self) -> None:
        self._running = False
