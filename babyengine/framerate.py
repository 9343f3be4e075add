"""Frame pacing for the main loop."""

from __future__ import annotations

import time
from collections.abc import Callable

DEFAULT_TITLE = "BabyEngine"


class FrameRateLimiter:
    """Measures frame times and waits out the rest of a frame when running fast.

    Pacing only takes effect once :meth:`set_target_fps` has been called; until
    then the target frame time is zero and no frame is held back. Every
    ``target_fps // 10`` frames ``window_title`` is refreshed to show the target rate.
    """

    def __init__(
        self,
        target_fps: int = 60,
        clock: Callable[[], float] = time.monotonic,
        wait: Callable[[float], object] = time.sleep,
    ) -> None:
        self.target_fps = target_fps
        self.clock = clock
        self.wait = wait
        self.title = DEFAULT_TITLE
        self.window_title = self.title
        self.current_frame_time = 0.0
        self.previous_frame_time = 0.0
        self.delta_time = 0.0
        self.target_frame_time = 0.0
        self.frame_counter = 0

    def set_target_fps(self, fps: int) -> None:
        """Set the target rate and the frame time it implies."""
        if fps <= 0:
            raise ValueError("target frame rate must be positive")
        self.target_fps = fps
        self.target_frame_time = 1.0 / fps

    def maintain(self) -> float:
        """Close the current frame and return the time since the previous one ended."""
        self.frame_counter += 1

        self.current_frame_time = self.clock()
        self.delta_time = self.current_frame_time - self.previous_frame_time

        if self.delta_time < self.target_frame_time:
            self.wait(self.target_frame_time - self.delta_time)

        if self.frame_counter == self.target_fps // 10:
            self.frame_counter = 0
            self.window_title = f"{self.title} FPS: {self.target_fps}"

        self.previous_frame_time = self.clock()
        return self.delta_time