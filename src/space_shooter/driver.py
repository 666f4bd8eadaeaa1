"""
Fixed timestep driver.
"""

from __future__ import annotations

import math
from typing import Callable

from space_shooter.utils import logger


class FixedStepDriver:
    """
    Turns variable frame times into a whole number of fixed-size steps.

    ``tick`` is called once per frame with the current time in seconds. The
    first call only records the time. Every later call adds the elapsed time
    to an accumulator and runs ``floor(accumulated / step)`` steps, keeping
    the remainder for the next frame. Each step calls ``on_step(step)``.
    """

    def __init__(self, step: float, on_step: Callable[[float], None]):
        """
        :param step: Step length in seconds
        :type step: float

        :param on_step: Called once per step with the step length
        :type on_step: Callable[[float], None]

        :raise ValueError: If step is not positive
        """
        if step <= 0:
            raise ValueError(f"Step must be positive, got {step}")

        self.step = step
        self.on_step = on_step
        self.last_time: float | None = None
        self.accumulator = 0.0
        self.steps_run = 0

    def tick(self, curr_time: float) -> int:
        """
        Run the steps owed for the time passed since the last tick.

        :param curr_time: Current time in seconds
        :type curr_time: float

        :return: Number of steps run
        :rtype: int
        """
        if self.last_time is None:
            self.last_time = curr_time
            return 0

        elapsed = curr_time - self.last_time
        self.last_time = curr_time
        if elapsed < 0:
            logger.debug(f"Clock went backwards by {-elapsed:.4f}s")
            self.accumulator = 0.0
            return 0

        self.accumulator += elapsed
        # absorbs float error when the accumulator is a whole number of steps
        steps = math.floor(self.accumulator / self.step + 1e-9)
        self.accumulator = max(0.0, self.accumulator - steps * self.step)

        for _ in range(steps):
            self.on_step(self.step)

        self.steps_run += steps
        return steps
