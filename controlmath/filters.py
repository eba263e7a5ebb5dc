# controlmath/filters.py
from typing import Optional

import numpy as np

from controlmath.constants import DEFAULT_SMOOTHING_FACTOR
from controlmath.logger import get_logger

logger = get_logger(__name__)


class MovingAverageFilter:
    """
    Bounded-window moving average over the most recent samples.

    Samples are kept in a fixed-size ring buffer; once it is full each new
    sample overwrites the oldest one. Instances are not thread-safe: keep one
    filter per input stream.

    Attributes:
        factor (int): Window capacity (number of samples averaged).
    """

    def __init__(self, factor: Optional[int] = None):
        """
        Initialize the filter.

        :param factor: Window capacity. None or 0 selects the default of 2.
        :raises ValueError: If factor is negative or not a whole number.
        """
        if not factor:
            logger.debug(f"No smoothing factor given, using default {DEFAULT_SMOOTHING_FACTOR}")
            factor = DEFAULT_SMOOTHING_FACTOR
        if factor < 0 or int(factor) != factor:
            raise ValueError(f"Smoothing factor must be a positive integer, got {factor!r}")

        self.factor = int(factor)
        self._buffer = np.zeros(self.factor, dtype=np.float64)
        self._write_index = 0
        self._count = 0
        logger.debug(f"Moving average filter initialized with factor {self.factor}")

    def update(self, value: float) -> float:
        """
        Push a new sample and return the mean of the current window.

        :param value: New raw sample.
        :return: Arithmetic mean of the last min(samples seen, factor) samples.
        """
        self._buffer[self._write_index] = value
        self._write_index = (self._write_index + 1) % self.factor
        if self._count < self.factor:
            self._count += 1

        # Until the buffer wraps the filled slots are exactly [0, count)
        return float(np.sum(self._buffer[:self._count]) / self._count)


if __name__ == "__main__":
    lowpass = MovingAverageFilter(3)
    for sample in (1, 2, 3, 4, 10, 10, 10):
        logger.info(f"sample={sample:>5} smoothed={lowpass.update(sample):.3f}")
