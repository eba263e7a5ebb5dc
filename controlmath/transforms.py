# controlmath/transforms.py
"""
Stateless numeric helpers for turning raw control values (pointer positions,
slider drags, generated parameters) into range-mapped, geometric or acoustic
values.

Degenerate numeric input (division by zero, log of non-positive values)
comes back as NaN / +-inf instead of raising.
"""
import math
import random
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import NamedTuple, Optional, Sequence, TypeVar

import numpy as np

from controlmath.constants import (
    A4_FREQUENCY_HZ,
    A4_MIDI_NOTE,
    DECIBELS_PER_DECADE,
    DEFAULT_COIN_ODDS,
    PRUNE_PRECISION,
    SEMITONES_PER_OCTAVE,
)

T = TypeVar("T")


class PolarCoord(NamedTuple):
    radius: float
    angle: float


class CartesianCoord(NamedTuple):
    x: float
    y: float


def clip(value: float, low: float, high: float) -> float:
    """
    Limit a number to within a minimum and maximum.

    The bounds are applied max-then-min, so if low > high the result is
    always high.

    Examples:
        >>> clip(11, 0, 10)
        10
        >>> clip(-1, 0, 10)
        0
        >>> clip(5, 0, 10)
        5
    """
    return min(max(value, low), high)


def normalize(value: float, low: float, high: float) -> float:
    """Position of value within [low, high] as a fraction (NaN/inf when low == high)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float((np.float64(value) - low) / (np.float64(high) - low))


def scale(in_num: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """
    Scale a value from one range to another range.

    A zero-width input range maps everything to out_min.

    Examples:
        >>> scale(0.5, 0, 1, 0, 10)
        5.0
        >>> scale(3, 5, 5, 0, 10)
        0
    """
    if in_min == in_max:
        return out_min
    return ((in_num - in_min) * (out_max - out_min)) / (in_max - in_min) + out_min


def to_polar(x: float, y: float) -> PolarCoord:
    """Convert (x, y) to radius and an angle in [0, 2*pi)."""
    radius = math.sqrt(x * x + y * y)
    angle = math.atan2(y, x)
    if angle < 0:
        # Wrap so a tiny negative angle lands on 0 rather than exactly 2*pi
        angle = (angle + 2 * math.pi) % (2 * math.pi)
    return PolarCoord(radius=radius, angle=angle)


def to_cartesian(radius: float, angle: float) -> CartesianCoord:
    # y is flipped for screen coordinates (y grows downwards)
    with np.errstate(invalid="ignore"):
        x = float(radius * np.cos(np.float64(angle)))
        y = float(-radius * np.sin(np.float64(angle)))
    return CartesianCoord(x=x, y=y)


def prune(data: float, scale: int) -> float:
    """Round data to `scale` decimal places, halves away from zero."""
    if not math.isfinite(data) or abs(data) >= 1e21:
        return float(data)
    with localcontext() as ctx:
        ctx.prec = PRUNE_PRECISION
        rounded = Decimal(data).quantize(Decimal(1).scaleb(-scale), rounding=ROUND_HALF_UP)
    return float(rounded)


def invert(in_num: float) -> float:
    """Flip a 0-1 value (0 -> 1, 1 -> 0), extrapolating outside that range."""
    return scale(in_num, 1, 0, 0, 1)


def mtof(midi: float) -> float:
    """
    Convert a MIDI note number to a frequency in Hz (equal temperament, A4 = 440).

    Examples:
        >>> mtof(69)
        440.0
    """
    with np.errstate(over="ignore"):
        return float(np.power(2.0, (midi - A4_MIDI_NOTE) / SEMITONES_PER_OCTAVE) * A4_FREQUENCY_HZ)


def interp(loc: float, low: float, high: float) -> float:
    """
    Interpolate between two numbers. loc outside 0-1 extrapolates.

    Examples:
        >>> interp(0.5, 2, 4)
        3.0
    """
    return loc * (high - low) + low


def pick(*choices: T) -> T:
    """
    Return one of the arguments, chosen uniformly at random.

    At least one argument must be given; calling pick() with none is a
    caller error.
    """
    return random.choice(choices)


def octave(num: float) -> float:
    """Frequency multiplier for shifting by `num` octaves (-1 -> 0.5, 1 -> 2)."""
    with np.errstate(over="ignore"):
        return float(np.power(2.0, num))


def _resolve_bounds(bound1: float, bound2: Optional[float]):
    # A missing or zero second bound means "from 0 to bound1"
    if not bound2:
        bound1, bound2 = 0, bound1
    return min(bound1, bound2), max(bound1, bound2)


def ri(bound1: float, bound2: Optional[float] = None) -> int:
    """
    Random integer in [low, high), where low/high are the sorted bounds.

    With a single bound (or a second bound of 0) the range is [0, bound1).

    Examples:
        ri(10)        # 0 .. 9
        ri(20, 2000)  # 20 .. 1999
    """
    low, high = _resolve_bounds(bound1, bound2)
    return math.floor(random.random() * (high - low) + low)


def rf(bound1: float, bound2: Optional[float] = None) -> float:
    """Random float in [low, high); same bound handling as ri()."""
    low, high = _resolve_bounds(bound1, bound2)
    return random.random() * (high - low) + low


def cycle(value: int, low: int, high: int) -> int:
    """Advance a bounded counter, wrapping to low once it reaches high."""
    value += 1
    if value >= high:
        value = low
    return value


def average(data: Sequence[float]) -> float:
    """
    Arithmetic mean of a sequence of numbers (NaN for an empty sequence).

    Examples:
        >>> average([0, 2, 4, 6, 8, 10])
        5.0
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(sum(data)) / len(data))


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """
    Euclidean distance between (x1, y1) and (x2, y2).

    Examples:
        >>> distance(0, 0, 3, 4)
        5.0
    """
    a = x1 - x2
    b = y1 - y2
    return math.sqrt(a * a + b * b)


def gain_to_db(gain: float) -> float:
    """Linear amplitude ratio to decibels. 0 -> -inf, negative -> NaN."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(DECIBELS_PER_DECADE * np.log10(np.float64(gain)))


def coin(odds: float = DEFAULT_COIN_ODDS) -> int:
    """
    Flip a coin: 1 with probability `odds`, otherwise 0.

    Examples:
        coin(0.1)   # 1 about 10% of the time
    """
    return 1 if rf(0, 1) < odds else 0


if __name__ == "__main__":
    from controlmath.logger import get_logger

    logger = get_logger(__name__)
    logger.info(f"mtof(60) = {mtof(60):.4f} Hz")
    logger.info(f"to_polar(0, -1) = {to_polar(0, -1)}")
    logger.info(f"scale(0.25, 0, 1, 100, 200) = {scale(0.25, 0, 1, 100, 200)}")
    logger.info(f"ri(1, 7) = {ri(1, 7)}, rf(1) = {rf(1):.3f}, coin() = {coin()}")
