"""Options controlling the variable-width outline.

StrokeOptions mirrors the knobs of the usual freehand ink algorithm. The
renderer only ever uses DEFAULT_OPTIONS (16 unit pen, simulated pressure),
but the other fields are honored so the algorithm can be tuned and tested.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from .. import config

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_out_quad(t: float) -> float:
    return t * (2 - t)


def ease_out_cubic(t: float) -> float:
    t -= 1
    return t * t * t + 1


@dataclass(frozen=True)
class TaperOptions:
    """Start or end treatment of a stroke.

    Attributes:
        cap: Draw a round cap when the end is not tapered.
        taper: Distance over which the radius shrinks to zero. ``0`` or
            ``False`` disables the taper; ``True`` tapers over the whole
            stroke (at least ``size``).
        easing: Easing applied to the taper. ``None`` picks ease-out-quad
            for the start and ease-out-cubic for the end.
    """
    cap: bool = True
    taper: Union[float, bool] = 0
    easing: Optional[Easing] = None


@dataclass(frozen=True)
class StrokeOptions:
    """Outline synthesis parameters.

    Attributes:
        size: Base diameter of the stroke.
        thinning: How strongly pressure changes the radius, in [-1, 1].
        smoothing: Minimum spacing of rail points as a fraction of size.
        streamline: How far each point is pulled toward the previous one,
            in [0, 1]. Higher values give smoother, laggier lines.
        simulate_pressure: Derive pressure from point spacing instead of
            reading it from the input.
        easing: Easing applied to pressure before computing the radius.
        start: Start cap/taper.
        end: End cap/taper.
        last: The input is a finished stroke; its last point is used as-is.
    """
    size: float = config.STROKE_SIZE
    thinning: float = 0.7
    smoothing: float = 0.5
    streamline: float = 0.5
    simulate_pressure: bool = True
    easing: Easing = linear
    start: TaperOptions = field(default_factory=TaperOptions)
    end: TaperOptions = field(default_factory=TaperOptions)
    last: bool = False


DEFAULT_OPTIONS = StrokeOptions(size=config.STROKE_SIZE, simulate_pressure=True)
