"""
Linear scales mapping the gamma plane onto drawing-surface coordinates.

A LinearScale maps a continuous input domain onto an output range with a
single affine function, like d3's scaleLinear. The chart uses four of them,
fixed at construction time (see ViewportScales).
"""

from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np

from ..constants import X_SCALE, Y_SCALE, RADIUS_SCALE, ANGLE_SCALE


@dataclass(frozen=True)
class LinearScale:
    """
    Affine map from ``domain`` onto ``range``.

    Values outside the domain are extrapolated, not clamped.
    """

    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value):
        d0, d1 = self.domain
        r0, r1 = self.range
        t = (np.asarray(value, dtype=float) - d0) / (d1 - d0)
        out = r0 + t * (r1 - r0)
        return float(out) if out.ndim == 0 else out

    def invert(self, value):
        """Map a range value back into the domain."""
        return LinearScale(domain=self.range, range=self.domain)(value)


class ViewportScales(NamedTuple):
    """The four independent mappings used when drawing the chart."""

    x: LinearScale
    y: LinearScale
    r: LinearScale
    a: LinearScale


def create_viewport_scales() -> ViewportScales:
    """
    Build the fixed chart viewport mapping.

    - x: gamma-plane [-1, 1] -> surface [0, 1]
    - y: gamma-plane [-1, 1] -> surface [1, 0] (flipped)
    - r: radius [0, 1] -> surface [0, 0.5]
    - a: angle [0, 2*pi] -> surface [0, -2*pi] (reversed sweep)
    """
    return ViewportScales(
        x=LinearScale(*X_SCALE),
        y=LinearScale(*Y_SCALE),
        r=LinearScale(*RADIUS_SCALE),
        a=LinearScale(*ANGLE_SCALE),
    )
