"""
Smith chart geometry in the reflection-coefficient (gamma) plane.

Normalized load impedance z = r + jx maps to the reflection coefficient
through the bilinear transform gamma = (z - 1) / (z + 1). Because the map is
circle-preserving, every line of constant resistance or constant reactance
becomes a circle in the gamma plane. This module computes those circles and
the angular span between two bounds on each of them.

Degenerate inputs (z = -1, gamma = 1, zero reactance) are not guarded: they
produce non-finite numbers rather than exceptions.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from ..constants import TAU
from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Arc:
    """
    Circle segment in the gamma plane.

    Attributes:
        cx: Center real part (gamma-plane x)
        cy: Center imaginary part (gamma-plane y)
        radius: Circle radius
        angle1: Angle of the first bound, measured from the center, in [0, 2*pi)
        angle2: Angle of the second bound, measured from the center, in [0, 2*pi)
    """

    cx: float
    cy: float
    radius: float
    angle1: float
    angle2: float

    @property
    def center(self) -> Tuple[float, float]:
        return (self.cx, self.cy)

    def is_finite(self) -> bool:
        """Return True when every field is a finite number."""
        return bool(np.all(np.isfinite([self.cx, self.cy, self.radius, self.angle1, self.angle2])))


def impedance_to_gamma(z):
    """
    Convert normalized load impedance to reflection coefficient.

    Uses the transformation: gamma = (z - 1) / (z + 1)

    Args:
        z: Normalized impedance (complex scalar or array-like)

    Returns:
        Reflection coefficient with the same shape as the input. At z = -1
        the result is non-finite.
    """
    z = np.asarray(z, dtype=complex)
    with np.errstate(divide="ignore", invalid="ignore"):
        gamma = (z - 1) / (z + 1)
    return gamma[()] if gamma.ndim == 0 else gamma


def gamma_to_impedance(gamma):
    """
    Convert reflection coefficient to normalized load impedance.

    Uses the inverse transformation: z = (1 + gamma) / (1 - gamma)

    Args:
        gamma: Reflection coefficient (complex scalar or array-like)

    Returns:
        Normalized impedance with the same shape as the input. At gamma = 1
        the result is non-finite.
    """
    gamma = np.asarray(gamma, dtype=complex)
    with np.errstate(divide="ignore", invalid="ignore"):
        z = (1 + gamma) / (1 - gamma)
    return z[()] if z.ndim == 0 else z


def normalize_angle(angle: float) -> float:
    """Map an angle from (-pi, pi] into [0, 2*pi)."""
    if angle < 0:
        angle = angle + TAU
    # -tiny + 2*pi can round up to exactly 2*pi
    if angle >= TAU:
        angle = 0.0
    return float(angle)


def _angle_from_center(gamma: complex, cx: float, cy: float) -> float:
    """Polar angle of gamma as seen from (cx, cy), normalized to [0, 2*pi)."""
    with np.errstate(invalid="ignore"):
        phi = np.angle(gamma - complex(cx, cy))
    return normalize_angle(phi)


def constant_resistance_arc(r: float, x_start: float, x_end: float) -> Arc:
    """
    Compute the constant-resistance circle segment between two reactances.

    For fixed r, gamma traces a circle of radius 1/(1+r) centered at
    (r/(1+r), 0) as the reactance varies. Passing very large bounds of
    opposite sign (e.g. +1e6, -1e6) covers the whole circle up to the point
    (1, 0) where all resistance circles meet.

    Args:
        r: Normalized resistance of the circle
        x_start: Normalized reactance at the first bound
        x_end: Normalized reactance at the second bound

    Returns:
        Arc with bound angles in the order given (not sorted)
    """
    r = np.float64(r)
    with np.errstate(divide="ignore", invalid="ignore"):
        radius = 1.0 / (1.0 + r)
        cx = r / (1.0 + r)
    cy = 0.0

    gamma1 = impedance_to_gamma(complex(r, x_start))
    gamma2 = impedance_to_gamma(complex(r, x_end))

    return Arc(
        cx=float(cx),
        cy=cy,
        radius=float(radius),
        angle1=_angle_from_center(gamma1, cx, cy),
        angle2=_angle_from_center(gamma2, cx, cy),
    )


def constant_reactance_arc(x: float, r_start: float, r_end: float) -> Arc:
    """
    Compute the constant-reactance circle segment between two resistances.

    For fixed x, gamma traces a circle of radius 1/|x| centered at (1, 1/x),
    tangent to the unit circle at (1, 0). The negative reactance family is
    drawn by passing -x. Zero reactance gives an infinite radius.

    Args:
        x: Normalized reactance of the circle
        r_start: Normalized resistance at the first bound
        r_end: Normalized resistance at the second bound

    Returns:
        Arc with bound angles in the order given (not sorted)
    """
    x = np.float64(x)
    with np.errstate(divide="ignore", invalid="ignore"):
        radius = np.abs(1.0 / x)
        cy = 1.0 / x
    cx = 1.0

    gamma1 = impedance_to_gamma(complex(r_start, x))
    gamma2 = impedance_to_gamma(complex(r_end, x))

    arc = Arc(
        cx=cx,
        cy=float(cy),
        radius=float(radius),
        angle1=_angle_from_center(gamma1, cx, cy),
        angle2=_angle_from_center(gamma2, cx, cy),
    )
    if not arc.is_finite():
        logger.debug(f"Degenerate reactance arc for x={float(x)}: {arc}")
    return arc
