"""
Geometry calculations for SmithCharts.

This module provides the pure numerical side of the package:
- Bilinear maps between normalized impedance and reflection coefficient
- Constant-resistance and constant-reactance arc geometry
- Linear scales mapping the gamma plane onto the drawing surface

Main Functions:
    From geometry module:
        - impedance_to_gamma: z -> (z - 1) / (z + 1)
        - gamma_to_impedance: gamma -> (1 + gamma) / (1 - gamma)
        - constant_resistance_arc: Circle segment for a fixed resistance
        - constant_reactance_arc: Circle segment for a fixed reactance

    From scales module:
        - LinearScale: Affine domain -> range mapping
        - create_viewport_scales: The chart's fixed viewport mapping

Example:
    >>> from smith_charts.calculations import constant_resistance_arc
    >>> arc = constant_resistance_arc(1.0, 1e6, -1e6)
    >>> arc.center, arc.radius
    ((0.5, 0.0), 0.5)
"""

from .geometry import (
    Arc,
    impedance_to_gamma,
    gamma_to_impedance,
    normalize_angle,
    constant_resistance_arc,
    constant_reactance_arc
)
from .scales import (
    LinearScale,
    ViewportScales,
    create_viewport_scales
)

__all__ = [
    "Arc",
    "impedance_to_gamma",
    "gamma_to_impedance",
    "normalize_angle",
    "constant_resistance_arc",
    "constant_reactance_arc",
    "LinearScale",
    "ViewportScales",
    "create_viewport_scales",
]
