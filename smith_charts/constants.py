"""
Constants and fixed parameters for SmithCharts package.

This module defines default chart values, styling constants and the fixed
viewport mapping between the reflection-coefficient plane and the drawing
surface.
"""

import numpy as np

# ============================================================================
# Chart Defaults
# ============================================================================

DEFAULT_MARGIN = 0.05

# Normalized resistance / reactance values that get a grid line
DEFAULT_REAL_LINE_VALUES = [0.2, 0.5, 1, 2, 5, 10]
DEFAULT_IMAG_LINE_VALUES = [0.2, 0.5, 1, 2, 5, 10]

DEFAULT_LINE_COLOR = "#0f0f0f"

# Large finite bound standing in for +/- infinite reactance or resistance.
# The endpoint error it introduces is far below pixel resolution.
DEFAULT_INFINITY = 1e6

# ============================================================================
# Styling Constants
# ============================================================================

# Stroke width in surface units (the unit disk spans 1.0)
LINE_STROKE_WIDTH = 0.005
LINE_FILL = "none"

# ============================================================================
# Viewport Mapping
# ============================================================================

TAU = 2 * np.pi

# (domain, range) pairs for the four fixed linear scales
X_SCALE = ((-1.0, 1.0), (0.0, 1.0))
Y_SCALE = ((-1.0, 1.0), (1.0, 0.0))  # surface y grows downwards
RADIUS_SCALE = ((0.0, 1.0), (0.0, 0.5))
ANGLE_SCALE = ((0.0, TAU), (0.0, -TAU))  # surface angles sweep the other way

# ============================================================================
# Output Defaults
# ============================================================================

DEFAULT_DPI = 150
DEFAULT_FIGURE_SIZE = 6.0  # inches, square
DEFAULT_BACKGROUND_COLOR = "white"

# Number of straight segments used when flattening a full circle
ARC_SEGMENTS_PER_TURN = 720
