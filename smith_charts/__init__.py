"""
SmithCharts - Lightweight Python package for drawing Smith chart grids.

This package computes the constant-resistance and constant-reactance circles
of a Smith chart in the reflection-coefficient plane and draws them through a
small drawing-surface contract, with a Matplotlib surface for file output.

Quick Start:
    >>> from smith_charts import create_smith_chart
    >>>
    >>> # Draw the default grid
    >>> create_smith_chart(output_path="smith.png")

Live chart:
    >>> from smith_charts import SmithChart
    >>>
    >>> chart = SmithChart()
    >>> chart.update()
    >>> chart.set_real_line_values([0.1, 0.5, 1, 10])
    >>> chart.set_imag_line_color("purple")
    >>> chart.update()  # setters take effect here
    >>> chart.save_chart("smith.svg")

Geometry only:
    >>> from smith_charts.calculations import constant_reactance_arc
    >>> arc = constant_reactance_arc(1.0, 0.0, 1e6)
    >>> arc.center, arc.radius
    ((1.0, 1.0), 1.0)
"""

__version__ = "0.1.0"

# Initialize logging with default settings
from .logging_config import setup_logging
setup_logging()

# Core configuration
from .config import Config

# Geometry
from . import calculations
from .calculations import (
    Arc,
    impedance_to_gamma,
    gamma_to_impedance,
    constant_resistance_arc,
    constant_reactance_arc
)

# Rendering components
from .rendering import SmithChart, DrawingSurface, MatplotlibSurface

# User-facing API
from .api import create_smith_chart, render_sequence

# Exceptions
from .exceptions import (
    SmithChartsError,
    RenderError,
    InvalidParameterError,
    ConfigError
)

__all__ = [
    # Version info
    "__version__",

    # Config
    "Config",

    # Geometry
    "calculations",
    "Arc",
    "impedance_to_gamma",
    "gamma_to_impedance",
    "constant_resistance_arc",
    "constant_reactance_arc",

    # Rendering
    "SmithChart",
    "DrawingSurface",
    "MatplotlibSurface",

    # User-facing API
    "create_smith_chart",
    "render_sequence",

    # Exceptions
    "SmithChartsError",
    "RenderError",
    "InvalidParameterError",
    "ConfigError",
]
