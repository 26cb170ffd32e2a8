"""
Rendering subsystem for SmithCharts.

This module turns arc geometry into drawing commands. The chart talks to an
abstract DrawingSurface, so the update protocol can be exercised without a
graphics library; MatplotlibSurface is the concrete surface used for output.

Main Classes:
    SmithChart: Chart configuration, setters and update()
    DrawingSurface: Contract for the scene graph the chart draws into
    MatplotlibSurface: DrawingSurface backed by a Matplotlib figure
    Path: Move/line/arc path builder with SVG export

Key Functions:
    compute_chart_geometry: Pure Config -> ChartGeometry
    render: Draw a Config and return the new RenderState
    plan_join / apply_join: Position-keyed enter/update/exit reconciliation
    JoinBatch: Joins over several containers committed or rolled back together

Coordinate System:
    - Surface units: the unit disk occupies [0, 1] x [0, 1] before the margin
      translation; y grows downwards
    - Surface angles run opposite to gamma-plane angles

Example:
    >>> from smith_charts.rendering import SmithChart
    >>> chart = SmithChart(margin=0.1)
    >>> chart.update()
    >>> chart.save_chart("smith.png")
"""

from .path import Path
from .surface import DrawingSurface
from .join import JoinPlan, JoinBatch, plan_join, apply_join
from .mpl_surface import MatplotlibSurface
from .chart import (
    ArcFamily,
    ChartGeometry,
    ChartLayers,
    RenderState,
    SmithChart,
    compute_chart_geometry,
    render
)

__all__ = [
    "Path",
    "DrawingSurface",
    "JoinPlan",
    "plan_join",
    "apply_join",
    "JoinBatch",
    "MatplotlibSurface",
    "ArcFamily",
    "ChartGeometry",
    "ChartLayers",
    "RenderState",
    "SmithChart",
    "compute_chart_geometry",
    "render"
]
