"""
Drawing-surface contract used by the chart.

The chart never talks to a graphics library directly. It issues the calls
below against a DrawingSurface, which owns a tree of containers (groups) and
path elements. Element handles are opaque to the chart.
"""

from abc import ABC, abstractmethod
from typing import Any

from .path import Path


class DrawingSurface(ABC):
    """
    Minimal 2-D vector scene graph.

    Implementations: MatplotlibSurface for real output; tests use a recording
    stub.
    """

    @abstractmethod
    def root(self) -> Any:
        """Return the top-level container that the chart draws into."""

    @abstractmethod
    def append_group(self, parent: Any) -> Any:
        """Create a nested container under ``parent`` and return its handle."""

    @abstractmethod
    def append_path(self, parent: Any) -> Any:
        """Create an empty path element under ``parent`` and return its handle."""

    @abstractmethod
    def remove(self, element: Any) -> None:
        """Detach and discard a path element."""

    @abstractmethod
    def set_viewbox(self, width: float, height: float) -> None:
        """
        Set the visible region to [0, width] x [0, height] in surface units.

        The region is scaled uniformly to fit and anchored at the top-left
        corner (SVG ``preserveAspectRatio="xMinYMin meet"``).
        """

    @abstractmethod
    def set_translation(self, container: Any, dx: float, dy: float) -> None:
        """Offset everything inside ``container`` by (dx, dy)."""

    @abstractmethod
    def set_path_data(self, element: Any, path: Path) -> None:
        """Replace the geometry of a path element."""

    @abstractmethod
    def set_style(self, element: Any, stroke: str, stroke_width: float, fill: str) -> None:
        """Set stroke color, stroke width (surface units) and fill of an element."""
