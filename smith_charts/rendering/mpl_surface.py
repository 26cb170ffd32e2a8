"""
Matplotlib implementation of the drawing-surface contract.

The surface owns one square Figure with a single frameless Axes. Axes data
coordinates are surface units: x grows to the right, y grows downwards, and
the visible region is the current viewbox anchored at the top-left corner.
Every path element is drawn as a PathPatch; changing an element's geometry
or style replaces its patch. Patches are stacked in scene-graph order, so
later siblings (and everything after a group) draw on top. Arcs are exact
cubic Bezier curves from ``matplotlib.path.Path.arc``. Subpaths with
non-finite coordinates are skipped, the way a browser ignores an SVG path
with NaN in it.
"""

import math
from typing import List, Optional, Tuple, Union

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
import matplotlib.transforms as mtransforms
import numpy as np
from matplotlib.path import Path as MplPath

from .path import Path
from .surface import DrawingSurface
from ..config import Config
from ..constants import LINE_FILL, TAU
from ..logging_config import get_logger

logger = get_logger(__name__)

POINTS_PER_INCH = 72.0
BASE_ZORDER = 1.0


class _Group:
    def __init__(self, parent: Optional["_Group"] = None):
        self.parent = parent
        self.dx = 0.0
        self.dy = 0.0
        self.children: List[Union["_Group", "_Element"]] = []

    def offset(self) -> Tuple[float, float]:
        dx, dy = self.dx, self.dy
        if self.parent is not None:
            pdx, pdy = self.parent.offset()
            dx, dy = dx + pdx, dy + pdy
        return dx, dy

    def walk_elements(self):
        for child in self.children:
            if isinstance(child, _Group):
                yield from child.walk_elements()
            else:
                yield child


class _Element:
    def __init__(self, group: _Group):
        self.group = group
        self.path: Optional[Path] = None
        self.stroke = "black"
        self.stroke_width = 0.0
        self.fill = LINE_FILL
        self.artist: Optional[mpatches.PathPatch] = None


def _arc_vertices(cx: float, cy: float, r: float, start: float, sweep: float) -> np.ndarray:
    """Bezier vertices of an arc, starting at ``start`` and turning by ``sweep``."""
    span = 360.0 if abs(sweep) >= TAU else math.degrees(abs(sweep))
    vertices = MplPath.arc(0.0, span).vertices
    if sweep < 0:
        # Same arc, traced from its other end
        vertices = vertices[::-1]
        start = start + sweep
    return mtransforms.Affine2D().rotate(start).scale(r).translate(cx, cy).transform(vertices)


def _to_mpl_path(path: Path) -> Optional[MplPath]:
    subpaths: List[Tuple[list, list]] = []
    for op in path.ops:
        if op[0] == "M" or (op[0] == "L" and not subpaths):
            subpaths.append(([op[1:3]], [MplPath.MOVETO]))
        elif op[0] == "L":
            subpaths[-1][0].append(op[1:3])
            subpaths[-1][1].append(MplPath.LINETO)
        elif not np.isfinite(op[1:]).all():
            # Poisons the subpath so it is skipped below
            subpaths[-1][0].append((math.nan, math.nan))
            subpaths[-1][1].append(MplPath.LINETO)
        else:
            arc = _arc_vertices(*op[1:])
            subpaths[-1][0].extend(arc[1:].tolist())
            subpaths[-1][1].extend([MplPath.CURVE4] * (len(arc) - 1))

    vertices = []
    codes = []
    for points, point_codes in subpaths:
        if len(points) < 2 or not np.isfinite(points).all():
            continue
        vertices.extend(points)
        codes.extend(point_codes)
    if not vertices:
        return None
    return MplPath(vertices, codes)


class MatplotlibSurface(DrawingSurface):
    """
    Drawing surface backed by a Matplotlib figure.

    Attributes:
        fig: Matplotlib Figure
        ax: Matplotlib Axes whose data coordinates are surface units
        viewbox: Current (width, height) of the visible region

    Example:
        >>> surface = MatplotlibSurface(Config())
        >>> chart = SmithChart(surface)
        >>> chart.update()
        >>> surface.fig.savefig("smith.png")
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        size = self.config.figure_size

        self.fig = plt.figure(
            figsize=(size, size),
            dpi=self.config.default_dpi
        )
        self.fig.patch.set_facecolor(self.config.background_color)

        self.ax = self.fig.add_axes([0.0, 0.0, 1.0, 1.0])
        self.ax.set_axis_off()
        self.ax.set_aspect("equal", adjustable="box")
        self.ax.set_anchor("NW")

        self._root = _Group()
        self.viewbox = (1.0, 1.0)
        self.set_viewbox(*self.viewbox)

        logger.debug(f"Created Matplotlib surface: {size}x{size} in, dpi={self.config.default_dpi}")

    def root(self) -> _Group:
        return self._root

    def append_group(self, parent: _Group) -> _Group:
        group = _Group(parent)
        parent.children.append(group)
        return group

    def append_path(self, parent: _Group) -> _Element:
        element = _Element(parent)
        parent.children.append(element)
        return element

    def remove(self, element: _Element) -> None:
        if element.artist is not None:
            element.artist.remove()
            element.artist = None
        element.group.children.remove(element)

    def set_viewbox(self, width: float, height: float) -> None:
        self.viewbox = (float(width), float(height))
        self.ax.set_xlim(0.0, width)
        self.ax.set_ylim(height, 0.0)
        # Stroke widths are in surface units, so they scale with the viewbox
        for element in self._root.walk_elements():
            self._redraw(element)

    def set_translation(self, container: _Group, dx: float, dy: float) -> None:
        container.dx, container.dy = float(dx), float(dy)
        for element in container.walk_elements():
            self._redraw(element)

    def set_path_data(self, element: _Element, path: Path) -> None:
        element.path = path
        self._redraw(element)

    def set_style(self, element: _Element, stroke: str, stroke_width: float, fill: str) -> None:
        element.stroke = stroke
        element.stroke_width = float(stroke_width)
        element.fill = fill
        self._redraw(element)

    def elements(self) -> List[_Element]:
        """Return every path element currently on the surface."""
        return list(self._root.walk_elements())

    def _linewidth_points(self, stroke_width: float) -> float:
        fig_width_points = self.fig.get_figwidth() * POINTS_PER_INCH
        return stroke_width * fig_width_points / max(self.viewbox)

    def _redraw(self, element: _Element) -> None:
        if element.artist is not None:
            element.artist.remove()
            element.artist = None

        if element.path is None:
            return
        mpl_path = _to_mpl_path(element.path)
        if mpl_path is None:
            return

        dx, dy = element.group.offset()
        filled = element.fill not in (None, "none")
        patch = mpatches.PathPatch(
            mpl_path,
            edgecolor=element.stroke,
            facecolor=element.fill if filled else "none",
            fill=filled,
            linewidth=self._linewidth_points(element.stroke_width),
            transform=mtransforms.Affine2D().translate(dx, dy) + self.ax.transData,
        )
        element.artist = self.ax.add_patch(patch)
        self._restack()

    def _restack(self) -> None:
        for index, element in enumerate(self._root.walk_elements()):
            if element.artist is not None:
                element.artist.set_zorder(BASE_ZORDER + index)

    def save(self, output_path: str, dpi: Optional[int] = None) -> str:
        """Write the figure to ``output_path``; the format follows the file suffix."""
        if dpi is None:
            dpi = self.config.default_dpi
        self.fig.savefig(output_path, dpi=dpi, facecolor=self.fig.get_facecolor())
        return output_path

    def close(self) -> None:
        """Release the underlying figure."""
        plt.close(self.fig)
