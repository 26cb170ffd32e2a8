"""
Smith chart model: configuration, geometry and the update protocol.

The chart follows a configure-then-flush protocol. Setters only record new
values (except set_margin, which resizes the viewport at once); update()
recomputes every arc from the current configuration and reconciles the
result against the elements already on the drawing surface.

Updating is split into two steps so each can be used on its own:
1. compute_chart_geometry(config) is pure and returns every arc to draw
2. render(...) joins that geometry against the previous RenderState and
   returns the new one
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..calculations.geometry import (
    Arc,
    constant_resistance_arc,
    constant_reactance_arc
)
from ..calculations.scales import ViewportScales, create_viewport_scales
from ..config import Config
from ..constants import LINE_FILL, TAU
from ..exceptions import RenderError
from ..logging_config import get_logger
from .join import JoinBatch
from .mpl_surface import MatplotlibSurface
from .path import Path
from .surface import DrawingSurface

logger = get_logger(__name__)

# Fixed reference curves, in gamma-plane coordinates
OUTER_CIRCLE = Arc(cx=0.0, cy=0.0, radius=1.0, angle1=0.0, angle2=0.0)
ZERO_REACTANCE_LINE = ((-1.0, 0.0), (1.0, 0.0))


@dataclass(frozen=True)
class ArcFamily:
    """
    One group of grid arcs drawn with the same color and sweep direction.

    Attributes:
        name: Family name ('real', 'imag_positive' or 'imag_negative')
        values: Configured values, one per arc
        arcs: Arc geometry, aligned with values
        color: Stroke color
        anticlockwise: Sweep direction passed to the path arc command
    """

    name: str
    values: Tuple[float, ...]
    arcs: Tuple[Arc, ...]
    color: str
    anticlockwise: bool


@dataclass(frozen=True)
class ChartGeometry:
    """Everything update() draws, computed from a Config."""

    real: ArcFamily
    imag_positive: ArcFamily
    imag_negative: ArcFamily
    real_line_color: str
    imag_line_color: str
    stroke_width: float

    @property
    def families(self) -> Tuple[ArcFamily, ArcFamily, ArcFamily]:
        return (self.real, self.imag_positive, self.imag_negative)


@dataclass
class ChartLayers:
    """Containers and fixed elements created once per chart."""

    root: Any
    real: Any
    imag_positive: Any
    imag_negative: Any
    outer_circle: Any
    zero_reactance_line: Any

    def container(self, family: str) -> Any:
        return getattr(self, family)


@dataclass(frozen=True)
class RenderState:
    """
    Elements on the surface after an update.

    Attributes:
        elements: Element handles per family name, in value order
        geometry: Geometry that produced them (None before the first update)
    """

    elements: Dict[str, Tuple[Any, ...]] = field(default_factory=lambda: {
        "real": (),
        "imag_positive": (),
        "imag_negative": (),
    })
    geometry: Optional[ChartGeometry] = None

    @property
    def is_drawn(self) -> bool:
        return self.geometry is not None


def compute_chart_geometry(config: Config) -> ChartGeometry:
    """
    Compute every grid arc for a configuration.

    Resistance circles span the full chart (reactance from +infinity to
    -infinity). Each reactance value gives two arcs from r = 0 to
    r = infinity: one for +x and its mirror image for -x. The mirrored family
    is swept in the opposite direction so it traces the same way on screen.

    Args:
        config: Chart configuration; ``config.infinity`` stands in for
            infinite bounds

    Returns:
        ChartGeometry with arcs in configured value order
    """
    inf = config.infinity
    real_values = tuple(config.real_line_values)
    imag_values = tuple(config.imag_line_values)

    real = ArcFamily(
        name="real",
        values=real_values,
        arcs=tuple(constant_resistance_arc(r, inf, -inf) for r in real_values),
        color=config.real_line_color,
        anticlockwise=True,
    )
    imag_positive = ArcFamily(
        name="imag_positive",
        values=imag_values,
        arcs=tuple(constant_reactance_arc(x, 0.0, inf) for x in imag_values),
        color=config.imag_line_color,
        anticlockwise=True,
    )
    imag_negative = ArcFamily(
        name="imag_negative",
        values=imag_values,
        arcs=tuple(constant_reactance_arc(-x, 0.0, inf) for x in imag_values),
        color=config.imag_line_color,
        anticlockwise=False,
    )

    return ChartGeometry(
        real=real,
        imag_positive=imag_positive,
        imag_negative=imag_negative,
        real_line_color=config.real_line_color,
        imag_line_color=config.imag_line_color,
        stroke_width=config.stroke_width,
    )


def arc_to_path(arc: Arc, scales: ViewportScales, anticlockwise: bool) -> Path:
    """Map a gamma-plane arc onto the surface and build its path."""
    path = Path()
    path.arc(
        scales.x(arc.cx),
        scales.y(arc.cy),
        scales.r(arc.radius),
        scales.a(arc.angle1),
        scales.a(arc.angle2),
        anticlockwise
    )
    return path


def outer_circle_path(scales: ViewportScales) -> Path:
    """Full unit circle (the r = 0 boundary of the chart)."""
    path = Path()
    path.arc(
        scales.x(OUTER_CIRCLE.cx),
        scales.y(OUTER_CIRCLE.cy),
        scales.r(OUTER_CIRCLE.radius),
        scales.a(0.0),
        scales.a(TAU),
        True
    )
    return path


def zero_reactance_path(scales: ViewportScales) -> Path:
    """Horizontal diameter of the chart (x = 0)."""
    (x0, y0), (x1, y1) = ZERO_REACTANCE_LINE
    path = Path()
    path.move_to(scales.x(x0), scales.y(y0))
    path.line_to(scales.x(x1), scales.y(y1))
    return path


def render(
    surface: DrawingSurface,
    layers: ChartLayers,
    config: Config,
    scales: ViewportScales,
    previous: RenderState
) -> RenderState:
    """
    Draw a configuration onto a surface.

    Each arc family is joined by position against the elements of the
    previous state: surplus values create elements, shared positions are
    redrawn in place, and surplus elements are removed. The outer circle and
    zero-reactance line are redrawn on every call.

    Removals happen only once every family has been drawn. If the surface
    raises part way, the elements created by this call are removed again
    and the exception propagates, so ``previous`` still matches what the
    surface holds.

    Args:
        surface: Drawing surface holding ``layers``
        layers: Containers created by the chart
        config: Configuration to draw
        scales: Viewport mapping
        previous: State returned by the previous call

    Returns:
        New RenderState
    """
    geometry = compute_chart_geometry(config)
    elements: Dict[str, Tuple[Any, ...]] = {}
    batch = JoinBatch(surface)

    try:
        for family in geometry.families:
            def draw(element: Any, arc: Arc, family: ArcFamily = family) -> None:
                surface.set_path_data(element, arc_to_path(arc, scales, family.anticlockwise))
                surface.set_style(element, family.color, geometry.stroke_width, LINE_FILL)

            elements[family.name] = tuple(batch.join(
                layers.container(family.name),
                previous.elements.get(family.name, ()),
                family.arcs,
                draw
            ))

        surface.set_path_data(layers.outer_circle, outer_circle_path(scales))
        surface.set_style(layers.outer_circle, geometry.real_line_color, geometry.stroke_width, LINE_FILL)

        surface.set_path_data(layers.zero_reactance_line, zero_reactance_path(scales))
        surface.set_style(layers.zero_reactance_line, geometry.imag_line_color, geometry.stroke_width, LINE_FILL)
    except Exception:
        # The previous state still describes the surface after this
        batch.rollback()
        raise
    batch.commit()

    return RenderState(elements=elements, geometry=geometry)


class SmithChart:
    """
    Smith chart grid bound to a drawing surface.

    Attributes:
        surface: DrawingSurface the chart draws into
        scales: Fixed viewport mapping from the gamma plane to the surface

    Example:
        >>> chart = SmithChart()
        >>> chart.update()
        >>> chart.set_real_line_values([0.1, 0.5, 1, 10])
        >>> chart.set_real_line_color("orange")
        >>> chart.update()
        >>> chart.save_chart("smith.png")
    """

    def __init__(
        self,
        surface: Optional[DrawingSurface] = None,
        margin: Optional[float] = None,
        real_line_values: Optional[Sequence[float]] = None,
        imag_line_values: Optional[Sequence[float]] = None,
        real_line_color: Optional[str] = None,
        imag_line_color: Optional[str] = None,
        config: Optional[Config] = None
    ):
        """
        Initialize a Smith chart.

        Explicit arguments override the matching ``config`` fields; anything
        left as None comes from ``config`` (or the defaults).

        Args:
            surface: Target surface (default: new MatplotlibSurface)
            margin: Border around the unit disk as a fraction of its diameter
            real_line_values: Resistance values to draw
            imag_line_values: Reactance magnitudes to draw
            real_line_color: Color of resistance circles and outer circle
            imag_line_color: Color of reactance arcs and zero-reactance line
            config: Base configuration (default: Config())
        """
        base = config if config is not None else Config()
        self._config = replace(
            base,
            real_line_values=list(base.real_line_values),
            imag_line_values=list(base.imag_line_values),
        )

        if surface is None:
            surface = MatplotlibSurface(self._config)
        self.surface = surface

        root = self.surface.append_group(self.surface.root())
        self._root = root
        self.set_margin(self._config.margin if margin is None else margin)

        self._layers = ChartLayers(
            root=root,
            real=self.surface.append_group(root),
            imag_positive=self.surface.append_group(root),
            imag_negative=self.surface.append_group(root),
            outer_circle=self.surface.append_path(root),
            zero_reactance_line=self.surface.append_path(root),
        )

        if real_line_values is not None:
            self.set_real_line_values(real_line_values)
        if imag_line_values is not None:
            self.set_imag_line_values(imag_line_values)
        if real_line_color is not None:
            self.set_real_line_color(real_line_color)
        if imag_line_color is not None:
            self.set_imag_line_color(imag_line_color)

        self.scales = create_viewport_scales()
        self._state = RenderState()

        logger.info(
            f"Initialized SmithChart: {len(self._config.real_line_values)} resistance, "
            f"{len(self._config.imag_line_values)} reactance values"
        )

    @property
    def config(self) -> Config:
        """Current configuration (read at the next update())."""
        return self._config

    @property
    def layers(self) -> ChartLayers:
        return self._layers

    @property
    def state(self) -> RenderState:
        return self._state

    @property
    def is_drawn(self) -> bool:
        return self._state.is_drawn

    def set_margin(self, margin: float) -> None:
        """Set the margin and resize the viewport immediately."""
        self._config.margin = margin
        size = 1 + 2 * margin
        self.surface.set_viewbox(size, size)
        self.surface.set_translation(self._root, margin, margin)
        logger.debug(f"Margin set to {margin}: viewbox {size}x{size}")

    def set_real_line_values(self, values: Sequence[float]) -> None:
        self._config.real_line_values = list(values)

    def set_imag_line_values(self, values: Sequence[float]) -> None:
        self._config.imag_line_values = list(values)

    def set_real_line_color(self, color: str) -> None:
        self._config.real_line_color = color

    def set_imag_line_color(self, color: str) -> None:
        self._config.imag_line_color = color

    def update(self) -> None:
        """Recompute all arcs and reconcile them with the surface."""
        self._state = render(
            self.surface,
            self._layers,
            self._config,
            self.scales,
            self._state
        )
        counts = self.rendered_counts()
        logger.info(
            f"Smith chart updated: {counts['real']} resistance arcs, "
            f"{counts['imag_positive'] + counts['imag_negative']} reactance arcs"
        )

    def rendered_counts(self) -> Dict[str, int]:
        """Number of drawn elements per arc family."""
        return {name: len(handles) for name, handles in self._state.elements.items()}

    def get_rendered_arcs(self) -> Dict[str, List[Arc]]:
        """
        Geometry drawn by the last update().

        Returns:
            Arc lists keyed by family name ('real', 'imag_positive',
            'imag_negative'); empty lists before the first update
        """
        geometry = self._state.geometry
        if geometry is None:
            return {"real": [], "imag_positive": [], "imag_negative": []}
        return {family.name: list(family.arcs) for family in geometry.families}

    def save_chart(self, output_path: str, dpi: Optional[int] = None) -> str:
        """
        Save the drawn chart to file.

        Args:
            output_path: Output file; the format follows the suffix
            dpi: Optional DPI override (uses config.default_dpi if None)

        Returns:
            Path to saved file

        Raises:
            RenderError: If update() has not been called or the surface
                cannot be saved
        """
        if not self.is_drawn:
            raise RenderError("Chart has not been drawn yet. Call update() first.")
        if not hasattr(self.surface, "save"):
            raise RenderError(f"{type(self.surface).__name__} does not support saving")

        logger.info(f"Saving chart to {output_path}")
        return self.surface.save(output_path, dpi=dpi)

    def close(self) -> None:
        """Release surface resources, if the surface holds any."""
        if hasattr(self.surface, "close"):
            self.surface.close()
