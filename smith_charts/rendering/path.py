"""
Path builder for drawing-surface geometry.

A Path records move/line/arc commands with the conventions of an HTML canvas
or SVG path: angles are measured in surface coordinates (y grows downwards),
and ``anticlockwise=True`` sweeps towards decreasing angles. Paths can be
exported as SVG path data or flattened into polylines.
"""

import math
from typing import List, Tuple

import numpy as np

from ..constants import TAU, ARC_SEGMENTS_PER_TURN

EPSILON = 1e-6
TAU_EPSILON = TAU - EPSILON


def _fmt(value: float) -> str:
    return format(float(value), ".10g")


class Path:
    """
    Ordered list of drawing commands.

    Commands are stored as tuples:
        ("M", x, y)                          move to
        ("L", x, y)                          line to
        ("A", cx, cy, r, start, sweep)       arc around (cx, cy); sweep is signed

    Example:
        >>> p = Path()
        >>> p.arc(0.5, 0.5, 0.5, 0.0, -TAU, anticlockwise=True)
        >>> p.to_svg()[:1]
        'M'
    """

    def __init__(self):
        self.ops: List[Tuple] = []
        self._x1 = None
        self._y1 = None

    def move_to(self, x: float, y: float) -> None:
        self.ops.append(("M", float(x), float(y)))
        self._x1, self._y1 = float(x), float(y)

    def line_to(self, x: float, y: float) -> None:
        self.ops.append(("L", float(x), float(y)))
        self._x1, self._y1 = float(x), float(y)

    def arc(
        self,
        cx: float,
        cy: float,
        r: float,
        a0: float,
        a1: float,
        anticlockwise: bool = False
    ) -> None:
        """
        Add a circular arc from angle ``a0`` to angle ``a1``.

        The sweep is normalized into [0, 2*pi) in the requested direction;
        a sweep within EPSILON of a full turn draws the complete circle. If
        the path already has a current point away from the arc start, a
        connecting line is added first.
        """
        cx, cy, r = float(cx), float(cy), float(r)
        x0 = cx + r * math.cos(a0)
        y0 = cy + r * math.sin(a0)

        if self._x1 is None:
            self.move_to(x0, y0)
        elif abs(self._x1 - x0) > EPSILON or abs(self._y1 - y0) > EPSILON:
            self.line_to(x0, y0)

        if not r:
            return

        da = a0 - a1 if anticlockwise else a1 - a0
        if da < 0:
            da = math.fmod(da, TAU) + TAU

        if da > TAU_EPSILON:
            da = TAU
        elif not da > EPSILON:
            # Empty (or non-finite) sweep: nothing past the start point
            return

        sweep = -da if anticlockwise else da
        self.ops.append(("A", cx, cy, r, float(a0), float(sweep)))
        self._x1 = cx + r * math.cos(a0 + sweep)
        self._y1 = cy + r * math.sin(a0 + sweep)

    @property
    def is_empty(self) -> bool:
        return not self.ops

    def to_svg(self) -> str:
        """Return the path as an SVG ``d`` attribute string."""
        parts = []
        for op in self.ops:
            if op[0] in ("M", "L"):
                parts.append(f"{op[0]}{_fmt(op[1])},{_fmt(op[2])}")
                continue

            _, cx, cy, r, start, sweep = op
            flag = 1 if sweep > 0 else 0
            end = start + sweep
            if abs(sweep) >= TAU:
                # A full circle needs two half arcs
                mid = start + sweep / 2
                for angle in (mid, end):
                    parts.append(
                        f"A{_fmt(r)},{_fmt(r)},0,1,{flag},"
                        f"{_fmt(cx + r * math.cos(angle))},{_fmt(cy + r * math.sin(angle))}"
                    )
            else:
                large = 1 if abs(sweep) >= math.pi else 0
                parts.append(
                    f"A{_fmt(r)},{_fmt(r)},0,{large},{flag},"
                    f"{_fmt(cx + r * math.cos(end))},{_fmt(cy + r * math.sin(end))}"
                )
        return "".join(parts)

    def to_polyline(self, segments_per_turn: int = ARC_SEGMENTS_PER_TURN) -> List[np.ndarray]:
        """
        Flatten the path into polylines.

        Args:
            segments_per_turn: Straight segments used for a full circle

        Returns:
            One (N, 2) array per subpath (each move_to starts a new one, as
            does a line_to with no current point)
        """
        subpaths: List[List[Tuple[float, float]]] = []
        for op in self.ops:
            if op[0] == "M" or not subpaths:
                subpaths.append([(op[1], op[2])])
            elif op[0] == "L":
                subpaths[-1].append((op[1], op[2]))
            else:
                _, cx, cy, r, start, sweep = op
                n = max(2, int(math.ceil(abs(sweep) / TAU * segments_per_turn)))
                angles = start + np.linspace(0.0, sweep, n + 1)[1:]
                subpaths[-1].extend(zip(cx + r * np.cos(angles), cy + r * np.sin(angles)))
        return [np.asarray(points, dtype=float) for points in subpaths]

    def __repr__(self) -> str:
        return f"Path({self.to_svg()!r})"
