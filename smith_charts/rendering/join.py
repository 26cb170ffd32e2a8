"""
Position-keyed reconciliation of data against rendered elements.

Each chart line family is a list of path elements that must track a list of
values. On every update the two lists are joined by position:

- enter:  indices past the old element count get a new element
- update: indices present in both lists reuse the element at that index
- exit:   old elements past the new data length are removed

There is no stable identity beyond the index, so reordering the values
re-purposes existing elements. Geometry is always recomputed from the data,
so the result on screen only depends on the current values.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Sequence, Tuple

from ..logging_config import get_logger
from .surface import DrawingSurface

logger = get_logger(__name__)


@dataclass
class JoinPlan:
    """
    Actions needed to bring a list of elements in line with a list of data.

    Attributes:
        enter: (index, datum) pairs that need a new element
        update: (index, element, datum) triples that reuse an element
        exit: elements to remove
    """

    enter: List[Tuple[int, Any]] = field(default_factory=list)
    update: List[Tuple[int, Any, Any]] = field(default_factory=list)
    exit: List[Any] = field(default_factory=list)


def plan_join(elements: Sequence[Any], data: Sequence[Any]) -> JoinPlan:
    """
    Split a join into enter/update/exit actions.

    Args:
        elements: Currently rendered element handles, in order
        data: New data values, in order

    Returns:
        JoinPlan describing the changes
    """
    shared = min(len(elements), len(data))
    return JoinPlan(
        enter=[(i, data[i]) for i in range(shared, len(data))],
        update=[(i, elements[i], data[i]) for i in range(shared)],
        exit=list(elements[shared:]),
    )


class JoinBatch:
    """
    Joins for several containers applied as one change.

    New elements are appended and drawn as each join is staged, but exited
    elements stay on the surface until commit(). rollback() removes the
    elements created so far, which leaves the surface holding exactly the
    elements it held before the batch started.

    Example:
        >>> batch = JoinBatch(surface)
        >>> try:
        ...     handles = batch.join(container, elements, values, draw)
        ... except Exception:
        ...     batch.rollback()
        ...     raise
        >>> batch.commit()
    """

    def __init__(self, surface: DrawingSurface):
        self.surface = surface
        self._created: List[Any] = []
        self._exiting: List[Any] = []

    def join(
        self,
        container: Any,
        elements: Sequence[Any],
        data: Sequence[Any],
        draw: Callable[[Any, Any], None]
    ) -> List[Any]:
        """Stage one join; returns the new element list, one handle per datum."""
        plan = plan_join(elements, data)

        result = [element for _, element, _ in plan.update]
        for _ in plan.enter:
            element = self.surface.append_path(container)
            self._created.append(element)
            result.append(element)

        for element, datum in zip(result, data):
            draw(element, datum)

        self._exiting.extend(plan.exit)
        logger.debug(
            f"Join: {len(plan.enter)} entered, {len(plan.update)} updated, "
            f"{len(plan.exit)} exiting"
        )
        return result

    def commit(self) -> None:
        """Remove every exited element."""
        for element in self._exiting:
            self.surface.remove(element)
        self._created.clear()
        self._exiting.clear()

    def rollback(self) -> None:
        """Remove every element created by this batch."""
        for element in self._created:
            self.surface.remove(element)
        logger.debug(f"Join rolled back: {len(self._created)} new element(s) removed")
        self._created.clear()
        self._exiting.clear()


def apply_join(
    surface: DrawingSurface,
    container: Any,
    elements: Sequence[Any],
    data: Sequence[Any],
    draw: Callable[[Any, Any], None]
) -> List[Any]:
    """
    Reconcile ``elements`` with ``data`` on a surface.

    New elements are appended to ``container``; ``draw(element, datum)`` is
    called for every entered and updated element; exited elements are
    removed. If ``draw`` raises, the new elements are removed again and the
    old ones are kept.

    Returns:
        The new element list, one handle per datum
    """
    batch = JoinBatch(surface)
    try:
        result = batch.join(container, elements, data, draw)
    except Exception:
        batch.rollback()
        raise
    batch.commit()
    return result
