import matplotlib
matplotlib.use("Agg")

import pytest

from smith_charts.rendering.surface import DrawingSurface
from smith_charts.rendering import SmithChart


class Node:
    def __init__(self, node_id, kind, parent):
        self.id = node_id
        self.kind = kind
        self.parent = parent
        self.children = []

    def __repr__(self):
        return f"Node({self.id}, {self.kind!r})"


class RecordingSurface(DrawingSurface):
    """DrawingSurface stub that records every call and keeps a tiny scene tree."""

    def __init__(self):
        self.calls = []
        self._next_id = 0
        self._root = self._new("root", None)
        self.viewbox = None
        self.translations = {}
        self.paths = {}
        self.styles = {}
        self.removed = []

    def _new(self, kind, parent):
        self._next_id += 1
        return Node(self._next_id, kind, parent)

    def root(self):
        return self._root

    def append_group(self, parent):
        group = self._new("group", parent)
        parent.children.append(group)
        self.calls.append(("append_group", parent.id, group.id))
        return group

    def append_path(self, parent):
        element = self._new("path", parent)
        parent.children.append(element)
        self.calls.append(("append_path", parent.id, element.id))
        return element

    def remove(self, element):
        element.parent.children.remove(element)
        self.removed.append(element.id)
        self.calls.append(("remove", element.id))

    def set_viewbox(self, width, height):
        self.viewbox = (width, height)
        self.calls.append(("set_viewbox", width, height))

    def set_translation(self, container, dx, dy):
        self.translations[container.id] = (dx, dy)
        self.calls.append(("set_translation", container.id, dx, dy))

    def set_path_data(self, element, path):
        self.paths[element.id] = path
        self.calls.append(("set_path_data", element.id))

    def set_style(self, element, stroke, stroke_width, fill):
        self.styles[element.id] = (stroke, stroke_width, fill)
        self.calls.append(("set_style", element.id, stroke, stroke_width, fill))

    def paths_in(self, container):
        return [child for child in container.children if child.kind == "path"]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def chart(surface):
    return SmithChart(surface)
