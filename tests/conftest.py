import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from comet import Comet, CometSizeConfig
from canvas import Canvas


class RecordingCanvas(Canvas):
    """Canvas that records draw calls instead of rasterizing them."""

    def __init__(self):
        self.circles = []
        self.polygons = []
        self.calls = []

    def fill_circle(self, center, diameter, color):
        self.circles.append((tuple(center), diameter, color))
        self.calls.append("circle")

    def fill_polygon(self, points, color):
        self.polygons.append((list(points), color))
        self.calls.append("polygon")


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def size_config():
    return CometSizeConfig(max_size=10.0, min_size=2.0, max_distance=100.0)


@pytest.fixture
def make_comet(size_config):
    def _make(start=(0.0, 0.0), size=5.0, first_target=(0.0, 0.0), config=size_config):
        return Comet(start, size, config, first_target)
    return _make


class NullCanvas(Canvas):
    """Canvas that discards everything, for long runs."""

    def fill_circle(self, center, diameter, color):
        pass

    def fill_polygon(self, points, color):
        pass


@pytest.fixture
def null_canvas():
    return NullCanvas()
