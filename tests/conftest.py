import matplotlib

matplotlib.use("Agg")

import pytest

from hangar import ArmoredCar, ArmoredVehicle


class RecordingSurface:
    """Drawing surface that records every call as (primitive, args, kwargs)."""

    def __init__(self):
        self.calls = []

    def draw_line(self, x1, y1, x2, y2, color="black", width=1):
        self.calls.append(("line", (x1, y1, x2, y2), {"color": color, "width": width}))

    def draw_rectangle(self, x, y, width, height, color="black", fill=True):
        self.calls.append(("rect", (x, y, width, height), {"color": color, "fill": fill}))

    def draw_ellipse(self, x, y, width, height, color="black", fill=False):
        self.calls.append(("ellipse", (x, y, width, height), {"color": color, "fill": fill}))

    def of(self, primitive):
        return [c for c in self.calls if c[0] == primitive]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def make_vehicles():
    def _make(count):
        return [ArmoredVehicle(max_speed=40 + i, weight=10.0, main_color="green") for i in range(count)]
    return _make


@pytest.fixture
def car():
    return ArmoredCar(max_speed=60, weight=12.0, main_color="olive", dop_color="khaki")
