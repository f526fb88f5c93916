import matplotlib.pyplot as plt
import plotly.graph_objects as go
from matplotlib.figure import Figure

from hangar import ArmoredCar, Hangar
from hangar.visualization import (
    COLORS,
    MatplotlibSurface,
    PlotlySurface,
    create_hangar_figure,
    create_hangar_plotly_figure,
    resolve_color,
)


def test_hangar_draw_sets_positions_and_markings(surface, make_vehicles):
    hangar = Hangar(640, 480)
    vehicles = make_vehicles(5)
    for vehicle in vehicles:
        hangar.add(vehicle)

    hangar.draw(surface)

    # markings first, all with the black 3px pen
    markings = surface.calls[:24]
    assert all(c[0] == "line" and c[2] == {"color": "black", "width": 3} for c in markings)

    assert (vehicles[0].position_x, vehicles[0].position_y) == (10, 12)
    assert (vehicles[4].position_x, vehicles[4].position_y) == (220, 101)
    assert vehicles[4].picture_width == 640
    assert vehicles[4].picture_height == 480
    assert len(surface.calls) == 24 + 5 * 7


def test_positions_follow_order_after_removal(surface, make_vehicles):
    hangar = Hangar(640, 480)
    vehicles = make_vehicles(3)
    for vehicle in vehicles:
        hangar.add(vehicle)
    hangar.draw(surface)

    hangar.remove_at(0)
    hangar.draw(surface)
    assert (vehicles[1].position_x, vehicles[1].position_y) == (10, 12)
    assert (vehicles[2].position_x, vehicles[2].position_y) == (220, 12)


def test_resolve_color():
    assert resolve_color("green") == COLORS["green"]
    assert resolve_color("#123456") == "#123456"


def test_create_hangar_figure(car):
    hangar = Hangar(640, 480)
    hangar.add(car)

    fig = create_hangar_figure(hangar, title="Hangar")
    assert isinstance(fig, Figure)
    ax = fig.axes[0]
    assert ax.get_ylim() == (480.0, 0.0)
    # 24 marking lines plus the gun
    assert len(ax.lines) == 25
    assert len(ax.patches) == 8
    assert (car.position_x, car.position_y) == (10, 12)
    plt.close(fig)


def test_create_hangar_plotly_figure(car):
    hangar = Hangar(640, 480)
    hangar.add(car)

    fig = create_hangar_plotly_figure(hangar)
    assert isinstance(fig, go.Figure)
    shapes = fig.layout.shapes
    assert len(shapes) == 24 + 9
    assert shapes[0].type == "line"
    assert (shapes[0].x0, shapes[0].y0, shapes[0].x1, shapes[0].y1) == (0, 0, 155, 0)


def test_surfaces_accept_drawing_primitives():
    fig = go.Figure()
    PlotlySurface(fig).draw_rectangle(0, 0, 10, 10, color="red", fill=False)
    assert fig.layout.shapes[0].type == "rect"
    assert fig.layout.shapes[0].x1 == 10

    mpl_fig = Figure()
    ax = mpl_fig.add_subplot(111)
    MatplotlibSurface(ax).draw_ellipse(0, 0, 20, 10, fill=True)
    assert len(ax.patches) == 1


def test_create_hangar_figure_can_be_closed(car):
    hangar = Hangar(640, 480)
    hangar.add(car)
    before = len(plt.get_fignums())

    fig = create_hangar_figure(hangar)
    assert len(plt.get_fignums()) == before + 1

    plt.close(fig)
    assert len(plt.get_fignums()) == before
