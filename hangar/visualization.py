"""
Drawing surfaces and figures for the hangar

Two renderers are supported:
- Matplotlib: static figures (``MatplotlibSurface`` over an ``Axes``)
- Plotly: interactive figures (``PlotlySurface`` over a ``go.Figure``)

Both surfaces speak screen pixels (origin top-left, y down), the coordinate
system ``Hangar.draw`` and the vehicles use. The y axis is flipped on the
figure so the picture reads the same way it would on a window.
"""

from typing import Optional

import matplotlib.pyplot as plt
import plotly.graph_objects as go
from matplotlib.figure import Figure
from matplotlib.patches import Ellipse, Rectangle

from .hangar import Hangar


# ===== COLOR PALETTE =====
# Hex values so the same palette works for matplotlib and plotly

COLORS = {
    'background': '#FFFFFF',
    'black': '#000000',
    'dimgray': '#696969',
    'gray': '#808080',
    'green': '#2E7D32',
    'olive': '#6B8E23',
    'khaki': '#BDB76B',
    'brown': '#8B5A2B',
    'sand': '#C2B280',
    'blue': '#1F4E79',
    'red': '#B22222',
    'yellow': '#DAA520',
}


def resolve_color(name: str) -> str:
    """Palette lookup; unknown names are passed through to the renderer."""
    return COLORS.get(name, name)


class MatplotlibSurface:
    """Drawing surface backed by a matplotlib ``Axes``"""

    def __init__(self, ax):
        self.ax = ax

    def draw_line(self, x1, y1, x2, y2, color='black', width=1):
        self.ax.plot([x1, x2], [y1, y2], color=resolve_color(color), linewidth=width,
                     solid_capstyle='butt')

    def draw_rectangle(self, x, y, width, height, color='black', fill=True):
        color = resolve_color(color)
        self.ax.add_patch(Rectangle((x, y), width, height,
                                    facecolor=color if fill else 'none', edgecolor=color))

    def draw_ellipse(self, x, y, width, height, color='black', fill=False):
        color = resolve_color(color)
        center = (x + width / 2, y + height / 2)
        self.ax.add_patch(Ellipse(center, width, height,
                                  facecolor=color if fill else 'none', edgecolor=color))


class PlotlySurface:
    """Drawing surface backed by a plotly ``go.Figure`` (one shape per call)"""

    def __init__(self, fig: go.Figure):
        self.fig = fig

    def draw_line(self, x1, y1, x2, y2, color='black', width=1):
        self.fig.add_shape(type='line', x0=x1, y0=y1, x1=x2, y1=y2,
                           line=dict(color=resolve_color(color), width=width))

    def draw_rectangle(self, x, y, width, height, color='black', fill=True):
        color = resolve_color(color)
        self.fig.add_shape(type='rect', x0=x, y0=y, x1=x + width, y1=y + height,
                           line=dict(color=color, width=1),
                           fillcolor=color if fill else None)

    def draw_ellipse(self, x, y, width, height, color='black', fill=False):
        color = resolve_color(color)
        self.fig.add_shape(type='circle', x0=x, y0=y, x1=x + width, y1=y + height,
                           line=dict(color=color, width=1),
                           fillcolor=color if fill else None)


def create_hangar_figure(hangar: Hangar, title: Optional[str] = None) -> Figure:
    """
    Render a hangar into a matplotlib figure

    Args:
        hangar: Hangar to draw (vehicle positions are updated as a side effect)
        title: Optional axes title

    Returns:
        Figure sized to the hangar's picture (100 px per inch)
    """
    width = max(hangar.picture_width, 1)
    height = max(hangar.picture_height, 1)

    fig: Figure = plt.figure(figsize=(width / 100, height / 100))
    ax = fig.add_subplot(111)
    ax.set_facecolor(COLORS['background'])
    ax.set_aspect('equal')
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)  # screen coordinates: y grows down
    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title)

    hangar.draw(MatplotlibSurface(ax))
    return fig


def create_hangar_plotly_figure(hangar: Hangar, title: Optional[str] = None) -> go.Figure:
    """
    Render a hangar into an interactive plotly figure

    Args:
        hangar: Hangar to draw (vehicle positions are updated as a side effect)
        title: Optional figure title

    Returns:
        Plotly figure with one layout shape per drawing primitive
    """
    width = max(hangar.picture_width, 1)
    height = max(hangar.picture_height, 1)

    fig = go.Figure()
    fig.update_layout(
        title=title,
        width=width,
        height=height,
        plot_bgcolor=COLORS['background'],
        showlegend=False,
        xaxis=dict(range=[0, width], visible=False),
        yaxis=dict(range=[height, 0], visible=False, scaleanchor='x', scaleratio=1),
        margin=dict(l=0, r=0, t=40 if title else 0, b=0),
    )

    hangar.draw(PlotlySurface(fig))
    return fig
