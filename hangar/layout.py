"""
Slot layout for the hangar drawing surface

This module holds the fixed slot geometry and the arithmetic that turns a
storage index into a pixel position on the drawing surface.

Slot geometry:
==============

    - Every parking place is 210 px wide and 80 px tall
    - Rows are separated by a 9 px shift (a row occupies 89 px vertically)
    - Vehicles are placed in a fixed 3-column grid regardless of surface width
    - Capacity is (surface_width // 210) * (surface_height // 80)

Coordinates are screen pixels: origin in the top-left corner, y grows down.
"""

from typing import Dict, List, Tuple


# ============================================================================
# SLOT GEOMETRY CONSTANTS
# ============================================================================

# Parking place size (pixels)
PLACE_SIZE_WIDTH = 210
PLACE_SIZE_HEIGHT = 80

# Vertical gap added to every row
ROW_SHIFT = 9

# Vehicles are always laid out in three columns
GRID_COLUMNS = 3

# Offsets of a vehicle inside its place
PLACE_OFFSET_X = 5
PLACE_PADDING_X = 5
PLACE_OFFSET_Y = 12

# Marking lines run past the middle of the place by this amount
MARKING_LINE_EXTRA = 50
MARKING_PEN_WIDTH = 3
MARKING_COLOR = 'black'


# (x1, y1, x2, y2)
Segment = Tuple[int, int, int, int]


def compute_max_count(picture_width: int, picture_height: int) -> int:
    """
    Number of parking places that fit on a surface

    Args:
        picture_width: Surface width (pixels)
        picture_height: Surface height (pixels)

    Returns:
        Columns that fit times rows that fit
    """
    return (picture_width // PLACE_SIZE_WIDTH) * (picture_height // PLACE_SIZE_HEIGHT)


def place_position(index: int) -> Tuple[int, int]:
    """
    Pixel position of the vehicle stored at ``index``

    Args:
        index: Storage index (0-based)

    Returns:
        (x, y) of the vehicle's top-left corner
    """
    column = index % GRID_COLUMNS
    row = index // GRID_COLUMNS
    x = PLACE_OFFSET_X + column * PLACE_SIZE_WIDTH + PLACE_PADDING_X
    y = row * (PLACE_SIZE_HEIGHT + ROW_SHIFT) + PLACE_OFFSET_Y
    return x, y


def place_cell(index: int) -> Tuple[int, int]:
    """Return (row, column) of a storage index in the 3-column grid."""
    return index // GRID_COLUMNS, index % GRID_COLUMNS


def marking_segments(picture_width: int, picture_height: int) -> List[Segment]:
    """
    Line segments of the parking-space markings

    For every column that fits on the surface a short horizontal tick is drawn
    at the top of each row (plus one closing tick below the last row), followed
    by a vertical separator on the column's left edge.

    Args:
        picture_width: Surface width (pixels)
        picture_height: Surface height (pixels)

    Returns:
        Segments in drawing order
    """
    segments = []
    columns = picture_width // PLACE_SIZE_WIDTH
    rows = picture_height // PLACE_SIZE_HEIGHT
    row_step = PLACE_SIZE_HEIGHT + ROW_SHIFT
    tick_length = PLACE_SIZE_WIDTH // 2 + MARKING_LINE_EXTRA

    for i in range(columns):
        x_left = i * PLACE_SIZE_WIDTH
        for j in range(rows + 1):
            y = j * row_step
            segments.append((x_left, y, x_left + tick_length, y))
        segments.append((x_left, 0, x_left, rows * row_step))

    return segments


def get_layout_config() -> Dict:
    """
    Get the slot layout parameters as a dictionary

    Returns:
        Dictionary with layout configuration:
        - place_width / place_height: Slot size
        - row_shift: Gap added per row
        - grid_columns: Columns used when placing vehicles
        - offset_x / padding_x / offset_y: Vehicle offsets inside a slot
        - marking_pen_width / marking_color: Pen used for markings
    """
    return {
        'place_width': PLACE_SIZE_WIDTH,
        'place_height': PLACE_SIZE_HEIGHT,
        'row_shift': ROW_SHIFT,
        'grid_columns': GRID_COLUMNS,
        'offset_x': PLACE_OFFSET_X,
        'padding_x': PLACE_PADDING_X,
        'offset_y': PLACE_OFFSET_Y,
        'marking_pen_width': MARKING_PEN_WIDTH,
        'marking_color': MARKING_COLOR,
    }
