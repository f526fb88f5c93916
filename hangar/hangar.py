"""
Hangar: a fixed-capacity parking garage for vehicles

The hangar stores vehicles in insertion order, never more than fit on its
drawing surface and never two equal ones. Removing a vehicle compacts the
list: every vehicle after it moves one place down.

Drawing assigns each vehicle a place in a 3-column grid and writes that
position into the vehicle before asking it to draw itself.
"""

import functools
import logging
import numbers
from typing import Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

from .errors import CapacityExceededError, DuplicateElementError, IndexNotFoundError
from .layout import (
    MARKING_COLOR,
    MARKING_PEN_WIDTH,
    compute_max_count,
    marking_segments,
    place_position,
)
from .transport import DrawingSurface, Transport, compare_transports

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Transport)


class HangarIterator(Generic[T]):
    """
    Cursor over a hangar's vehicles

    Holds its own cursor and a read-only view of the hangar's list, so several
    traversals can run side by side. The view is live: mutating the hangar
    while iterating is not guarded against.

    States:
        cursor == -1       before the first vehicle
        0 <= cursor < n    positioned on a vehicle
    Running off the end returns the cursor to -1.
    """

    def __init__(self, places: Sequence[T]):
        self._places = places
        self._cursor = -1
        self._exhausted = False

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> T:
        """Vehicle under the cursor; IndexError when not positioned."""
        if self._cursor < 0 or self._cursor >= len(self._places):
            raise IndexError("Iterator is not positioned on a vehicle")
        return self._places[self._cursor]

    def move_next(self) -> bool:
        """
        Advance to the next vehicle

        Returns:
            True if positioned on a vehicle, False (and reset) at the end
        """
        if self._cursor + 1 < len(self._places):
            self._cursor += 1
            self._exhausted = False
            return True
        self.reset()
        return False

    def reset(self) -> None:
        self._cursor = -1
        self._exhausted = False

    def __iter__(self):
        return self

    def __next__(self) -> T:
        # move_next() rewinds at the end; keep StopIteration sticky until reset()
        if self._exhausted or not self.move_next():
            self._exhausted = True
            raise StopIteration
        return self._places[self._cursor]


class Hangar(Generic[T]):
    """
    Bounded, ordered collection of vehicles

    Capacity is fixed at construction from the drawing surface size:
    (width // 210) * (height // 80) places.
    """

    def __init__(self, picture_width: int, picture_height: int):
        """
        Initialize an empty hangar

        Args:
            picture_width: Drawing surface width (pixels)
            picture_height: Drawing surface height (pixels)
        """
        self.picture_width = picture_width
        self.picture_height = picture_height
        self._validate_inputs()
        self.picture_width = int(picture_width)
        self.picture_height = int(picture_height)

        self._max_count = compute_max_count(picture_width, picture_height)
        self._places: List[T] = []

    def _validate_inputs(self):
        for name, value in (('Width', self.picture_width), ('Height', self.picture_height)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer number of pixels (got {value!r})")
            if value < 0:
                raise ValueError(f"{name} must not be negative (got {value})")

    @property
    def max_count(self) -> int:
        return self._max_count

    @property
    def places(self) -> Tuple[T, ...]:
        """Snapshot of the stored vehicles in storage order"""
        return tuple(self._places)

    @property
    def free_places(self) -> int:
        return self._max_count - len(self._places)

    @property
    def is_full(self) -> bool:
        return len(self._places) >= self._max_count

    def add(self, vehicle: T) -> int:
        """
        Park a vehicle at the end

        Args:
            vehicle: Vehicle to park

        Returns:
            Index of the new vehicle

        Raises:
            CapacityExceededError: Every place is taken
            DuplicateElementError: An equal vehicle is already parked
        """
        if self.is_full:
            logger.warning("Rejected %r: hangar is full (%d places)", vehicle, self._max_count)
            raise CapacityExceededError(self._max_count)
        if vehicle in self._places:
            logger.warning("Rejected %r: already parked", vehicle)
            raise DuplicateElementError(vehicle)

        self._places.append(vehicle)
        index = len(self._places) - 1
        logger.debug("Parked %r at place %d", vehicle, index)
        return index

    def remove_at(self, index: int) -> T:
        """
        Take the vehicle at ``index`` out of the hangar

        Vehicles after it shift down by one place.

        Raises:
            IndexNotFoundError: ``index`` is outside [0, len)
        """
        if index < 0 or index >= len(self._places):
            raise IndexNotFoundError(index)

        vehicle = self._places.pop(index)
        logger.debug("Removed %r from place %d", vehicle, index)
        return vehicle

    def get_at(self, index: int) -> Optional[T]:
        """Vehicle at ``index``, or None when there is none."""
        if index < 0 or index >= len(self._places):
            return None
        return self._places[index]

    def sort(self, comparator: Optional[Callable[[T, T], int]] = None) -> None:
        """
        Reorder the vehicles in place

        Args:
            comparator: cmp-style function (negative, zero, positive);
                defaults to ``compare_transports``
        """
        comparator = comparator or compare_transports
        self._places.sort(key=functools.cmp_to_key(comparator))
        logger.debug("Sorted %d vehicles", len(self._places))

    def draw(self, surface: DrawingSurface) -> None:
        """
        Draw markings, then every vehicle at the place its index maps to

        The computed position is stored on each vehicle through
        ``set_position`` before it draws itself.
        """
        self._draw_marking(surface)
        for i, vehicle in enumerate(self._places):
            x, y = place_position(i)
            vehicle.set_position(x, y, self.picture_width, self.picture_height)
            vehicle.draw_transport(surface)
        logger.debug("Drew hangar with %d vehicles", len(self._places))

    def _draw_marking(self, surface: DrawingSurface) -> None:
        for x1, y1, x2, y2 in marking_segments(self.picture_width, self.picture_height):
            surface.draw_line(x1, y1, x2, y2, color=MARKING_COLOR, width=MARKING_PEN_WIDTH)

    def __iter__(self) -> HangarIterator[T]:
        return HangarIterator(self._places)

    def __len__(self):
        return len(self._places)

    def __contains__(self, vehicle):
        return vehicle in self._places

    def __repr__(self):
        return f"Hangar({self.picture_width}x{self.picture_height}, {len(self._places)}/{self._max_count})"
