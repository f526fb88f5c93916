"""
Vehicles that can be parked in a hangar

The hangar only relies on the ``Transport`` capability contract: anything with
``set_position`` and ``draw_transport`` can be stored. ``ArmoredVehicle`` and
``ArmoredCar`` are the concrete vehicles used by the application and tests,
and ``compare_transports`` is the default ordering used by ``Hangar.sort``.
"""

from enum import Enum
from typing import Optional, Protocol, runtime_checkable


# Vehicle footprint (pixels); fits inside a 210x80 parking place
DEFAULT_VEHICLE_WIDTH = 200
DEFAULT_VEHICLE_HEIGHT = 70

TRACK_COLOR = 'dimgray'
GUN_COLOR = 'black'


class DrawingSurface(Protocol):
    """Primitive drawing calls in screen pixels (origin top-left, y down)."""

    def draw_line(self, x1: float, y1: float, x2: float, y2: float,
                  color: str = 'black', width: float = 1) -> None:
        ...

    def draw_rectangle(self, x: float, y: float, width: float, height: float,
                       color: str = 'black', fill: bool = True) -> None:
        ...

    def draw_ellipse(self, x: float, y: float, width: float, height: float,
                     color: str = 'black', fill: bool = False) -> None:
        ...


@runtime_checkable
class Transport(Protocol):
    """Capability contract for anything stored in a hangar"""

    def set_position(self, x: int, y: int, width: int, height: int) -> None:
        """
        Place the transport on the surface

        Args:
            x, y: Top-left corner (pixels)
            width, height: Bounds of the surface the transport lives on
        """
        ...

    def draw_transport(self, surface: DrawingSurface) -> None:
        """Draw the transport at its current position."""
        ...


class Direction(Enum):
    """Movement directions for ``ArmoredVehicle.move``"""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class ArmoredVehicle:
    """
    Basic armored vehicle: a hull on tracks

    Two vehicles are equal when they are the same kind of vehicle with the same
    speed, weight and color. The position is not part of equality; it is
    written by whoever places the vehicle (``Hangar.draw`` does so).
    """

    vehicle_width = DEFAULT_VEHICLE_WIDTH
    vehicle_height = DEFAULT_VEHICLE_HEIGHT

    def __init__(self, max_speed: int, weight: float, main_color: str):
        """
        Initialize a vehicle

        Args:
            max_speed: Maximum speed (km/h)
            weight: Weight (tonnes), must be positive
            main_color: Hull color name
        """
        if weight <= 0:
            raise ValueError(f"Weight must be positive (got {weight})")

        self.max_speed = max_speed
        self.weight = weight
        self.main_color = main_color

        self.position_x: Optional[int] = None
        self.position_y: Optional[int] = None
        self.picture_width: Optional[int] = None
        self.picture_height: Optional[int] = None

    @property
    def step(self) -> float:
        """Distance covered by one ``move`` call"""
        return self.max_speed * 100 / self.weight

    def _key(self) -> tuple:
        return (self.max_speed, self.weight, self.main_color)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())

    def __repr__(self):
        return (f"{type(self).__name__}(max_speed={self.max_speed}, "
                f"weight={self.weight}, main_color={self.main_color!r})")

    def set_position(self, x: int, y: int, width: int, height: int) -> None:
        self.position_x = x
        self.position_y = y
        self.picture_width = width
        self.picture_height = height

    def move(self, direction: Direction) -> bool:
        """
        Move one step, staying inside the picture

        Args:
            direction: Where to move

        Returns:
            True if the vehicle moved, False if the edge blocked it
        """
        if self.position_x is None or self.picture_width is None:
            raise ValueError("Vehicle has no position; call set_position first")

        step = self.step
        if direction == Direction.RIGHT:
            if self.position_x + step < self.picture_width - self.vehicle_width:
                self.position_x += step
                return True
        elif direction == Direction.LEFT:
            if self.position_x - step > 0:
                self.position_x -= step
                return True
        elif direction == Direction.UP:
            if self.position_y - step > 0:
                self.position_y -= step
                return True
        elif direction == Direction.DOWN:
            if self.position_y + step < self.picture_height - self.vehicle_height:
                self.position_y += step
                return True
        return False

    def draw_transport(self, surface: DrawingSurface) -> None:
        if self.position_x is None:
            return

        x, y = self.position_x, self.position_y

        # Tracks
        surface.draw_ellipse(x, y + 45, 180, 25, color=TRACK_COLOR)
        for wheel in range(5):
            surface.draw_ellipse(x + 15 + wheel * 32, y + 50, 18, 15, color=TRACK_COLOR, fill=True)

        # Hull
        surface.draw_rectangle(x + 10, y + 25, 160, 20, color=self.main_color)


class ArmoredCar(ArmoredVehicle):
    """Armored vehicle with an optional turret and gun in an extra color"""

    def __init__(self, max_speed: int, weight: float, main_color: str,
                 dop_color: str, turret: bool = True, gun: bool = True):
        super().__init__(max_speed, weight, main_color)
        self.dop_color = dop_color
        self.turret = turret
        self.gun = gun

    def _key(self) -> tuple:
        return super()._key() + (self.dop_color, self.turret, self.gun)

    def __repr__(self):
        return (f"ArmoredCar(max_speed={self.max_speed}, weight={self.weight}, "
                f"main_color={self.main_color!r}, dop_color={self.dop_color!r}, "
                f"turret={self.turret}, gun={self.gun})")

    def draw_transport(self, surface: DrawingSurface) -> None:
        if self.position_x is None:
            return

        super().draw_transport(surface)
        x, y = self.position_x, self.position_y

        if self.turret:
            surface.draw_rectangle(x + 60, y + 5, 60, 20, color=self.dop_color)
        if self.gun:
            surface.draw_line(x + 120, y + 12, x + 190, y + 12, color=GUN_COLOR, width=3)


def _rank(transport) -> int:
    return 1 if isinstance(transport, ArmoredCar) else 0


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_transports(a: ArmoredVehicle, b: ArmoredVehicle) -> int:
    """
    Default hangar ordering

    Plain vehicles come before cars; then speed, weight and hull color decide,
    and for two cars the extra color, turret and gun.

    Only ``ArmoredVehicle`` instances (and subclasses) can be ordered this
    way; pass an explicit comparator to ``Hangar.sort`` for other transports.

    Returns:
        Negative, zero or positive like a classic ``cmp``

    Raises:
        TypeError: Either argument is not an ``ArmoredVehicle``
    """
    for transport in (a, b):
        if not isinstance(transport, ArmoredVehicle):
            raise TypeError(
                f"compare_transports orders ArmoredVehicle instances only (got {type(transport).__name__}); "
                f"pass a comparator to Hangar.sort"
            )

    result = _cmp(_rank(a), _rank(b))
    if result:
        return result

    for left, right in zip(a._key(), b._key()):
        result = _cmp(left, right)
        if result:
            return result
    return 0
