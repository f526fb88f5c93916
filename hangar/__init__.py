"""
Hangar: fixed-capacity parking garage for armored vehicles

Main Classes:
    - Hangar: Bounded, ordered vehicle collection with grid drawing
    - HangarIterator: Independent cursor over a hangar's vehicles
    - ArmoredVehicle / ArmoredCar: Concrete vehicles implementing Transport

Drawing goes through a ``DrawingSurface``; matplotlib and plotly adapters live
in ``hangar.visualization`` and occupancy tables in ``hangar.reporting``.
"""

from .errors import (
    CapacityExceededError,
    DuplicateElementError,
    HangarError,
    IndexNotFoundError,
)
from .hangar import Hangar, HangarIterator
from .transport import (
    ArmoredCar,
    ArmoredVehicle,
    Direction,
    DrawingSurface,
    Transport,
    compare_transports,
)

__all__ = [
    'Hangar',
    'HangarIterator',

    # Errors
    'HangarError',
    'CapacityExceededError',
    'DuplicateElementError',
    'IndexNotFoundError',

    # Vehicles
    'Transport',
    'DrawingSurface',
    'ArmoredVehicle',
    'ArmoredCar',
    'Direction',
    'compare_transports',
]
