"""
Errors raised by the hangar collection

All of them are raised synchronously by the mutating operations; lookups
(``Hangar.get_at``) return ``None`` instead of raising.
"""


class HangarError(Exception):
    """Base class for hangar errors"""


class CapacityExceededError(HangarError):
    """Raised by ``Hangar.add`` when every place is taken"""

    def __init__(self, max_count: int):
        self.max_count = max_count
        super().__init__(f"Hangar is full ({max_count} places)")


class DuplicateElementError(HangarError):
    """Raised by ``Hangar.add`` when an equal vehicle is already parked"""

    def __init__(self, element):
        self.element = element
        super().__init__(f"Hangar already holds {element!r}")


class IndexNotFoundError(HangarError, IndexError):
    """Raised by ``Hangar.remove_at`` for an index outside the stored range"""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"No vehicle at place {index}")
