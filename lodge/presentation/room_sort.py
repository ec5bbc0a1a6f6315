"""
Display ordering for rooms.

Room labels start with a floor marker ("G" ground, "F" first, "S" second)
followed by a number. Rooms are shown ground floor first, then first floor,
then second floor, and by number within a floor: F2 before F10.
"""

from typing import Callable, Iterable, TypeVar

from lodge.core.validation import digits_only

T = TypeVar("T")

FLOOR_ORDER = ("G", "F", "S")


def floor_rank(name: str) -> int:
    """Position of the room's floor; labels without a known marker go last"""
    for rank, prefix in enumerate(FLOOR_ORDER):
        if name.startswith(prefix):
            return rank
    return len(FLOOR_ORDER)


def room_number(name: str) -> int:
    """Digits of the label read as one integer; 0 when there are none"""
    digits = digits_only(name)
    return int(digits) if digits else 0


def room_sort_key(name: str) -> tuple[int, int]:
    return floor_rank(name), room_number(name)


def _room_name(item) -> str:
    return item if isinstance(item, str) else item.name


def sort_rooms(rooms: Iterable[T], name: Callable[[T], str] = _room_name) -> list[T]:
    """
    Sort room labels or room objects for display.

    >>> sort_rooms(["F2", "G1", "S1", "F10", "F1"])
    ['G1', 'F1', 'F2', 'F10', 'S1']
    """
    return sorted(rooms, key=lambda room: room_sort_key(name(room)))
