"""
Design (repository.py)
- Purpose: Encapsulate the in-memory boat inventory behind a tiny API, so the shell and the
           operations never touch a bare list directly.
- Inputs: Boat objects and names.
- Outputs: Boats (by reference) and snapshots (copies) of the current order.
- Side effects: Mutates the internal list; keeps it sorted by name after every insert.
- Thread-safety: None needed; the app is single-threaded.
"""

from typing import Iterable, Iterator, List

from .config import MAX_BOATS
from .errors import BoatNotFoundError, CapacityError
from .models import Boat


class BoatRepo:
    """
    Design (BoatRepo)
    - State:
        _boats: [Boat] kept sorted by case-insensitive name (stable, so equal names keep
                insertion order)
        capacity: max number of boats, or None for no bound
    - Duplicate names are allowed; lookups and removals act on the first in sorted order.
    """

    def __init__(self, capacity: int | None = MAX_BOATS) -> None:
        self.capacity = capacity
        self._boats: List[Boat] = []

    # -------- Size / iteration --------

    def __len__(self) -> int:
        return len(self._boats)

    def __iter__(self) -> Iterator[Boat]:
        return iter(list(self._boats))

    @property
    def is_full(self) -> bool:
        return self.capacity is not None and len(self._boats) >= self.capacity

    def boats(self) -> List[Boat]:
        """Return a copy of the current order for safe iteration."""
        return list(self._boats)

    # -------- Mutations --------

    def insert(self, boat: Boat) -> None:
        """
        Purpose: Add one boat and re-sort.
        Raises: CapacityError when the repo is already full.
        """
        if self.is_full:
            raise CapacityError(self.capacity)
        self._boats.append(boat)
        self._sort()

    def extend(self, boats: Iterable[Boat]) -> int:
        """
        Purpose: Bulk insert (used by load); sorts once at the end.
        Outputs: Number of boats added.
        Raises: CapacityError as soon as the bound is hit; boats added before that are kept.
        """
        added = 0
        try:
            for boat in boats:
                if self.is_full:
                    raise CapacityError(self.capacity)
                self._boats.append(boat)
                added += 1
        finally:
            self._sort()
        return added

    def remove_by_name(self, name: str) -> Boat:
        """
        Purpose: Remove the first boat whose name matches, case-insensitively.
        Outputs: The removed Boat.
        Raises: BoatNotFoundError when nothing matches (repo unchanged).
        """
        key = name.strip().lower()
        for i, boat in enumerate(self._boats):
            if boat.key == key:
                return self._boats.pop(i)
        raise BoatNotFoundError(name)

    def clear(self) -> None:
        self._boats.clear()

    # -------- Lookups --------

    def find_by_name(self, name: str) -> Boat | None:
        """First case-insensitive match in sorted order, or None."""
        key = name.strip().lower()
        for boat in self._boats:
            if boat.key == key:
                return boat
        return None

    def _sort(self) -> None:
        # list.sort is stable: equal names keep insertion order
        self._boats.sort(key=lambda b: b.key)
