from typing import Iterator, List


class Marks:
    """
    Fixed-size container for a student's three marks.

    Storage is owned by the container: ``copy()`` returns independent
    storage while ``assign_from`` overwrites this container's slots in
    place. Values are not validated.
    """

    SIZE = 3

    def __init__(self, m1: int = 0, m2: int = 0, m3: int = 0):
        self._values: List[int] = [m1, m2, m3]

    def __len__(self) -> int:
        return self.SIZE

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def __setitem__(self, index: int, value: int):
        self._values[index] = value

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Marks):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Marks({', '.join(str(v) for v in self._values)})"

    def __copy__(self) -> "Marks":
        return self.copy()

    def __deepcopy__(self, memo) -> "Marks":
        return self.copy()

    def copy(self) -> "Marks":
        return Marks(*self._values)

    def assign_from(self, other: "Marks"):
        """Copies the other container's values into this one's slots"""
        for i in range(self.SIZE):
            self._values[i] = other[i]
