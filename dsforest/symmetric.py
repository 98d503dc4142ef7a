from typing import Generic, Hashable, TypeVar


K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


class SymmetricTable(Generic[K, V]):
    """
    Two-key value store. Values are stored under an ordered pair of keys but
    can be retrieved with the keys in either order.
    """

    def __init__(self):
        self._table: dict[tuple[K, K], V] = {}

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, keys: tuple[K, K]) -> bool:
        return self.contains(*keys)

    def contains(self, key1: K, key2: K) -> bool:
        return (key1, key2) in self._table or (key2, key1) in self._table

    def get(self, key1: K, key2: K, default: V | None = None) -> V | None:
        if (key1, key2) in self._table:
            return self._table[(key1, key2)]
        return self._table.get((key2, key1), default)

    def put(self, key1: K, key2: K, value: V):
        # a pair keeps the orientation it was first stored with
        if (key1, key2) in self._table:
            self._table[(key1, key2)] = value
        else:
            self._table[(key2, key1)] = value

    def cells(self) -> list[tuple[K, K, V]]:
        return [(key1, key2, value) for (key1, key2), value in self._table.items()]
