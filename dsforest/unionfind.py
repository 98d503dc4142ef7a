import logging

from toolz.dicttoolz import valmap
from toolz.itertoolz import groupby
from typing import Collection, Generic, Hashable, TypeVar

from . import InvalidElementError, fail_if


logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Hashable)


class DisjointSetForest(Generic[T]):
    """
    Union-find forest with union by rank and path compression by halving.

    Nodes live in an arena and are addressed by index. Besides its parent, each
    node keeps the set of its children, so a whole component can be enumerated
    starting from its root.
    """

    def __init__(self):
        self._index: dict[T, int] = {}
        self._elements: list[T] = []
        self._parent: list[int | None] = []
        self._children: list[set[int]] = []
        self._rank: list[int] = []
        self._roots: set[int] = set()

    def __contains__(self, t) -> bool:
        return t is not None and t in self._index

    def __len__(self) -> int:
        return len(self._elements)

    @staticmethod
    def _check_element(t):
        fail_if(t is None, 'Element must not be null', InvalidElementError)

    def _insert(self, t: T) -> int:
        node = self._index.get(t)
        if node is None:
            node = len(self._elements)
            self._index[t] = node
            self._elements.append(t)
            self._parent.append(None)
            self._children.append(set())
            self._rank.append(0)
            self._roots.add(node)
            logger.debug('inserted %r as node %d', t, node)
        return node

    def _set_parent(self, node: int, parent: int):
        old_parent = self._parent[node]
        if old_parent is not None:
            self._children[old_parent].remove(node)
        else:
            self._roots.remove(node)
        self._parent[node] = parent
        self._children[parent].add(node)

    def _find(self, t: T) -> int | None:
        self._check_element(t)
        node = self._index.get(t)
        if node is None:
            return None
        while self._parent[node] is not None:
            grandparent = self._parent[self._parent[node]]
            if grandparent is not None:
                # halving: skip over the parent
                self._set_parent(node, grandparent)
            node = self._parent[node]
        return node

    def union(self, t: T, u: T):
        """Merge the component containing t with the component containing u."""
        self._check_element(t)
        self._check_element(u)
        self._insert(t)
        self._insert(u)
        root_t = self._find(t)
        root_u = self._find(u)
        if root_t == root_u:
            return
        rank_t, rank_u = self._rank[root_t], self._rank[root_u]
        if rank_t < rank_u:
            self._set_parent(root_t, root_u)
        elif rank_t > rank_u:
            self._set_parent(root_u, root_t)
        else:
            self._set_parent(root_u, root_t)
            self._rank[root_t] += 1
        logger.debug('merged components of %r and %r, %d left', t, u, len(self._roots))

    def connected(self, t: T, u: T) -> bool:
        root_t = self._find(t)
        root_u = self._find(u)
        return root_t is not None and root_u is not None and root_t == root_u

    def count(self) -> int:
        return len(self._roots)

    def get_component(self, t: T) -> set[T]:
        """
        Elements in the same component as t, excluding t itself.

        Empty if t was never passed to union.
        """
        component = set()
        root = self._find(t)
        if root is None:
            return component
        todo = [root]
        while todo:
            node = todo.pop()
            component.add(self._elements[node])
            todo.extend(self._children[node])
        component.remove(t)
        return component

    def get_roots(self) -> set[T]:
        return {self._elements[node] for node in self._roots}

    def components(self) -> Collection[frozenset[T]]:
        by_root = groupby(self._find, self._elements)
        return valmap(frozenset, by_root).values()
