import logging

import networkx as nx

from toolz.itertoolz import concat
from typing import Iterable, TypeVar

from .unionfind import DisjointSetForest


logger = logging.getLogger(__name__)

N = TypeVar('N')


def forest_from_edges(edges: Iterable[tuple[N, N]]) -> DisjointSetForest[N]:
    forest = DisjointSetForest()
    for a, b in edges:
        forest.union(a, b)
    return forest


def forest_from_graph(g: nx.Graph) -> DisjointSetForest:
    """Forest whose components are the (weakly) connected components of g."""
    forest = forest_from_edges(g.edges)
    for n in nx.isolates(g):
        forest.union(n, n)
    logger.debug('built forest of %d elements in %d components', len(forest), forest.count())
    return forest


def quotient_graph(g: nx.Graph, forest: DisjointSetForest) -> nx.Graph:
    blocks = [frozenset(n for n in comp if n in g) for comp in forest.components()]
    blocks = [b for b in blocks if b]
    covered = set(concat(blocks))
    blocks.extend(frozenset([n]) for n in g.nodes if n not in covered)
    logger.debug('collapsing %d nodes into %d blocks', g.number_of_nodes(), len(blocks))
    return nx.quotient_graph(g, blocks)
