import logging
from typing import List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from binary_heap import BinaryHeap
from func import time_it

logger = logging.getLogger(__name__)

EPSILON = 1e-8


class DijkstraLabel(object):
    """Frontier entry: a vertex and its tentative cost. Equality is identity."""

    def __init__(self, index: int, cost: float):
        self.index = index
        self.cost = cost

    def __lt__(self, other):
        return (self.cost, self.index) < (other.cost, other.index)

    def __gt__(self, other):
        return (self.cost, self.index) > (other.cost, other.index)

    def __repr__(self):
        return f"DijkstraLabel index: {self.index}, cost: {self.cost}"


class Graph:
    def __init__(self, n: int, m: int):
        self.n = n  # vertexes number
        self.m = m  # edges number

        # edge, slots 0 and 1 are never used
        self._count = 1  # count of edge
        self._h = np.full(n, -1, dtype=np.int32)  # index of list header of edges
        self._next = np.zeros(m + 2, dtype=np.int32)  # next edge
        self._to = np.zeros(m + 2, dtype=np.int32)  # index of edge to
        self._w = np.zeros(m + 2, dtype=np.float64)  # weight of edge

        # distance
        self.distance: Optional[np.ndarray] = None  # all-pairs matrix, filled on demand

    def clear(self):
        self._count = 1
        self._h[:] = -1

    def edge_count(self) -> int:
        return self._count - 1

    def add_edge(self, u: int, v: int, weight: float, bidirectional: bool = True):
        # point A, B, C, D, ...
        # edge AB, AC, AD,...
        # before:
        # B -> C -> D
        # after:
        # E -> B -> C -> D
        self._check_vertex(u)
        self._check_vertex(v)
        if weight < 0:
            raise ValueError(f'Negative edge weight {weight} on ({u}, {v})')
        # both directions must fit before anything is written
        needed = 2 if bidirectional else 1
        if self._count + needed >= len(self._to):
            raise ValueError(f'Graph is full: capacity of {self.m} edges reached')
        self._push_edge(u, v, weight)
        if bidirectional:
            self._push_edge(v, u, weight)

    def _push_edge(self, u: int, v: int, weight: float):
        self._count += 1
        self._next[self._count] = self._h[u]
        self._to[self._count] = v
        self._w[self._count] = weight
        self._h[u] = self._count

    def neighbours(self, u: int) -> List[Tuple[int, float]]:
        self._check_vertex(u)
        result = []
        i = self._h[u]
        while i != -1:
            result.append((int(self._to[i]), float(self._w[i])))
            i = self._next[i]
        return result

    def _check_vertex(self, u: int):
        if not 0 <= u < self.n:
            raise ValueError(f'Vertex {u} out of range [0, {self.n})')

    def _dijkstra(self, src: int, d: np.ndarray, dst: int = -1) -> np.ndarray:
        self._check_vertex(src)
        pred = np.full(self.n, -1, dtype=np.int32)
        labels: List[Optional[DijkstraLabel]] = [None] * self.n
        settled = np.zeros(self.n, dtype=bool)
        d[:] = np.inf

        Q: BinaryHeap[DijkstraLabel] = BinaryHeap()
        d[src] = 0.
        labels[src] = DijkstraLabel(src, 0.)
        Q.insert(labels[src])
        while not Q.is_empty():
            u = Q.delete_min().index
            settled[u] = True
            if u == dst:
                break
            i = self._h[u]
            while i != -1:
                v = self._to[i]
                if not settled[v] and d[u] + self._w[i] < d[v] - EPSILON:
                    d[v] = d[u] + self._w[i]
                    pred[v] = u
                    label = labels[v]
                    if label is None:
                        label = labels[v] = DijkstraLabel(int(v), d[v])
                    else:
                        # reprioritize: take it out, update, push back
                        Q.remove(label)
                        label.cost = d[v]
                    Q.insert(label)
                    logger.debug(f'relax {u} -> {v}: {d[v]}')
                i = self._next[i]
        return pred

    def calculate_distance(self, src: int, d: np.ndarray) -> np.ndarray:
        """
        Calculate the distance from src to all other points (dijkstra)
        :param src: start point
        :param d: distances from point src to all other points, inf when unreachable
        :return: predecessor of every point on its shortest path, -1 for none
        """
        return self._dijkstra(src, d)

    def shortest_path(self, src: int, dst: int) -> Tuple[float, List[int]]:
        """
        Shortest path from src to dst, stopping as soon as dst is settled
        :return: (cost, [src, ..., dst]), or (inf, []) when dst is unreachable
        """
        self._check_vertex(dst)
        d = np.empty(self.n, dtype=np.float64)
        pred = self._dijkstra(src, d, dst=dst)
        if np.isinf(d[dst]):
            return float('inf'), []
        path = [dst]
        while path[-1] != src:
            path.append(int(pred[path[-1]]))
        path.reverse()
        return float(d[dst]), path

    def calculate_all_distance(self) -> np.ndarray:
        """
        Calculate the distance from all points to all other points (dijkstra)
        :return: n x n distance matrix, also kept as self.distance
        """

        @time_it
        def calculate_all_distance() -> None:
            for i in tqdm(range(self.n)):
                self.calculate_distance(i, self.distance[i])

        self.distance = np.zeros((self.n, self.n), dtype=np.float64)
        calculate_all_distance()
        return self.distance
