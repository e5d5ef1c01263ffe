import logging
import os
from typing import List, Optional, Tuple

import numpy as np
from plyfile import PlyData

from func import distance, time_it
from graph import Graph

logger = logging.getLogger(__name__)


class Vertex:
    def __init__(self, pos: np.ndarray, normal: Optional[np.ndarray] = None):
        self.pos = pos
        self.normal = normal

    def __str__(self):
        return f"Vertex pos: {self.pos}, normal: {self.normal}"

    def __repr__(self):
        return self.__str__()


class Mesh:
    def __init__(self, indexes: np.ndarray):
        self.indexes = indexes

    def __str__(self):
        return f"Mesh indexes: {self.indexes}"

    def __repr__(self):
        return self.__str__()

    def __getitem__(self, item):
        return self.indexes[item]

    def __len__(self):
        return len(self.indexes)


class Geometry:
    def __init__(self, vertices: List[Vertex], meshes: List[Mesh]):
        self.v = vertices
        self.f = meshes
        self.edge: List[Tuple[int, int]] = []
        self.edge_w: List[float] = []
        self._graph: Optional[Graph] = None

    @classmethod
    @time_it
    def from_ply(cls, ply_path: str) -> 'Geometry':
        if not str(ply_path).endswith('.ply'):
            raise ValueError(f'File must be a .ply file: {ply_path}')
        if not os.path.exists(ply_path):
            raise FileNotFoundError(ply_path)
        scene = PlyData.read(ply_path)
        logger.info(f'Loaded mesh from file: {ply_path}')
        logger.debug(scene)
        element_names = [element.name for element in scene.elements]
        for name in ('vertex', 'face'):
            if name not in element_names:
                raise ValueError(f'{ply_path} has no {name} element')

        has_normal = 'nx' in scene['vertex'].data.dtype.names
        vertices = []
        meshes = []
        for v in scene['vertex']:
            pos = np.array([v['x'], v['y'], v['z']], dtype=np.float64)
            normal = np.array([v['nx'], v['ny'], v['nz']], dtype=np.float64) if has_normal else None
            vertices.append(Vertex(pos, normal))
        for f in scene['face']:
            meshes.append(Mesh(np.asarray(f['vertex_indices'], dtype=np.int64)))

        logger.info(f'len(v) = {len(vertices)}, len(f) = {len(meshes)}')

        return cls(vertices, meshes)

    def __str__(self):
        return f"Geometry vertices: {len(self.v)}, meshes: {len(self.f)}, edge: {len(self.edge)}"

    def __repr__(self):
        return self.__str__()

    @time_it
    def build_graph(self) -> Graph:
        """
        One graph vertex per mesh vertex, one bidirectional edge per distinct polygon side,
        weighted by its euclidean length.
        """
        edge_set = set()
        self.edge.clear()
        self.edge_w.clear()

        for mesh in self.f:
            k = len(mesh)
            for j in range(k):
                edge_temp = (int(mesh[j]), int(mesh[(j + 1) % k]))
                if edge_temp[0] < edge_temp[1]:
                    edge_temp = (edge_temp[1], edge_temp[0])
                if edge_temp[0] == edge_temp[1] or edge_temp in edge_set:
                    continue
                edge_set.add(edge_temp)
                self.edge.append(edge_temp)
                self.edge_w.append(distance(self.v[edge_temp[0]].pos, self.v[edge_temp[1]].pos))

        graph = Graph(len(self.v), len(self.edge) * 2)
        for (u, v), w in zip(self.edge, self.edge_w):
            graph.add_edge(u=u, v=v, weight=w)
        logger.info(f'n_node = {graph.n}, m_edge = {graph.edge_count()}')

        self._graph = graph
        return graph

    def geodesic_path(self, src: int, dst: int) -> Tuple[float, List[int]]:
        """Approximate geodesic between two vertices, walking along mesh edges."""
        if self._graph is None:
            self.build_graph()
        return self._graph.shortest_path(src, dst)
