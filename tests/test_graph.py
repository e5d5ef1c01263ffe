import unittest

import numpy as np

from graph import DijkstraLabel, Graph


def sample_graph() -> Graph:
    #   0 --4-- 1 --1-- 3 --3-- 4
    #    \     /       /
    #     1   2       5
    #      \ /       /
    #       2 -------
    graph = Graph(6, 12)
    graph.add_edge(0, 1, 4.)
    graph.add_edge(0, 2, 1.)
    graph.add_edge(2, 1, 2.)
    graph.add_edge(1, 3, 1.)
    graph.add_edge(2, 3, 5.)
    graph.add_edge(3, 4, 3.)
    return graph


class TestGraph(unittest.TestCase):

    def test_add_edge_bidirectional(self):
        graph = Graph(3, 4)
        graph.add_edge(0, 1, 2.5)
        self.assertEqual(graph.edge_count(), 2)
        self.assertEqual(graph.neighbours(0), [(1, 2.5)])
        self.assertEqual(graph.neighbours(1), [(0, 2.5)])
        self.assertEqual(graph.neighbours(2), [])

    def test_add_edge_rejects_bad_input(self):
        graph = Graph(2, 2)
        with self.assertRaises(ValueError):
            graph.add_edge(0, 5, 1.)
        with self.assertRaises(ValueError):
            graph.add_edge(0, 1, -1.)
        graph.add_edge(0, 1, 1.)
        with self.assertRaises(ValueError):
            graph.add_edge(1, 0, 1.)

    def test_add_edge_full_graph_writes_nothing(self):
        graph = Graph(2, 1)
        with self.assertRaises(ValueError):
            graph.add_edge(0, 1, 1.)
        self.assertEqual(graph.edge_count(), 0)
        self.assertEqual(graph.neighbours(0), [])
        self.assertEqual(graph.neighbours(1), [])
        graph.add_edge(0, 1, 1., bidirectional=False)
        self.assertEqual(graph.neighbours(0), [(1, 1.)])

    def test_clear(self):
        graph = sample_graph()
        graph.clear()
        self.assertEqual(graph.edge_count(), 0)
        self.assertEqual(graph.neighbours(0), [])

    def test_calculate_distance(self):
        graph = sample_graph()
        d = np.empty(graph.n)
        pred = graph.calculate_distance(0, d)
        np.testing.assert_allclose(d[:5], [0., 3., 1., 4., 7.])
        self.assertTrue(np.isinf(d[5]))
        self.assertEqual(list(pred), [-1, 2, 0, 1, 3, -1])

    def test_shortest_path_uses_reprioritized_vertices(self):
        graph = sample_graph()
        cost, path = graph.shortest_path(0, 4)
        self.assertAlmostEqual(cost, 7.)
        self.assertEqual(path, [0, 2, 1, 3, 4])

    def test_shortest_path_to_self(self):
        cost, path = sample_graph().shortest_path(3, 3)
        self.assertEqual(cost, 0.)
        self.assertEqual(path, [3])

    def test_shortest_path_unreachable(self):
        cost, path = sample_graph().shortest_path(0, 5)
        self.assertTrue(np.isinf(cost))
        self.assertEqual(path, [])

    def test_directed_edge(self):
        graph = Graph(2, 1)
        graph.add_edge(0, 1, 1., bidirectional=False)
        self.assertEqual(graph.shortest_path(0, 1), (1., [0, 1]))
        self.assertEqual(graph.shortest_path(1, 0)[1], [])

    def test_shortest_path_checks_vertices(self):
        with self.assertRaises(ValueError):
            sample_graph().shortest_path(0, 6)
        with self.assertRaises(ValueError):
            sample_graph().shortest_path(-1, 0)

    def test_calculate_all_distance(self):
        graph = sample_graph()
        distance = graph.calculate_all_distance()
        self.assertIs(distance, graph.distance)
        self.assertEqual(distance.shape, (6, 6))
        np.testing.assert_allclose(np.diag(distance), np.zeros(6))
        np.testing.assert_allclose(distance[:5, :5], distance[:5, :5].T)
        self.assertAlmostEqual(distance[4][2], 6.)
        self.assertTrue(np.isinf(distance[5][0]))


class TestDijkstraLabel(unittest.TestCase):

    def test_order_by_cost_then_index(self):
        self.assertLess(DijkstraLabel(3, 1.), DijkstraLabel(0, 2.))
        self.assertLess(DijkstraLabel(0, 1.), DijkstraLabel(3, 1.))
        self.assertGreater(DijkstraLabel(0, 2.), DijkstraLabel(3, 1.))

    def test_equality_is_identity(self):
        self.assertNotEqual(DijkstraLabel(1, 1.), DijkstraLabel(1, 1.))


if __name__ == '__main__':
    unittest.main()
