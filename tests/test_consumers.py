"""Path-finding code written against the public Graph API."""

import enum
import math

import pytest

from adjgraph import Graph, GraphType, PathNotExists


def _dijkstra(graph, source):
    distance = {node: math.inf for node in graph.nodes()}
    previous = {node: None for node in graph.nodes()}
    distance[source] = 0.0
    unvisited = set(graph.nodes())
    while unvisited:
        current = min(unvisited, key=lambda node: distance[node])
        if distance[current] == math.inf:
            break
        unvisited.remove(current)
        for neighbor in graph.neighbors(current):
            if neighbor not in unvisited:
                continue
            alt = distance[current] + graph.weight(current, neighbor)
            if alt < distance[neighbor]:
                distance[neighbor] = alt
                previous[neighbor] = current
    return distance, previous


def _bellman_ford(graph, source):
    distance = {node: math.inf for node in graph.nodes()}
    distance[source] = 0.0
    edges = graph.edges()
    for _ in range(graph.number_of_nodes() - 1):
        for edge in edges:
            if distance[edge.node_a] + edge.weight < distance[edge.node_b]:
                distance[edge.node_b] = distance[edge.node_a] + edge.weight
    return distance


def _path(previous, source, target):
    path = [target]
    while path[-1] != source:
        step = previous[path[-1]]
        if step is None:
            raise PathNotExists(source, target)
        path.append(step)
    return list(reversed(path))


def _make_dijkstra_graph():
    g = Graph(GraphType.UNDIRECTED)
    g.add_weighted_edge(1, 2, 7.0)
    g.add_weighted_edge(1, 3, 9.0)
    g.add_weighted_edge(1, 6, 14.0)
    g.add_weighted_edge(2, 3, 10.0)
    g.add_weighted_edge(2, 4, 15.0)
    g.add_weighted_edge(3, 4, 11.0)
    g.add_weighted_edge(3, 6, 2.0)
    g.add_weighted_edge(4, 5, 6.0)
    g.add_weighted_edge(5, 6, 9.0)
    return g


class TestDijkstra:
    def test_distances(self):
        distance, _ = _dijkstra(_make_dijkstra_graph(), 1)
        assert distance == {1: 0.0, 2: 7.0, 3: 9.0, 4: 20.0, 5: 20.0, 6: 11.0}

    def test_path(self):
        _, previous = _dijkstra(_make_dijkstra_graph(), 1)
        assert _path(previous, 1, 5) == [1, 3, 6, 5]

    def test_unreachable_node(self):
        g = _make_dijkstra_graph()
        g.add_node(7)
        distance, previous = _dijkstra(g, 1)
        assert distance[7] == math.inf
        with pytest.raises(PathNotExists):
            _path(previous, 1, 7)


class TestBellmanFord:
    def test_negative_weights(self):
        g = Graph(GraphType.DIRECTED)
        results = g.add_edges(
            [
                ("A", "B", 5.0),
                ("B", "C", 1.0),
                ("B", "D", 2.0),
                ("C", "E", 1.0),
                ("D", "E", -1.0),
                ("D", "F", 2.0),
                ("E", "F", -3.0),
            ]
        )
        assert results == [None] * 7
        distance = _bellman_ford(g, "A")
        assert distance == {"A": 0.0, "B": 5.0, "C": 6.0, "D": 7.0, "E": 6.0, "F": 3.0}


class City(enum.Enum):
    NEW_YORK = enum.auto()
    LOS_ANGELES = enum.auto()
    CHICAGO = enum.auto()
    HOUSTON = enum.auto()


class TestEnumLabels:
    def test_city_distances(self):
        g = Graph(GraphType.UNDIRECTED)
        g.add_weighted_edge(City.NEW_YORK, City.LOS_ANGELES, 2448.15)
        g.add_weighted_edge(City.NEW_YORK, City.CHICAGO, 714.82)
        g.add_weighted_edge(City.LOS_ANGELES, City.HOUSTON, 1370.93)
        edges = g.edges()
        assert len(edges) == 6
        for edge in edges:
            assert g.weight(edge.node_a, edge.node_b) == edge.weight
        assert g.neighbors(City.NEW_YORK) == [City.LOS_ANGELES, City.CHICAGO]
        assert g.degree(City.HOUSTON) == 1
