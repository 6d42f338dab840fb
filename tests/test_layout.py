from __future__ import annotations

import numpy as np
import pytest

from forcelayout.config import LayoutConfig
from forcelayout.model.graph import Graph


def two_vertices(graph: Graph):
    a = graph.add_vertex(position=(0.0, 0.0, 0.0))
    b = graph.add_vertex(position=(10.0, 0.0, 0.0))
    return a, b


def displacement_after_one_step(with_edge: bool):
    graph = Graph()
    a, b = two_vertices(graph)
    if with_edge:
        graph.add_edge(a, b, strength=1.0)
    start_a, start_b = a.position.copy(), b.position.copy()
    graph.layout()
    return a.position - start_a, b.position - start_b


def test_empty_graph_step_is_harmless():
    graph = Graph()
    graph.layout()
    assert graph.center is None


@pytest.mark.parametrize(
    "config",
    [LayoutConfig(repulsion=0.0, attraction=0.0, gravity=0.0), LayoutConfig()],
)
def test_lonely_vertex_does_not_move(config):
    graph = Graph(config=config)
    vertex = graph.add_vertex(position=(1.0, 2.0, 3.0))
    graph.layout()
    np.testing.assert_array_equal(vertex.position, [1.0, 2.0, 3.0])
    np.testing.assert_array_equal(vertex.velocity, np.zeros(3))


def test_two_vertices_repel_symmetrically():
    moved_a, moved_b = displacement_after_one_step(with_edge=False)

    np.testing.assert_allclose(moved_a, -moved_b)
    assert moved_a[0] < 0.0 < moved_b[0]
    np.testing.assert_array_equal(moved_a[1:], [0.0, 0.0])
    np.testing.assert_allclose(moved_a[0], -100.0 / 10.1 ** 2)


def test_edge_attraction_reduces_the_separation_step():
    free_a, free_b = displacement_after_one_step(with_edge=False)
    tied_a, tied_b = displacement_after_one_step(with_edge=True)

    assert abs(tied_a[0]) < abs(free_a[0])
    assert abs(tied_b[0]) < abs(free_b[0])
    # Spring term: attraction constant * separation
    np.testing.assert_allclose(tied_a[0] - free_a[0], 0.0025 * 10.0)
    np.testing.assert_allclose(tied_b[0] - free_b[0], -0.0025 * 10.0)


def test_gravity_edge_pulls_target_down():
    graph = Graph(config=LayoutConfig(repulsion=0.0, attraction=0.0))
    a, b = two_vertices(graph)
    graph.add_edge(a, b, gravity=True)
    graph.layout()
    np.testing.assert_allclose(b.position, [10.0, -0.07, 0.0])
    np.testing.assert_allclose(a.position, [0.0, 0.0, 0.0])


def test_acceleration_is_reset_every_step():
    graph = Graph(config=LayoutConfig(repulsion=0.0, attraction=0.0, friction=1.0))
    a, b = two_vertices(graph)
    graph.add_edge(a, b, gravity=True)
    graph.layout()
    graph.layout()
    # Full friction cancels the previous velocity, so each step moves the
    # target by exactly one gravity increment
    np.testing.assert_allclose(b.velocity, [0.0, -0.07, 0.0])
    np.testing.assert_allclose(b.position, [10.0, -0.14, 0.0])


def test_center_is_the_root_centroid_before_the_move(hook):
    graph = Graph(hook=hook)
    two_vertices(graph)
    graph.layout()
    np.testing.assert_array_equal(graph.center, [0.0, 0.0, 0.0])
    assert hook.layouts == 1


def test_runtime_override_applies_to_next_step():
    graph = Graph()
    a, b = two_vertices(graph)
    graph.configure(repulsion=0.0)
    graph.layout()
    np.testing.assert_array_equal(a.position, [0.0, 0.0, 0.0])
    np.testing.assert_array_equal(b.position, [10.0, 0.0, 0.0])


def test_connected_pair_relaxes_to_force_balance():
    graph = Graph()
    a, b = two_vertices(graph)
    graph.add_edge(a, b)

    speeds = []
    result = graph.relax(max_steps=5000, tolerance=1e-3, callback=lambda step, speed: speeds.append(speed))

    assert result.converged
    assert result.steps == len(speeds)
    assert speeds[-1] < 1e-3

    distance = float(np.linalg.norm(a.position - b.position))
    spring = 0.0025 * distance
    repulsion = 100.0 / (0.1 + distance) ** 2
    assert spring == pytest.approx(repulsion, abs=2e-3)


def test_relax_stops_at_max_steps():
    graph = Graph(seed=2)
    for _ in range(5):
        graph.add_vertex()
    result = graph.relax(max_steps=3, tolerance=0.0)
    assert result.steps == 3
    assert not result.converged


def test_relax_rejects_negative_step_budget():
    with pytest.raises(ValueError):
        Graph().relax(max_steps=-1)


def test_many_vertices_stay_finite():
    graph = Graph(seed=11)
    vertices = [graph.add_vertex() for _ in range(40)]
    rng = np.random.default_rng(5)
    for _ in range(60):
        i, j = rng.choice(len(vertices), size=2, replace=False)
        graph.add_edge(vertices[i], vertices[j])
    for _ in range(50):
        graph.layout()
    positions = np.array([vertex.position for vertex in vertices])
    assert np.all(np.isfinite(positions))
