from __future__ import annotations

import numpy as np

from forcelayout.config import LayoutConfig
from forcelayout.model.vertex import Vertex
from forcelayout.solvers.integrator import Integrator


def moving_vertex() -> Vertex:
    vertex = Vertex(1, (0.0, 0.0, 0.0))
    vertex.velocity[:] = (1.0, 0.0, 0.0)
    vertex.repulsion[:] = (0.5, 0.0, 0.0)
    vertex.attraction[:] = (0.1, 0.0, 0.0)
    return vertex


def test_friction_uses_previous_velocity():
    vertex = moving_vertex()
    Integrator(LayoutConfig(friction=0.6)).advance(vertex)

    # acceleration = 0.5 - 0.1 - 0.6 * 1.0
    np.testing.assert_allclose(vertex.acceleration, [-0.2, 0.0, 0.0])
    np.testing.assert_allclose(vertex.velocity, [0.8, 0.0, 0.0])
    np.testing.assert_allclose(vertex.position, [0.8, 0.0, 0.0])


def test_minimum_velocity_snaps_to_rest():
    vertex = moving_vertex()
    Integrator(LayoutConfig(minimum_velocity=1.0)).advance(vertex)
    np.testing.assert_array_equal(vertex.velocity, np.zeros(3))
    np.testing.assert_array_equal(vertex.position, np.zeros(3))


def test_advance_all_reports_max_speed():
    slow = Vertex(1, (0.0, 0.0, 0.0))
    fast = moving_vertex()
    speed = Integrator(LayoutConfig(friction=0.6)).advance_all([slow, fast])
    assert speed == fast.speed
