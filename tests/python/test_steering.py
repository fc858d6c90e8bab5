from __future__ import annotations

import math

import pytest
from pytest import approx

from shoal.sim.core.boid import Boid
from shoal.sim.core.config import KinematicsConfig
from shoal.sim.core.geometry import Point, Vector
from shoal.sim.systems import steering

EDGES = Point(1000.0, 1000.0)


def _make_boid(
    x: float,
    y: float,
    vx: float = 0.0,
    vy: float = 0.0,
    cohesion: float = 0.0,
    separation: float = 0.0,
    alignment: float = 0.0,
    attraction: float = 0.0,
) -> Boid:
    return Boid(
        coords=Point(x, y),
        velocity=Vector(vx, vy),
        cohesion=cohesion,
        separation=separation,
        alignment=alignment,
        attraction=attraction,
        edges=EDGES,
    )


def test_perception_weight_clamps_to_one_up_close():
    assert steering.perception_weight(1.0) == 1.0
    assert steering.perception_weight(0.5) == 1.0
    assert steering.perception_weight(0.0) == 1.0


def test_perception_weight_falls_off_with_distance():
    assert steering.perception_weight(10.0) == approx(10.0 ** -2.75)
    assert steering.perception_weight(2.0) == approx(1.0 / 2.0 ** 2.75)
    assert steering.perception_weight(20.0) < steering.perception_weight(10.0)


def test_empty_neighbor_set_gives_zero_cohesion_and_alignment():
    boid = _make_boid(5.0, 5.0, 1.0, 2.0)
    assert steering.cohesion(boid, []) == Vector(0.0, 0.0)
    assert steering.alignment(boid, []) == Vector(0.0, 0.0)
    assert steering.separation(boid, []) == Vector(0.0, 0.0)


def test_toward_is_nonzero_without_neighbors():
    boid = _make_boid(0.0, 0.0)
    accel = steering.toward(boid, Point(30.0, 40.0))
    assert accel.length() == approx(1.0 / (1.0 + 0.1 * 50.0))
    assert accel.x == approx(0.6 * accel.length())
    assert accel.y == approx(0.8 * accel.length())


def test_toward_is_zero_at_target():
    boid = _make_boid(12.0, 7.0)
    assert steering.toward(boid, Point(12.0, 7.0)) == Vector(0.0, 0.0)


def test_toward_never_vanishes_for_distant_targets():
    boid = _make_boid(0.0, 0.0)
    assert steering.toward(boid, Point(1.0e6, 0.0)).x > 0.0


def test_separation_magnitude_decays_with_inverse_square():
    boid = _make_boid(0.0, 0.0)
    magnitudes = []
    for distance in (2.0, 5.0, 10.0, 40.0):
        accel = steering.separation(boid, [_make_boid(distance, 0.0)])
        assert accel.length() == approx(100.0 / distance ** 2)
        magnitudes.append(accel.length())
    assert magnitudes == sorted(magnitudes, reverse=True)


@pytest.mark.parametrize("angle", [0.0, 0.7, math.pi / 2, 2.5, math.pi, 4.0])
def test_separation_points_away_independent_of_direction(angle):
    boid = _make_boid(0.0, 0.0)
    other = _make_boid(5.0 * math.cos(angle), 5.0 * math.sin(angle))
    accel = steering.separation(boid, [other])
    assert accel.length() == approx(4.0)
    assert accel.x == approx(-4.0 * math.cos(angle), abs=1e-9)
    assert accel.y == approx(-4.0 * math.sin(angle), abs=1e-9)


def test_separation_ignores_coincident_neighbor():
    boid = _make_boid(3.0, 3.0)
    assert steering.separation(boid, [_make_boid(3.0, 3.0)]) == Vector(0.0, 0.0)


def test_separation_sums_over_all_neighbors_without_falloff():
    boid = _make_boid(0.0, 0.0)
    near = _make_boid(10.0, 0.0)
    far = _make_boid(-100.0, 0.0)
    accel = steering.separation(boid, [near, far])
    assert accel.x == approx(-1.0 + 0.01)
    assert accel.y == approx(0.0)


def test_cohesion_heads_for_weighted_centroid():
    boid = _make_boid(0.0, 0.0)
    near = _make_boid(1.0, 0.0)
    far = _make_boid(0.0, 10.0)
    weight_far = 10.0 ** -2.75
    expected_x = 1.0 / (1.0 + weight_far)
    expected_y = 10.0 * weight_far / (1.0 + weight_far)
    accel = steering.cohesion(boid, [near, far])
    assert accel.x == approx(expected_x)
    assert accel.y == approx(expected_y)


def test_cohesion_magnitude_is_distance_to_centroid():
    boid = _make_boid(0.0, 0.0)
    accel = steering.cohesion(boid, [_make_boid(30.0, 40.0)])
    assert accel.length() == approx(50.0)


def test_alignment_matches_weighted_mean_velocity():
    boid = _make_boid(0.0, 0.0, vx=1.0, vy=0.0)
    near = _make_boid(1.0, 0.0, vx=0.0, vy=2.0)
    far = _make_boid(10.0, 0.0, vx=5.0, vy=0.0)
    weight_far = 10.0 ** -2.75
    total = 1.0 + weight_far
    accel = steering.alignment(boid, [near, far])
    assert accel.x == approx(5.0 * weight_far / total - 1.0)
    assert accel.y == approx(2.0 / total)


def test_alignment_is_zero_when_already_matching():
    boid = _make_boid(0.0, 0.0, vx=2.0, vy=-1.0)
    others = [_make_boid(3.0, 0.0, vx=2.0, vy=-1.0), _make_boid(0.0, 8.0, vx=2.0, vy=-1.0)]
    accel = steering.alignment(boid, others)
    assert accel.x == approx(0.0)
    assert accel.y == approx(0.0)


def test_composite_acceleration_weights_each_term():
    target = Point(100.0, 0.0)
    others = [_make_boid(5.0, 0.0, vx=1.0), _make_boid(0.0, 20.0, vy=-1.0)]
    boid = _make_boid(0.0, 0.0, cohesion=0.1, separation=0.2, alignment=0.3, attraction=0.4)
    accel = steering.composite_acceleration(boid, others, target)
    parts = [
        (0.1, steering.cohesion(boid, others)),
        (0.2, steering.separation(boid, others)),
        (0.3, steering.alignment(boid, others)),
        (0.4, steering.toward(boid, target)),
    ]
    assert accel.x == approx(sum(weight * part.x for weight, part in parts))
    assert accel.y == approx(sum(weight * part.y for weight, part in parts))


def test_composite_acceleration_with_only_attraction_and_no_neighbors():
    boid = _make_boid(0.0, 0.0, cohesion=1.0, separation=1.0, alignment=1.0, attraction=2.0)
    accel = boid.composite_acceleration([], Point(0.0, 10.0))
    assert accel.x == approx(0.0)
    assert accel.y == approx(2.0 / (1.0 + 0.1 * 10.0))


def test_kinematics_constants_are_configurable():
    boid = _make_boid(0.0, 0.0, separation=1.0)
    others = [_make_boid(10.0, 0.0)]
    kinematics = KinematicsConfig(personal_space_sq=400.0)
    accel = steering.composite_acceleration(boid, others, Point(0.0, 0.0), kinematics)
    assert accel.x == approx(-4.0)
