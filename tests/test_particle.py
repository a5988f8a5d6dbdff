import io
import math
import random

import pygame
import pytest

from particlefx.particle import (
    G,
    TTL,
    CartesianPlane,
    Particle,
    ParticleType,
    almost_equal,
)

SIZE = (800, 600)
MIDDLE = (400, 300)


def _vertices(p):
    return [(p.points[0, j], p.points[1, j]) for j in range(p.points.cols)]


def _distances(p):
    cx, cy = p.center
    return [math.hypot(x - cx, y - cy) for x, y in _vertices(p)]


def test_almost_equal():
    assert almost_equal(1.0, 1.00005)
    assert not almost_equal(1.0, 1.001)
    assert almost_equal(1.0, 1.05, eps=0.1)


def test_plane_corner():
    plane = CartesianPlane(*SIZE)
    assert plane.pixel_to_coords((0, 0)) == (-400.0, 300.0)


def test_plane_center_is_origin():
    plane = CartesianPlane(*SIZE)
    assert plane.pixel_to_coords(MIDDLE) == (0.0, 0.0)


@pytest.mark.parametrize("pixel", [(0, 0), (123, 456), (799, 599), (400, 300)])
def test_plane_round_trip(pixel):
    plane = CartesianPlane(*SIZE)
    assert plane.coords_to_pixel(plane.pixel_to_coords(pixel)) == pixel


def test_plane_y_axis_points_up():
    plane = CartesianPlane(*SIZE)
    _, upper = plane.pixel_to_coords((0, 10))
    _, lower = plane.pixel_to_coords((0, 500))
    assert upper > lower


def test_default_mode_is_normal():
    p = Particle(SIZE, 10, MIDDLE, random.Random(0))
    assert Particle.mode is ParticleType.NORMAL
    assert 100 <= abs(p.vx) < 500
    assert 100 <= abs(p.vy) < 500
    vy = p.vy
    p.update(0.1)
    assert p.vy == pytest.approx(vy - G * 0.1)


def test_particle_starts_at_click():
    p = Particle(SIZE, 30, (100, 200), random.Random(1))
    assert p.center == CartesianPlane(*SIZE).pixel_to_coords((100, 200))
    assert p.ttl == TTL
    assert p.points.cols == 30


@pytest.mark.parametrize("seed", range(5))
def test_vertex_radii_in_range(seed):
    p = Particle(SIZE, 40, MIDDLE, random.Random(seed))
    assert all(20 - 1e-9 <= d <= 120 + 1e-9 for d in _distances(p))


@pytest.mark.parametrize("seed", range(10))
def test_normal_velocity_range(seed):
    assert Particle.mode is ParticleType.NORMAL
    p = Particle(SIZE, 10, MIDDLE, random.Random(seed))
    assert 100 <= abs(p.vx) < 500
    assert 100 <= abs(p.vy) < 500
    assert p.color1 == (255, 255, 255)
    assert all(0 <= c < 256 for c in p.color2)


def test_same_seed_same_particle():
    a = Particle(SIZE, 25, MIDDLE, random.Random(42))
    b = Particle(SIZE, 25, MIDDLE, random.Random(42))
    assert a.points == b.points
    assert (a.vx, a.vy, a.color2) == (b.vx, b.vy, b.color2)


def test_unit_tests_score_full_at_origin():
    p = Particle(SIZE, 4, MIDDLE, random.Random(3))
    out = io.StringIO()
    assert p.unit_tests(out) == 7
    assert "Score: 7 / 7" in out.getvalue()


def test_unit_tests_report_off_origin():
    p = Particle(SIZE, 4, (10, 10), random.Random(3))
    out = io.StringIO()
    score = p.unit_tests(out)
    assert score < 7
    assert "Failed. Expected (0,0)" in out.getvalue()


def test_translate_moves_points_and_center():
    p = Particle(SIZE, 6, MIDDLE, random.Random(7))
    before = _vertices(p)
    cx, cy = p.center
    p.translate(10, 5)
    assert p.center == pytest.approx((cx + 10, cy + 5))
    for (x0, y0), (x1, y1) in zip(before, _vertices(p)):
        assert (x1, y1) == pytest.approx((x0 + 10, y0 + 5))


def test_rotate_preserves_center_and_distances():
    p = Particle(SIZE, 12, (250, 150), random.Random(5))
    center = p.center
    distances = _distances(p)
    p.rotate(1.1)
    assert p.center == pytest.approx(center)
    assert _distances(p) == pytest.approx(distances)


def test_scale_halves_distances():
    p = Particle(SIZE, 12, (250, 150), random.Random(5))
    distances = _distances(p)
    p.scale(0.5)
    assert _distances(p) == pytest.approx([d * 0.5 for d in distances])


def test_normal_update_moves_and_falls():
    assert Particle.mode is ParticleType.NORMAL
    p = Particle(SIZE, 10, MIDDLE, random.Random(9))
    cx, cy = p.center
    vx, vy = p.vx, p.vy
    dt = 0.1
    p.update(dt)
    assert p.ttl == pytest.approx(TTL - dt)
    assert p.vy == pytest.approx(vy - G * dt)
    assert p.center == pytest.approx((cx + vx * dt, cy + vy * dt))


def test_update_shrinks_shape():
    p = Particle(SIZE, 10, MIDDLE, random.Random(9))
    before = sum(_distances(p))
    p.update(0.01)
    assert sum(_distances(p)) < before


def test_polygon_starts_at_center_pixel():
    p = Particle(SIZE, 8, (320, 240), random.Random(4))
    poly = p.polygon()
    assert len(poly) == 9
    assert poly[0] == (320, 240)


def test_draw_paints_the_center():
    p = Particle(SIZE, 20, MIDDLE, random.Random(8))
    surface = pygame.Surface(SIZE)
    surface.fill((0, 0, 0))
    p.draw(surface)
    color = surface.get_at(MIDDLE)
    assert color.r + color.g + color.b > 0
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)