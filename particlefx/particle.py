"""A firework particle: a star-shaped polygon that spins, shrinks and flies."""

from __future__ import annotations

import enum
import math
import random
import sys

import pygame

from particlefx.matrices import Matrix, RotationMatrix, ScalingMatrix, TranslationMatrix

G = 1000.0
TTL = 5.0
SCALE = 0.999
ATTRACTION_STRENGTH = -2.0

_WHITE = (255, 255, 255)
_GRADIENT_BANDS = 8


class ParticleType(enum.Enum):
    """How particles move."""

    NORMAL = "Normal"
    SPIRAL = "Spiral"


def almost_equal(a, b, eps=0.0001):
    """Return True when ``a`` and ``b`` differ by less than ``eps``."""
    return abs(a - b) < eps


class CartesianPlane:
    """Maps between screen pixels and a y-up plane centred on the screen."""

    def __init__(self, width, height):
        self.width = width
        self.height = height

    def pixel_to_coords(self, pixel):
        px, py = pixel
        return (px - self.width / 2, self.height / 2 - py)

    def coords_to_pixel(self, coords):
        x, y = coords
        return (int(x + self.width / 2), int(self.height / 2 - y))


class Particle:
    """A single particle spawned at a mouse click."""

    mode = ParticleType.NORMAL

    def __init__(self, target_size, num_points, mouse_click_position, rng=None):
        rng = rng if rng is not None else random.Random()
        self.ttl = TTL
        self.num_points = num_points
        self.radians_per_sec = rng.random() * math.pi
        self.plane = CartesianPlane(*target_size)
        self.center = self.plane.pixel_to_coords(mouse_click_position)

        if Particle.mode is ParticleType.NORMAL:
            low, spread = 100, 400
        else:
            low, spread = 900, 1000
        self.vx = float(low + rng.randrange(spread))
        if rng.randrange(2):
            self.vx = -self.vx
        self.vy = float(low + rng.randrange(spread))
        if rng.randrange(2):
            self.vy = -self.vy

        self.color1 = _WHITE
        self.color2 = (rng.randrange(256), rng.randrange(256), rng.randrange(256))

        self.points = Matrix(2, num_points)
        theta = rng.random() * (math.pi / 2)
        d_theta = 2 * math.pi / (num_points - 1) if num_points > 1 else math.inf
        cx, cy = self.center
        for j in range(num_points):
            r = 20 + rng.randrange(101)
            self.points[0, j] = cx + r * math.cos(theta)
            self.points[1, j] = cy + r * math.sin(theta)
            theta += d_theta

    def update(self, dt, mouse_position=None):
        """Advance the particle by ``dt`` seconds.

        ``mouse_position`` is the pointer in pixels; it only matters in spiral mode.
        """
        self.ttl -= dt
        self.rotate(self.radians_per_sec * dt)
        self.scale(SCALE)
        if Particle.mode is ParticleType.NORMAL:
            dx = self.vx * dt
            dy = self.vy * dt
            self.vy -= G * dt
            self.translate(dx, dy)
        else:
            self._apply_spiral(dt, mouse_position)

    def _apply_spiral(self, dt, mouse_position):
        if mouse_position is not None:
            mx, my = self.plane.pixel_to_coords(mouse_position)
            cx, cy = self.center
            self.translate(
                (mx - cx) * dt * ATTRACTION_STRENGTH,
                (my - cy) * dt * ATTRACTION_STRENGTH,
            )
        r, g, b = self.color2
        self.color2 = ((r + 1) % 256, (g + 2) % 256, (b + 3) % 256)

    def translate(self, x_shift, y_shift):
        """Shift the shape and its centre."""
        self.points = self.points + TranslationMatrix(x_shift, y_shift, self.points.cols)
        cx, cy = self.center
        self.center = (cx + x_shift, cy + y_shift)

    def _about_center(self, transform):
        cx, cy = self.center
        self.translate(-cx, -cy)
        self.points = transform * self.points
        self.translate(cx, cy)

    def rotate(self, theta):
        """Rotate the shape counter-clockwise about its centre."""
        self._about_center(RotationMatrix(theta))

    def scale(self, c):
        """Scale the shape about its centre."""
        self._about_center(ScalingMatrix(c))

    def _vertices(self):
        return [(self.points[0, j], self.points[1, j]) for j in range(self.points.cols)]

    def polygon(self):
        """Pixel positions of the triangle fan: centre first, then each vertex."""
        return [self.plane.coords_to_pixel(self.center)] + [
            self.plane.coords_to_pixel(v) for v in self._vertices()
        ]

    def draw(self, surface):
        """Draw the particle as a fan shaded from white at the centre to its colour."""
        center, *outer = self.polygon()
        if len(outer) < 2:
            return
        cx, cy = center
        for band in range(_GRADIENT_BANDS):
            t = band / _GRADIENT_BANDS
            color = tuple(
                round(edge + (inner - edge) * t)
                for inner, edge in zip(self.color1, self.color2)
            )
            shrink = 1.0 - t
            ring = [(cx + (x - cx) * shrink, cy + (y - cy) * shrink) for x, y in outer]
            for a, b in zip(ring, ring[1:]):
                pygame.draw.polygon(surface, color, [center, a, b])

    def unit_tests(self, out=None):
        """Run the built-in self checks, report to ``out`` and return the score."""
        out = out if out is not None else sys.stdout
        score = 0

        def report(passed):
            nonlocal score
            if passed:
                out.write("Passed. +1\n")
                score += 1
            else:
                out.write("Failed.\n")

        out.write("Testing RotationMatrix constructor...")
        theta = math.pi / 4.0
        r = RotationMatrix(theta)
        report(
            r.rows == 2
            and r.cols == 2
            and almost_equal(r[0, 0], math.cos(theta))
            and almost_equal(r[0, 1], -math.sin(theta))
            and almost_equal(r[1, 0], math.sin(theta))
            and almost_equal(r[1, 1], math.cos(theta))
        )

        out.write("Testing ScalingMatrix constructor...")
        s = ScalingMatrix(1.5)
        report(
            s.rows == 2
            and s.cols == 2
            and almost_equal(s[0, 0], 1.5)
            and almost_equal(s[0, 1], 0)
            and almost_equal(s[1, 0], 0)
            and almost_equal(s[1, 1], 1.5)
        )

        out.write("Testing TranslationMatrix constructor...")
        t = TranslationMatrix(5, -5, 3)
        report(
            t.rows == 2
            and t.cols == 3
            and all(almost_equal(t[0, j], 5) and almost_equal(t[1, j], -5) for j in range(3))
        )

        out.write("Testing Particles...\n")
        out.write("Testing Particle mapping to Cartesian origin...\n")
        cx, cy = self.center
        if cx != 0 or cy != 0:
            out.write(f"Failed. Expected (0,0). Received: ({cx:g},{cy:g})\n")
        else:
            out.write("Passed. +1\n")
            score += 1

        def check_mapping(action, expected):
            before = self._vertices()
            action()
            passed = True
            for (x0, y0), (x1, y1) in zip(before, self._vertices()):
                ex, ey = expected(x0, y0)
                if not almost_equal(x1, ex) or not almost_equal(y1, ey):
                    out.write(f"Failed mapping: ({x0:g}, {y0:g}) ({x1:g}, {y1:g})\n")
                    passed = False
            report(passed)

        out.write("Applying one rotation of 90 degrees about the origin...\n")
        check_mapping(lambda: self.rotate(math.pi / 2.0), lambda x, y: (-y, x))

        out.write("Applying a scale of 0.5...\n")
        check_mapping(lambda: self.scale(0.5), lambda x, y: (0.5 * x, 0.5 * y))

        out.write("Applying a translation of (10, 5)...\n")
        check_mapping(lambda: self.translate(10, 5), lambda x, y: (10 + x, 5 + y))

        out.write(f"Score: {score} / 7\n")
        return score