"""The interactive window: spawns particles under the mouse and draws them with trails."""

from __future__ import annotations

import argparse
import random
import sys

import pygame

from particlefx.particle import Particle, ParticleType

FADE_ALPHA = 10
FONT_SIZE = 50
TEXT_POSITION = (20, 20)
TEXT_COLOR = (255, 255, 255)
PARTICLES_PER_FRAME = 2
MIN_POINTS = 25
POINT_SPREAD = 26


class Engine:
    """Owns the window, the trail surface, the sound and the live particles."""

    def __init__(self, size=None, sound_path="firework.wav", font_path="times.ttf", rng=None):
        pygame.init()
        if size is None:
            size = pygame.display.get_desktop_sizes()[0]
        self.size = (int(size[0]), int(size[1]))
        self.window = pygame.display.set_mode(self.size)
        pygame.display.set_caption("Particles")
        self.trail = pygame.Surface(self.size)
        self.trail.fill((0, 0, 0))
        self.rng = rng if rng is not None else random.Random()
        self.particles = []
        self.mouse_held = False
        self.running = True

        self.sound = None
        if sound_path is not None:
            try:
                if not pygame.mixer.get_init():
                    pygame.mixer.init()
                self.sound = pygame.mixer.Sound(sound_path)
            except (pygame.error, OSError) as exc:
                raise RuntimeError(f"Failed to load {sound_path}") from exc

        self.font = self._load_font(font_path)

    @staticmethod
    def _load_font(font_path):
        if font_path is not None:
            try:
                return pygame.font.Font(font_path, FONT_SIZE)
            except (pygame.error, OSError):
                print("Failed to load font!", file=sys.stderr)
        return pygame.font.Font(None, FONT_SIZE)

    def input(self):
        """Handle pending window events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                self.running = False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_s:
                Particle.mode = (
                    ParticleType.NORMAL
                    if Particle.mode is ParticleType.SPIRAL
                    else ParticleType.SPIRAL
                )
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.mouse_held = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.mouse_held = False

    def update(self, dt):
        """Spawn particles while the mouse is held, then advance or drop each one."""
        mouse_position = pygame.mouse.get_pos()
        if self.mouse_held and pygame.key.get_focused():
            for _ in range(PARTICLES_PER_FRAME):
                num_points = MIN_POINTS + self.rng.randrange(POINT_SPREAD)
                self.particles.append(
                    Particle(self.size, num_points, mouse_position, self.rng)
                )
                if self.sound is not None:
                    self.sound.play()

        alive = [particle for particle in self.particles if particle.ttl > 0.0]
        for particle in alive:
            particle.update(dt, mouse_position)
        self.particles = alive

    def draw(self):
        """Fade the trail, draw the particles onto it and show it in the window."""
        fade = pygame.Surface(self.size, pygame.SRCALPHA)
        fade.fill((0, 0, 0, FADE_ALPHA))
        self.trail.blit(fade, (0, 0))

        if self.particles:
            for particle in self.particles:
                particle.draw(self.trail)
            label = f"Current Mode : {Particle.mode.value}"
            self.trail.blit(self.font.render(label, True, TEXT_COLOR), TEXT_POSITION)

        self.window.fill((0, 0, 0))
        self.window.blit(self.trail, (0, 0))
        pygame.display.flip()

    def run(self):
        """Run the self checks, then the main loop until the window is closed."""
        clock = pygame.time.Clock()
        print("Starting Particle unit tests...")
        width, height = self.size
        probe = Particle(self.size, 4, (width // 2, height // 2), self.rng)
        probe.unit_tests()
        print("Unit tests complete.  Starting engine...")

        while self.running:
            dt = clock.tick() / 1000.0
            self.input()
            self.update(dt)
            self.draw()


def main(argv=None):
    """Open the particle window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="particlefx", description="Firework particles.")
    parser.add_argument("--size", nargs=2, type=int, metavar=("WIDTH", "HEIGHT"))
    parser.add_argument("--sound", default="firework.wav")
    parser.add_argument("--font", default="times.ttf")
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    try:
        engine = Engine(args.size, args.sound, args.font, rng)
        engine.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())