# particlefx

A small interactive firework toy built on pygame. Hold the left mouse button
to spawn bursts of colourful star-shaped particles. Each particle spins,
shrinks and falls under gravity, and the particles leave a fading trail
behind them.

Every particle is stored as a 2×N matrix of points. Rotation, scaling and
translation are carried out with plain matrix arithmetic from
`particlefx.matrices`.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running

```
particlefx
```

Options:

- `--size WIDTH HEIGHT`: window size in pixels (default: the size of the
  first desktop)
- `--sound PATH`: sound played whenever particles spawn (default:
  `firework.wav`)
- `--font PATH`: font for the mode label (default: `times.ttf`)
- `--seed N`: seed for the random number generator, for repeatable particles

The sound file must exist and be loadable; otherwise the program stops with
`RuntimeError: Failed to load <path>`. The font is optional: if it cannot be
loaded, "Failed to load font!" is printed to standard error and pygame's
default font is used instead. Both default paths are relative to the working
directory.

When it starts, the program runs a short self-check of the matrix and
particle transforms on a probe particle at the centre of the window, prints
the results and a score out of 7 to standard output, and then runs the
animation loop.

Controls:

- **Left mouse button (hold)**: spawn two particles per frame at the cursor,
  each with 25 to 50 points
- **S**: switch between the *Normal* mode and the *Spiral* mode. In Normal
  mode particles fly off with a random velocity and fall under gravity. In
  Spiral mode they are pushed away from the mouse pointer instead, and their
  outer colour cycles each frame.
- **Escape**, or closing the window: quit

The label "Current Mode : Normal" or "Current Mode : Spiral" is drawn while
particles are on screen. Each particle lives for 5 seconds.

## Using the library

```python
import io
import random

from particlefx.matrices import Matrix, RotationMatrix, ScalingMatrix, TranslationMatrix
from particlefx.particle import Particle, ParticleType, almost_equal

m = Matrix(2, 3)
m[0, 1] = 4.0
shifted = m + TranslationMatrix(1.0, -1.0, 3)
turned = RotationMatrix(0.5) * shifted
print(turned)

p = Particle((800, 600), 25, (400, 300), random.Random(1))
p.update(1 / 60, (400, 300))
points = p.polygon()   # pixel positions: centre first, then each vertex

probe = Particle((800, 600), 4, (400, 300), random.Random(1))
score = probe.unit_tests(io.StringIO())   # 7 when all checks pass
```

Matrices compare equal when they have the same shape and every element
differs by less than 0.001. Addition requires the same number of columns and
multiplication requires matching inner dimensions; otherwise `ValueError` is
raised. Indexing outside the matrix raises `IndexError`.

`Particle.mode` is a class-wide setting holding a `ParticleType`
(`NORMAL` or `SPIRAL`); it affects both newly created particles and
`update()`.

`particlefx.engine.Engine` opens the window itself. Pass `sound_path=None`
to run without sound, and call its `run()` method to start the animation
from your own script.