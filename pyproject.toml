[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "particlefx"
version = "0.1.0"
description = "Interactive firework particle effects driven by 2D matrix transforms"
requires-python = ">=3.10"
keywords = ["particles", "fireworks", "pygame", "matrix", "animation"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Multimedia :: Graphics",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
particlefx = "particlefx.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["particlefx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
