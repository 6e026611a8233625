[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rockfield"
version = "0.1.0"
description = "Building blocks for a vector-style asteroid field game: matrices, 2D physics, Wavefront models, timers and shape geometry."
requires-python = ">=3.10"
dependencies = []
keywords = ["asteroids", "game", "physics", "wavefront", "obj", "matrix", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rockfield"]

[tool.pytest.ini_options]
addopts = "-ra"
