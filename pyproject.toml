[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubengine"
version = "0.1.0"
description = "Building blocks for a software raycaster: player movement, ray setup, wall spans, XPM textures and an in-memory display"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "game", "xpm", "first-person", "graphics", "x11-colors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubengine"]

[tool.pytest.ini_options]
addopts = "-ra"
