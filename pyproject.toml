[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sbrcs"
version = "0.1.0"
description = "Monostatic radar cross section by shooting and bouncing rays over a bounding volume hierarchy of triangles"
requires-python = ">=3.10"
dependencies = []
keywords = ["radar", "rcs", "sbr", "ray tracing", "bvh", "electromagnetics", "physical optics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sbrcs-mono-rcs = "sbrcs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sbrcs"]

[tool.pytest.ini_options]
addopts = "-ra"
