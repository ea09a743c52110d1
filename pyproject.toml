[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "octospatial"
version = "0.1.0"
description = "Spatial math, look-up tables and ray casting helpers for sparse voxel octrees"
requires-python = ">=3.10"
dependencies = []
keywords = ["octree", "voxel", "raytracing", "bitmap", "3d", "spatial"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["octospatial"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
