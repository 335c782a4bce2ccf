[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterlab"
version = "0.1.0"
description = "Classic raster graphics algorithms: line and circle drawing, fills, polygon clipping, transforms and Koch curves"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "rasterization", "bresenham", "dda", "clipping", "flood-fill", "koch"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rasterlab = "rasterlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rasterlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
