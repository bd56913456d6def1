[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voxelspark"
version = "0.1.0"
description = "A small voxel game core: events, layers, entities, fonts, and a block world with ray casting"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "game", "events", "layers", "raycast", "entity-component"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["voxelspark"]

[tool.pytest.ini_options]
addopts = "-ra"
