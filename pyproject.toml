[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wyvern"
version = "0.1.0"
description = "Data-driven building blocks for a block-game server: typed components, blocks, chunks, dimensions, entities, items, inventories and events"
requires-python = ">=3.10"
dependencies = []
keywords = ["game-server", "voxel", "components", "chunks", "entities", "events"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wyvern"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
