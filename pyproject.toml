[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cseskit"
version = "0.1.0"
description = "Classic competitive-programming problems solved as plain Python functions and data structures"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "dynamic-programming",
    "graphs",
    "segment-tree",
    "fenwick-tree",
    "convex-hull-trick",
    "data-structures",
]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cseskit"]

[tool.pytest.ini_options]
addopts = "-ra"
