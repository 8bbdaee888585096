[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "containerkit"
version = "0.1.0"
description = "Container data structures: ring buffer, priority queue, doubly linked list with editing iterators, and FIFO queue."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "collections",
    "linked list",
    "priority queue",
    "heap",
    "ring buffer",
    "queue",
    "iterator",
    "data structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["containerkit"]

[tool.hatch.build.targets.sdist]
include = ["containerkit", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
