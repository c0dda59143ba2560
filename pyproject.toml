[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reactorkit"
version = "3.0.0"
description = "Building blocks for event-driven network programs: containers, HTTP message writing, sockets and byte strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "containers", "hash map", "linked list", "vector", "sockets", "tls"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reactorkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
